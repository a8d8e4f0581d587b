from .hashing import sha256
from .utils import (
    add_hex_prefix,
    buf2hex,
    decimal_to_int,
    int_to_decimal,
    pad_left,
    remove_hex_prefix,
)

__all__ = [
    "add_hex_prefix",
    "buf2hex",
    "decimal_to_int",
    "int_to_decimal",
    "pad_left",
    "remove_hex_prefix",
    "sha256",
]
