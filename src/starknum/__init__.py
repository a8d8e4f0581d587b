from .constants import MASK_31, STORAGE_KEY_PATTERN
from .errors import FormatError, NumError, ParseError, RangeError
from .num import (
    add_percent,
    assert_in_range,
    big_numberish_array_to_decimal_string_array,
    big_numberish_array_to_hexadecimal_string_array,
    clean_hex,
    get_decimal_string,
    get_hex_string,
    get_hex_string_array,
    hex_to_bytes,
    hex_to_decimal_string,
    is_big_int,
    is_big_numberish,
    is_boolean,
    is_hex,
    is_number,
    is_storage_key,
    is_string_whole_number,
    string_to_sha256_to_array_buff4,
    to_big_int,
    to_cairo_bool,
    to_hex,
    to_hex_string,
    to_storage_key,
)
from .types import BigNumberish, NumberKind, Numberish

__all__ = [
    "BigNumberish",
    "FormatError",
    "MASK_31",
    "NumError",
    "NumberKind",
    "Numberish",
    "ParseError",
    "RangeError",
    "STORAGE_KEY_PATTERN",
    "add_percent",
    "assert_in_range",
    "big_numberish_array_to_decimal_string_array",
    "big_numberish_array_to_hexadecimal_string_array",
    "clean_hex",
    "get_decimal_string",
    "get_hex_string",
    "get_hex_string_array",
    "hex_to_bytes",
    "hex_to_decimal_string",
    "is_big_int",
    "is_big_numberish",
    "is_boolean",
    "is_hex",
    "is_number",
    "is_storage_key",
    "is_string_whole_number",
    "string_to_sha256_to_array_buff4",
    "to_big_int",
    "to_cairo_bool",
    "to_hex",
    "to_hex_string",
    "to_storage_key",
]
