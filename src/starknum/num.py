from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from typing import Any

from hexcodec import (
    add_hex_prefix,
    buf2hex,
    decimal_to_int,
    int_to_decimal,
    pad_left,
    remove_hex_prefix,
    sha256,
)

from .constants import (
    HEX_PATTERN,
    MASK_31,
    STORAGE_KEY_DIGITS,
    STORAGE_KEY_PATTERN,
    WHOLE_NUMBER_PATTERN,
)
from .errors import FormatError, ParseError, RangeError
from .types import BigNumberish, Numberish

logger = logging.getLogger(__name__)

_DECIMAL_LITERAL = re.compile(r"^[+-]?\d+$", re.ASCII)
_RADIX_LITERAL = re.compile(r"^0([xob])([0-9a-f]+)$", re.IGNORECASE)
_RADIX = {"x": 16, "o": 8, "b": 2}


def is_hex(hex_str: str) -> bool:
    """True if ``hex_str`` is a ``0x``-prefixed hex-string (case-insensitive)."""
    return isinstance(hex_str, str) and HEX_PATTERN.fullmatch(hex_str) is not None


def is_string_whole_number(s: str) -> bool:
    """True for strings of decimal digits only: ``"100"`` but not ``"10.0"``."""
    return isinstance(s, str) and WHOLE_NUMBER_PATTERN.fullmatch(s) is not None


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_big_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_big_numberish(value: Any) -> bool:
    """True for 234, 234.0, "234", "0xea" or a Numberish; false for "ZERO"."""
    if isinstance(value, Numberish):
        return True
    if is_number(value) or is_big_int(value):
        return True
    return isinstance(value, str) and (is_hex(value) or is_string_whole_number(value))


def is_storage_key(value: Any) -> bool:
    return isinstance(value, str) and STORAGE_KEY_PATTERN.fullmatch(value) is not None


def _parse_int_string(s: str) -> int:
    text = s.strip()
    try:
        if _DECIMAL_LITERAL.fullmatch(text):
            return decimal_to_int(text)
        m = _RADIX_LITERAL.fullmatch(text)
        if m:
            return int(m.group(2), _RADIX[m.group(1).lower()])
    except ValueError as e:
        logger.debug("rejected integer literal %r", s)
        raise ParseError(f"cannot convert {s!r} to an integer") from e
    logger.debug("rejected integer literal %r", s)
    raise ParseError(f"cannot convert {s!r} to an integer")


def to_big_int(value: BigNumberish) -> int:
    """Convert a BigNumberish to ``int``.

    Strings may be decimal (optionally signed) or carry a ``0x``/``0o``/``0b``
    prefix. Floats must be finite and integral.
    """
    if isinstance(value, Numberish):
        return value.to_int()
    if isinstance(value, bool):
        raise ParseError(f"cannot convert {value!r} to an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not (math.isfinite(value) and value.is_integer()):
            logger.debug("rejected non-integral number %r", value)
            raise ParseError(f"cannot convert {value!r} to an integer")
        return int(value)
    if isinstance(value, str):
        return _parse_int_string(value)
    raise ParseError(f"cannot convert {type(value).__name__} to an integer")


def to_hex(value: BigNumberish) -> str:
    """Canonical hex-string: lowercase, ``0x`` prefix, no leading zeros."""
    n = to_big_int(value)
    if n < 0:
        return "-0x" + format(-n, "x")
    return add_hex_prefix(format(n, "x"))


to_hex_string = to_hex


def to_storage_key(value: BigNumberish, *, strict: bool = False) -> str:
    """Hex-string left-padded to 64 digits.

    Only the width is guaranteed. Values wider than 64 digits are returned
    as they are; pass ``strict=True`` to require the key to also fit the
    storage-key range (``0x0`` + ``[0-7]`` + 62 digits).
    """
    n = to_big_int(value)
    if n < 0:
        raise RangeError("storage key cannot be negative")
    key = add_hex_prefix(pad_left(format(n, "x"), STORAGE_KEY_DIGITS))
    if strict and not is_storage_key(key):
        raise RangeError(f"{key} is out of the storage key range")
    return key


def hex_to_decimal_string(hex_str: str) -> str:
    """Decimal string of a hex-string; the ``0x`` prefix is optional."""
    prefixed = add_hex_prefix(hex_str)
    digits = prefixed[2:]
    if not digits or not HEX_PATTERN.fullmatch(prefixed):
        logger.debug("rejected hex-string %r", hex_str)
        raise ParseError(f"cannot convert {hex_str!r} from hex")
    return int_to_decimal(int(digits, 16))


def clean_hex(hex_str: str) -> str:
    """Lowercase a hex-string and drop leading zeros after the prefix.

    Zero keeps a single digit. Input must already be a hex-string.
    """
    return re.sub(r"^(0x)0+(?=[0-9a-f])", r"\1", hex_str.lower())


def assert_in_range(
    value: BigNumberish,
    lower_bound: BigNumberish,
    upper_bound: BigNumberish,
    input_name: str = "",
) -> None:
    """Raise RangeError unless ``lower_bound <= value <= upper_bound``.

    ``input_name`` ends up in the error message.
    """
    suffix = f"invalid {input_name} length" if input_name else "invalid length"
    n = to_big_int(value)
    if not to_big_int(lower_bound) <= n <= to_big_int(upper_bound):
        logger.debug("%s outside its bounds", input_name or "input")
        raise RangeError(f"Message not signable, {suffix}.")


def big_numberish_array_to_decimal_string_array(data: Iterable[BigNumberish]) -> list[str]:
    return [int_to_decimal(to_big_int(x)) for x in data]


def big_numberish_array_to_hexadecimal_string_array(data: Iterable[BigNumberish]) -> list[str]:
    return [to_hex(x) for x in data]


def get_decimal_string(s: str) -> str:
    if is_hex(s):
        return hex_to_decimal_string(s)
    if is_string_whole_number(s):
        return s
    logger.debug("rejected numeric string %r", s)
    raise FormatError(f"{s} needs to be a hex-string or whole-number-string")


def get_hex_string(s: str) -> str:
    # hex-strings come back untouched, not cleaned
    if is_hex(s):
        return s
    if is_string_whole_number(s):
        return to_hex(s)
    logger.debug("rejected numeric string %r", s)
    raise FormatError(f"{s} needs to be a hex-string or whole-number-string")


def get_hex_string_array(array: Iterable[str]) -> list[str]:
    return [get_hex_string(s) for s in array]


def to_cairo_bool(value: bool) -> str:
    return "1" if value else "0"


def hex_to_bytes(hex_str: str) -> bytes:
    """Decode a hex-string; odd digit counts get one leading zero nibble."""
    if not is_hex(hex_str):
        logger.debug("rejected hex-string %r", hex_str)
        raise FormatError(f"{hex_str} needs to be a hex-string")
    digits = remove_hex_prefix(hex_str)
    if len(digits) % 2 != 0:
        digits = "0" + digits
    return bytes.fromhex(digits)


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def add_percent(value: BigNumberish, percent: int) -> int:
    """Add ``percent`` percent of ``value`` to itself.

    The percentage part is truncated toward zero, so ``add_percent(3, -50)``
    is 2, not 1.
    """
    n = to_big_int(value)
    return n + _div_trunc(n * to_big_int(percent), 100)


def string_to_sha256_to_array_buff4(text: str, *, fixed_width: bool = True) -> bytes:
    """Low 31 bits of the SHA-256 of ``text``, as bytes.

    Used for wallet derivation path segments. With ``fixed_width`` the
    result is always 4 bytes; otherwise it is the minimal encoding of the
    masked value, which is shorter when its top bits are zero.
    """
    masked = int(buf2hex(sha256(text)), 16) & MASK_31
    if fixed_width:
        return masked.to_bytes(4, byteorder="big")
    return hex_to_bytes(to_hex(masked))


__all__ = [
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
