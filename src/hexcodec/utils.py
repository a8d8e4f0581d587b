from decimal import Decimal, InvalidOperation


def remove_hex_prefix(hex_str: str) -> str:
    if hex_str[:2].lower() == "0x":
        return hex_str[2:]
    return hex_str


def add_hex_prefix(hex_str: str) -> str:
    return "0x" + remove_hex_prefix(hex_str)


def buf2hex(data: bytes | bytearray | memoryview) -> str:
    """Hex digits of a byte buffer, lowercase, no prefix."""
    return bytes(data).hex()


def pad_left(digits: str, width: int, fill: str = "0") -> str:
    if len(fill) != 1:
        raise ValueError("Fill must be a single character.")
    return digits.rjust(width, fill)


# Decimal avoids the int/str digit limit in both directions.
def decimal_to_int(digits: str) -> int:
    try:
        return int(Decimal(digits))
    except (InvalidOperation, OverflowError) as e:
        raise ValueError(f"{digits!r} is not a decimal integer") from e


def int_to_decimal(n: int) -> str:
    return str(Decimal(n))
