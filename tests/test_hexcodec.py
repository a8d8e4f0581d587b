import hashlib

import pytest

from hexcodec import (
    add_hex_prefix,
    buf2hex,
    decimal_to_int,
    int_to_decimal,
    pad_left,
    remove_hex_prefix,
    sha256,
)


def test_prefix_helpers():
    assert add_hex_prefix("64") == "0x64"
    assert add_hex_prefix("0x64") == "0x64"
    assert add_hex_prefix("0X64") == "0x64"
    assert remove_hex_prefix("0xabc") == "abc"
    assert remove_hex_prefix("abc") == "abc"
    assert remove_hex_prefix("") == ""


def test_buf2hex_and_pad_left():
    assert buf2hex(b"\x00\xff\x10") == "00ff10"
    assert buf2hex(bytearray(b"\x01")) == "01"
    assert pad_left("1a", 6) == "00001a"
    assert pad_left("abcdef", 4) == "abcdef"
    with pytest.raises(ValueError):
        pad_left("1", 4, fill="00")


def test_sha256_str_is_utf8():
    assert sha256("héllo") == hashlib.sha256("héllo".encode("utf-8")).digest()
    assert sha256(b"abc") == hashlib.sha256(b"abc").digest()
    assert len(sha256("")) == 32
    with pytest.raises(TypeError):
        sha256(123)


def test_decimal_helpers_have_no_digit_limit():
    digits = "9" * 6000
    n = decimal_to_int(digits)
    assert n == 10**6000 - 1
    assert int_to_decimal(n) == digits
    assert int_to_decimal(-n) == "-" + digits
    assert decimal_to_int("-42") == -42
    with pytest.raises(ValueError):
        decimal_to_int("12x")
