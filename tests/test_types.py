import pytest

from starknum import FormatError, NumberKind, Numberish, ParseError, to_big_int, to_hex


def test_constructors_tag_kind():
    assert Numberish.from_number(10).kind is NumberKind.NUMBER
    assert Numberish.from_number(1e3).to_int() == 1000
    assert Numberish.from_big_int(2**200).kind is NumberKind.BIG_INT
    assert Numberish.from_string("0x1A").kind is NumberKind.HEX_STRING
    assert Numberish.from_string("42").kind is NumberKind.DECIMAL_STRING


def test_from_string_validates_up_front():
    for bad in ("ZERO", "-1", "1.5", "0x1g", " 12", "12\n", ""):
        with pytest.raises(FormatError):
            Numberish.from_string(bad)


def test_non_integral_numbers_rejected():
    with pytest.raises(ParseError):
        Numberish.from_number(1.5)
    with pytest.raises(ParseError):
        Numberish.from_number(float("inf"))
    with pytest.raises(ParseError):
        Numberish.from_number(True)
    with pytest.raises(ParseError):
        Numberish.from_big_int(3.0)


def test_parse_dispatch():
    n = Numberish.from_string("7")
    assert Numberish.parse(n) is n
    assert Numberish.parse("0xff").kind is NumberKind.HEX_STRING
    assert Numberish.parse(5.0).kind is NumberKind.NUMBER
    assert Numberish.parse(5).kind is NumberKind.BIG_INT


def test_numberish_flows_through_conversions():
    assert to_big_int(Numberish.from_string("0x1a")) == 26
    assert to_hex(Numberish.from_string("255")) == "0xff"
    # "0x" is a valid hex-string but carries no digits
    with pytest.raises(ParseError):
        to_big_int(Numberish.from_string("0x"))


def test_frozen():
    n = Numberish.from_big_int(1)
    with pytest.raises(AttributeError):
        n.value = 2
