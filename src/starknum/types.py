"""The BigNumberish union: every shape a number may take at the API edge.

Plain ``int``, ``float`` and ``str`` values are accepted everywhere. A
:class:`Numberish` carries the same value with its kind resolved and its
string form validated up front, so it can be handed around without being
checked again.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from hexcodec import decimal_to_int

from .constants import HEX_PATTERN, WHOLE_NUMBER_PATTERN
from .errors import FormatError, ParseError


class NumberKind(Enum):
    NUMBER = "number"
    BIG_INT = "bigint"
    DECIMAL_STRING = "decimal"
    HEX_STRING = "hex"


@dataclass(frozen=True)
class Numberish:
    kind: NumberKind
    value: int | float | str

    @classmethod
    def from_number(cls, value: int | float) -> Numberish:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError(f"{value!r} is not a number")
        if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
            raise ParseError(f"{value!r} is not an integral number")
        return cls(NumberKind.NUMBER, value)

    @classmethod
    def from_big_int(cls, value: int) -> Numberish:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParseError(f"{value!r} is not an integer")
        return cls(NumberKind.BIG_INT, value)

    @classmethod
    def from_string(cls, value: str) -> Numberish:
        if not isinstance(value, str):
            raise FormatError(f"{value!r} needs to be a hex-string or whole-number-string")
        if HEX_PATTERN.fullmatch(value):
            return cls(NumberKind.HEX_STRING, value)
        if WHOLE_NUMBER_PATTERN.fullmatch(value):
            return cls(NumberKind.DECIMAL_STRING, value)
        raise FormatError(f"{value} needs to be a hex-string or whole-number-string")

    @classmethod
    def parse(cls, value: BigNumberish) -> Numberish:
        if isinstance(value, Numberish):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, float):
            return cls.from_number(value)
        return cls.from_big_int(value)

    def to_int(self) -> int:
        if self.kind is NumberKind.HEX_STRING:
            digits = str(self.value)[2:]
            if not digits:
                raise ParseError(f"{self.value} has no hex digits")
            return int(digits, 16)
        if self.kind is NumberKind.DECIMAL_STRING:
            return decimal_to_int(str(self.value))
        return int(self.value)


BigNumberish: TypeAlias = int | float | str | Numberish

__all__ = ["BigNumberish", "NumberKind", "Numberish"]
