class NumError(ValueError):
    """Base class for conversion failures."""


class ParseError(NumError):
    """Input cannot be read as a number."""


class FormatError(NumError):
    """String is neither a hex-string nor a whole-number-string."""


class RangeError(NumError):
    """Value falls outside the accepted bounds."""


__all__ = ["FormatError", "NumError", "ParseError", "RangeError"]
