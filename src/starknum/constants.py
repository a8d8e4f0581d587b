import re

HEX_PATTERN = re.compile(r"^0x[0-9a-f]*$", re.IGNORECASE)
WHOLE_NUMBER_PATTERN = re.compile(r"^\d+$", re.ASCII)

# Slot addresses are 251 bits wide: 0x + 0 + [0-7] + up to 62 hex digits.
STORAGE_KEY_PATTERN = re.compile(r"^0x0[0-7][a-fA-F0-9]{0,62}$")
STORAGE_KEY_DIGITS = 64

MASK_31 = 2**31 - 1

__all__ = [
    "HEX_PATTERN",
    "MASK_31",
    "STORAGE_KEY_DIGITS",
    "STORAGE_KEY_PATTERN",
    "WHOLE_NUMBER_PATTERN",
]
