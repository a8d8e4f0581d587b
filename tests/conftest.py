from pathlib import Path
import sys

import pytest

# Run against `src/` when the package is not installed
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def word_values() -> list[int]:
    """Values spanning one nibble up to a full 256-bit word."""
    return [0, 1, 15, 16, 255, 256, 2**64 + 3, 2**251 - 1, 2**256 - 1]
