"""Type coercion helpers for environment variable values."""

import math
import re
from typing import Optional, Union

# Plain ASCII decimal notation only; underscores, Unicode digits and
# prefixed forms like 0x10 are not numbers here.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def env_as_boolean(value: Optional[str]) -> bool:
    """True when the variable is present, whatever its contents.

    This is a presence check, not a truthy parse: ``""``, ``"0"`` and
    ``"false"`` all coerce to True. Only an absent value (None) is False.
    """
    return value is not None


def env_as_number(value: Optional[str]) -> Union[int, float]:
    """Parse a numeric value, falling back to 0.

    Integers stay ``int``; other decimal or exponent forms that give a finite
    number are returned as ``float``. Absent, empty, malformed and infinite
    values all yield 0.
    """
    if value is None:
        return 0
    text = value.strip()
    if not _NUMBER.fullmatch(text):
        return 0
    if _INTEGER.fullmatch(text):
        return int(text)
    number = float(text)
    return number if math.isfinite(number) else 0


def env_as_string(value: Optional[str]) -> str:
    """The value verbatim, or an empty string when absent."""
    return value if value is not None else ""
