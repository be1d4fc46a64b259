"""
utils/parsing.py
----------------
Conversion of raw user input (path segments, JSON values, console lines)
into numbers. Anything that is not a clean number raises ValidationError.
Only plain ASCII digits are accepted; no underscores or other scripts.
"""

import math
import re
from typing import Any

from utils.exceptions import ValidationError

_INT = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def parse_int(value: Any, field: str = "id") -> int:
    """
    Parse a whole number.

    Args:
        value: An int, or a string holding one.
        field: Field name used in the error message.

    Raises:
        ValidationError: For booleans, floats, empty or non-numeric strings.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid Input for {field} - Please insert whole numbers!")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT.match(value.strip()):
        return int(value.strip())
    raise ValidationError(f"Invalid Input for {field} - Please insert whole numbers!")


def parse_float(value: Any, field: str = "value") -> float:
    """
    Parse a finite real number.

    Args:
        value: An int, float, or a string holding one.
        field: Field name used in the error message.

    Raises:
        ValidationError: For booleans, non-numeric strings, NaN or infinity.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid Input for {field} - Please insert numeric values!")
    number = None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and _FLOAT.match(value.strip()):
        number = float(value.strip())
    if number is None or not math.isfinite(number):
        raise ValidationError(f"Invalid Input for {field} - Please insert numeric values!")
    return number
