"""
Polynum Value Validators

Predicates deciding whether numbers, decimal counts and separators are usable, plus
the range membership check. These predicates never raise; callers turn a False
result into NumberFormatError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .options import numbers_conf
from .tools import fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def is_valid_number(value: Any) -> bool:
    """
    Return True for a finite int or float.

    Booleans are rejected even though bool subclasses int. NaN, ±inf and other
    numeric types such as Decimal or Fraction are rejected.

    Examples:
        >>> is_valid_number(3.5)
        True
        >>> is_valid_number(float("inf"))
        False
        >>> is_valid_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_valid_decimals(decimals: Any) -> bool:
    """Return True for an integer decimal count in [0, 20]."""
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        return False
    return 0 <= decimals <= numbers_conf.MAX_DECIMALS


def is_valid_separator(separator: Any) -> bool:
    """Return True for a string of at most 3 characters."""
    return isinstance(separator, str) and len(separator) <= numbers_conf.MAX_SEPARATOR_LENGTH


def is_in_range(value: float, min_value: float, max_value: float, inclusive: bool = True) -> bool:
    """
    Return True when ``value`` lies between the bounds.

    Examples:
        >>> is_in_range(10, 0, 10)
        True
        >>> is_in_range(10, 0, 10, inclusive=False)
        False
    """
    if inclusive:
        return min_value <= value <= max_value
    return min_value < value < max_value


def validate_number(value: Any, name: str = "value") -> Any:
    """Return ``value`` unchanged, or raise NumberFormatError if it is not usable."""
    if not is_valid_number(value):
        raise NumberFormatError(f"Invalid number input: {name} must be a finite number, got {fmt_value(value)}")
    return value


def validate_decimals(decimals: Any, name: str = "decimals") -> int:
    """Return ``decimals`` unchanged, or raise NumberFormatError if out of [0, 20]."""
    if not is_valid_decimals(decimals):
        raise NumberFormatError(
            f"Invalid {name} value: must be an integer between 0 and {numbers_conf.MAX_DECIMALS}, "
            f"got {fmt_value(decimals)}"
        )
    return decimals
