"""
Descriptive statistics over sequences of numbers.

Each function accepts any iterable of numbers (except text). By default a
non-finite or non-numeric entry raises NumberFormatError; with ``ignore_invalid``
such entries are dropped before computing.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from collections import Counter
from typing import Any, Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .numeric import round_to_precision
from .options import StatisticsOptions, resolve_options
from .tools import fmt_value
from .validators import is_valid_number


# Methods --------------------------------------------------------------------------------------------------------------

def sum(numbers: Iterable[float], ignore_invalid: bool = False) -> float:
    """
    Return the arithmetic total; 0 for an empty sequence.

    Examples:
        >>> sum([1, 2, 3, 4, 5])
        15
        >>> sum([1, 2, float("nan"), 4], ignore_invalid=True)
        7
    """
    total = 0
    for x in _valid_numbers(numbers, ignore_invalid):
        total += x
    return total


def average(numbers: Iterable[float], ignore_invalid: bool = False) -> float:
    """
    Return the arithmetic mean; 0 for an empty sequence.

    With ``ignore_invalid`` the mean is taken over the valid entries only, so
    ``average([1, 2, nan, 4], True)`` is 7/3.
    """
    valid = _valid_numbers(numbers, ignore_invalid)
    if not valid:
        return 0
    return sum(valid) / len(valid)


def median(numbers: Iterable[float], options: StatisticsOptions | None = None, **overrides) -> float:
    """
    Return the median rounded to ``precision`` decimals; 0 for an empty sequence.

    Even-length sequences give the mean of the two middle values.

    Args:
        numbers: Iterable of numbers.
        options: StatisticsOptions record.
        **overrides: ignore_invalid (False), precision (2).

    Examples:
        >>> median([1, 2, 3, 4, 5])
        3.0
        >>> median([1, 4, 3, 2])
        2.5
    """
    opts = resolve_options(StatisticsOptions, options, overrides)
    valid = sorted(_valid_numbers(numbers, opts.ignore_invalid))
    if not valid:
        return 0

    mid = len(valid) // 2
    if len(valid) % 2 == 0:
        return round_to_precision((valid[mid - 1] + valid[mid]) / 2, opts.precision)
    return round_to_precision(valid[mid], opts.precision)


def mode(numbers: Iterable[float], options: StatisticsOptions | None = None, **overrides) -> list[float]:
    """
    Return every most frequent value, ascending; [] for an empty sequence.

    Values are bucketed after rounding to ``precision`` decimals, and the bucket
    values are what is returned.

    Examples:
        >>> mode([1, 1, 2, 2, 3])
        [1.0, 2.0]
        >>> mode([1.11, 1.12, 1.11], precision=1)
        [1.1]
    """
    opts = resolve_options(StatisticsOptions, options, overrides)
    valid = _valid_numbers(numbers, opts.ignore_invalid)
    if not valid:
        return []

    frequency = Counter(round_to_precision(x, opts.precision) for x in valid)
    top = max(frequency.values())
    return sorted(value for value, count in frequency.items() if count == top)


def _valid_numbers(numbers: Any, ignore_invalid: bool) -> list:
    if isinstance(numbers, (str, bytes, bytearray)) or not isinstance(numbers, abc.Iterable):
        raise NumberFormatError(f"Input must be an iterable of numbers, got {fmt_value(numbers)}")

    valid = []
    for x in numbers:
        if is_valid_number(x):
            valid.append(x)
        elif not ignore_invalid:
            raise NumberFormatError(f"Invalid number in sequence: {fmt_value(x)}")
    return valid
