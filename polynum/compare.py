"""
Polynum Number Comparisons
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .options import ComparisonOperator, Precision, RangeOptions, resolve_options
from .tools import fmt_value
from .validators import is_in_range, validate_number

_OPERATORS = {
    ComparisonOperator.EQ: operator.eq,
    ComparisonOperator.NE: operator.ne,
    ComparisonOperator.GT: operator.gt,
    ComparisonOperator.GE: operator.ge,
    ComparisonOperator.LT: operator.lt,
    ComparisonOperator.LE: operator.le,
}


# Methods --------------------------------------------------------------------------------------------------------------

def compare_numbers(a: Any, b: Any, op: ComparisonOperator | str) -> bool:
    """
    Compare two numbers with one of "=", "!=", ">", ">=", "<", "<=".

    Examples:
        >>> compare_numbers(5, 3, ">")
        True
        >>> compare_numbers(5, 5, "!=")
        False
    """
    validate_number(a, "a")
    validate_number(b, "b")
    try:
        func = _OPERATORS[ComparisonOperator(op)]
    except ValueError:
        raise NumberFormatError(f"Invalid comparison operator: {fmt_value(op)}") from None
    return func(a, b)


def is_approximately_equal(a: Any, b: Any, precision: Precision | None = None, **overrides) -> bool:
    """
    Check whether two numbers differ by less than a tolerance.

    With a ``relative`` tolerance the difference is compared against
    ``relative * |a + b| / 2``; when that average is zero the ``absolute``
    tolerance is used instead. Without one, |a - b| < ``absolute`` (default 1e-10).

    Examples:
        >>> is_approximately_equal(0.1 + 0.2, 0.3)
        True
        >>> is_approximately_equal(100, 101, relative=0.02)
        True
    """
    validate_number(a, "a")
    validate_number(b, "b")
    opts = resolve_options(Precision, precision, overrides)
    validate_number(opts.absolute, "absolute tolerance")

    diff = abs(a - b)
    if opts.relative is not None:
        validate_number(opts.relative, "relative tolerance")
        avg = abs(a + b) / 2
        if avg == 0:
            return diff < opts.absolute
        return diff / avg < opts.relative

    return diff < opts.absolute


def is_within_range(value: Any, options: RangeOptions | None = None, **overrides) -> bool:
    """
    Check whether ``value`` lies within the configured bounds.

    Omitted bounds are unbounded. ``inclusive`` (default True) decides whether the
    bounds themselves are in range.

    Examples:
        >>> is_within_range(10, min=0, max=10)
        True
        >>> is_within_range(10, min=0, max=10, inclusive=False)
        False

    Raises:
        NumberFormatError: On non-finite input or when min > max.
    """
    opts = resolve_options(RangeOptions, options, overrides)
    validate_number(value)
    min_value = -math.inf if opts.min is None else validate_number(opts.min, "min")
    max_value = math.inf if opts.max is None else validate_number(opts.max, "max")
    if min_value > max_value:
        raise NumberFormatError(f"Min value cannot be greater than max value: {min_value} > {max_value}")
    return is_in_range(value, min_value, max_value, opts.inclusive)
