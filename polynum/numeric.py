"""
Numeric transforms over finite real numbers.

Clamping, precision rounding with selectable rounding mode, min-max normalization,
linear interpolation, significant-digit rounding and order of magnitude. Every
function raises NumberFormatError on unusable input.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .options import RoundingMode
from .tools import fmt_value, floor_log10, significant
from .validators import validate_decimals, validate_number


# Methods --------------------------------------------------------------------------------------------------------------

def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Restrict ``value`` to the closed interval [min_value, max_value].

    Examples:
        >>> clamp(15, 0, 10)
        10
        >>> clamp(2.4, 2.5, 3.5)
        2.5
    """
    validate_number(value)
    validate_number(min_value, "min")
    validate_number(max_value, "max")
    return min(max(value, min_value), max_value)


def round_to_precision(
        value: float,
        precision: int = 0,
        mode: RoundingMode | str = RoundingMode.ROUND,
) -> float:
    """
    Round a number to ``precision`` decimal places.

    The value is scaled by 10**precision, rounded to an integer with the selected
    mode, then scaled back.

    Parameters
    ----------
    value : float
        Finite number to round.
    precision : int, default 0
        Decimal places, an integer in [0, 20].
    mode : RoundingMode or str, default "round"
        - "round": nearest, halves toward +infinity (-2.5 → -2)
        - "ceil": toward +infinity
        - "floor": toward -infinity
        - "trunc": toward zero

    Returns
    -------
    float

    Raises
    ------
    NumberFormatError
        On a non-finite value, invalid precision or unknown mode.

    Examples
    --------
    >>> round_to_precision(3.14159, 2)
    3.14
    >>> round_to_precision(3.14159, 2, "ceil")
    3.15
    >>> round_to_precision(-3.14159, 2, "floor")
    -3.15
    """
    validate_number(value)
    validate_decimals(precision, "precision")
    try:
        mode = RoundingMode(mode)
    except ValueError:
        raise NumberFormatError(f"Invalid rounding mode: {fmt_value(mode)}") from None

    multiplier = 10 ** precision
    scaled = float(value) * multiplier
    if not math.isfinite(scaled):
        # Too large to carry fractional digits, already integral
        return float(value)

    if mode is RoundingMode.CEIL:
        rounded = math.ceil(scaled)
    elif mode is RoundingMode.FLOOR:
        rounded = math.floor(scaled)
    elif mode is RoundingMode.TRUNC:
        rounded = math.trunc(scaled)
    else:
        # floor(scaled + 0.5) is off by one when the sum itself rounds
        rounded = math.floor(scaled)
        if scaled - rounded >= 0.5:
            rounded += 1

    return rounded / multiplier


def normalize(value: float, min_value: float, max_value: float) -> float:
    """
    Map ``value`` linearly so that min_value → 0 and max_value → 1.

    The result is not clamped: values outside the bounds map outside [0, 1].

    Raises:
        NumberFormatError: On non-finite input or when min_value >= max_value.
    """
    validate_number(value)
    validate_number(min_value, "min")
    validate_number(max_value, "max")
    if min_value >= max_value:
        raise NumberFormatError(f"Min value must be less than max value: {min_value} >= {max_value}")
    return (value - min_value) / (max_value - min_value)


def interpolate(start: float, end: float, factor: float) -> float:
    """
    Linear interpolation ``start + (end - start) * factor``.

    Unlike normalize(), the factor is strictly bounded: it must lie in [0, 1].

    Examples:
        >>> interpolate(0, 10, 0.5)
        5.0
    """
    validate_number(start, "start")
    validate_number(end, "end")
    validate_number(factor, "factor")
    if factor < 0 or factor > 1:
        raise NumberFormatError(f"Factor must be between 0 and 1, got {fmt_value(factor)}")
    return start + (end - start) * factor


def to_significant_digits(value: float, significant_digits: int) -> float:
    """
    Round ``value`` to the given number of significant digits.

    Examples:
        >>> to_significant_digits(1234.567, 3)
        1230.0
        >>> to_significant_digits(0.0001234, 3)
        0.000123
    """
    validate_number(value)
    if (isinstance(significant_digits, bool) or not isinstance(significant_digits, int)
            or significant_digits < 1):
        raise NumberFormatError(
            f"Significant digits must be a positive integer, got {fmt_value(significant_digits)}"
        )
    return significant(value, significant_digits)


def order_of_magnitude(value: float) -> int:
    """
    Return floor(log10(|value|)) for a finite non-zero number.

    Examples:
        >>> order_of_magnitude(1234)
        3
        >>> order_of_magnitude(0.001234)
        -3
    """
    validate_number(value)
    if value == 0:
        raise NumberFormatError("Order of magnitude is undefined for zero")
    return floor_log10(value)
