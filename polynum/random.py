"""
Polynum Random Number Tools
"""

# Standard library -----------------------------------------------------------------------------------------------------
import random

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .numeric import round_to_precision
from .validators import validate_decimals, validate_number


# Methods --------------------------------------------------------------------------------------------------------------

def random_number(
        min_value: float,
        max_value: float,
        decimals: int = 0,
        seed: int | None = None) -> float:
    """
    Return a uniform random number in [min_value, max_value] rounded to ``decimals`` places.

    Args:
        min_value: Inclusive lower bound.
        max_value: Inclusive upper bound.
        decimals: Decimal places of the result, rounded to nearest.
        seed: If provided, use a dedicated deterministic RNG seeded with this value.
              If None, use random.SystemRandom.

    Raises:
        NumberFormatError: On non-finite bounds, invalid decimals, or min_value > max_value.
    """
    validate_number(min_value, "min")
    validate_number(max_value, "max")
    validate_decimals(decimals)
    if min_value > max_value:
        raise NumberFormatError(f"Min value cannot be greater than max value: {min_value} > {max_value}")

    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    value = rng.random() * (max_value - min_value) + min_value
    return round_to_precision(value, decimals)
