"""
Polynum per-call configuration records and enumerations.

Records are frozen dataclasses built fresh at each call boundary: omitted fields take
the defaults documented here and keyword overrides are merged on top with
``dataclasses.replace``. Nothing in this module holds mutable shared state.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from enum import StrEnum, unique
from typing import Any, TypeVar


# Constants ------------------------------------------------------------------------------------------------------------

class NumbersConf:
    """Read-only package-wide limits and defaults."""

    MAX_SAFE_INTEGER = 2 ** 53 - 1
    MAX_DECIMALS = 20
    MAX_SEPARATOR_LENGTH = 3
    DEFAULT_LOCALE = "en-US"
    DEFAULT_CURRENCY = "USD"
    DEFAULT_TOLERANCE = 1e-10


numbers_conf = NumbersConf()

T = TypeVar("T")


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class RoundingMode(StrEnum):
    """
    Rounding policies for round_to_precision().

    Attributes:
        ROUND (str) : Nearest, halves toward +infinity - 2.5 → 3, -2.5 → -2
        CEIL (str)  : Toward +infinity - 2.1 → 3, -2.9 → -2
        FLOOR (str) : Toward -infinity - 2.9 → 2, -2.1 → -3
        TRUNC (str) : Toward zero - 2.9 → 2, -2.9 → -2
    """
    ROUND = "round"
    CEIL = "ceil"
    FLOOR = "floor"
    TRUNC = "trunc"


@unique
class UnitFamily(StrEnum):
    """
    Magnitude ladders for format_with_unit().

    Attributes:
        BYTES (str)  : Binary ladder B..PB, step 1024 - 1.00 MB
        METRIC (str) : Decimal ladder ''..T, step 1000 - 1.00M
        SHORT (str)  : Locale compact notation - 1.2M
        LONG (str)   : Locale standard notation - 1,234,567
    """
    BYTES = "bytes"
    METRIC = "metric"
    SHORT = "short"
    LONG = "long"


@unique
class ComparisonOperator(StrEnum):
    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
# @formatter:on


@dataclass(frozen=True)
class NumberFormatOptions:
    decimals: int = 2
    thousands_separator: str = ","
    decimal_separator: str = "."
    fallback: str | None = "0"


@dataclass(frozen=True)
class CurrencyFormatOptions:
    currency: str = NumbersConf.DEFAULT_CURRENCY
    locale: str = NumbersConf.DEFAULT_LOCALE
    fallback: str | None = None
    min_fraction_digits: int = 2
    max_fraction_digits: int = 2
    use_grouping: bool = True


@dataclass(frozen=True)
class PercentageFormatOptions:
    decimals: int = 2
    fallback: str | None = None
    multiplier: bool = True


@dataclass(frozen=True)
class UnitFormatOptions:
    unit: UnitFamily | str = UnitFamily.METRIC
    locale: str = NumbersConf.DEFAULT_LOCALE
    decimals: int = 2
    fallback: str = "0"


@dataclass(frozen=True)
class MaskOptions:
    """
    Masking options for mask_number().

    Attributes:
        start: Leading integer digits left visible.
        end: Trailing integer digits left visible.
        mask: Masking string repeated once per hidden digit.
        preserve_decimals: Keep fractional digits verbatim instead of masking them.
    """
    start: int = 0
    end: int = 2
    mask: str = "*"
    preserve_decimals: bool = False


@dataclass(frozen=True)
class RangeOptions:
    """Range bounds; a bound of None is unbounded on that side."""
    min: float | None = None
    max: float | None = None
    inclusive: bool = True


@dataclass(frozen=True)
class Precision:
    """Tolerances for is_approximately_equal(); ``relative`` wins when set."""
    absolute: float = NumbersConf.DEFAULT_TOLERANCE
    relative: float | None = None


@dataclass(frozen=True)
class StatisticsOptions:
    ignore_invalid: bool = False
    precision: int = 2


# Methods --------------------------------------------------------------------------------------------------------------

def resolve_options(cls: type[T], options: T | None, overrides: dict[str, Any]) -> T:
    """
    Build the effective options record for a call.

    Args:
        cls: Options dataclass type.
        options: Record passed by the caller, or None for defaults.
        overrides: Keyword fields merged on top of ``options``.

    Raises:
        TypeError: If ``options`` is not a ``cls`` instance or an override names
                   an unknown field.
    """
    if options is None:
        options = cls()
    elif not isinstance(options, cls):
        raise TypeError(f"options must be {cls.__name__} or None, got {type(options).__name__}")
    return replace(options, **overrides) if overrides else options
