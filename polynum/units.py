#
# Polynum Magnitude & Unit Formatting
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import structlog

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .locale import LocaleProvider, get_locale_provider
from .options import UnitFamily, UnitFormatOptions, resolve_options
from .tools import fmt_value, to_fixed
from .validators import is_valid_number, validate_decimals

logger = structlog.get_logger(__name__)

# @formatter:off
BINARY_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
METRIC_UNITS = ("", "K", "M", "B", "T")

BINARY_STEP = 1024
METRIC_STEP = 1000
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def format_with_unit(
        value: Any,
        options: UnitFormatOptions | None = None,
        *,
        provider: LocaleProvider | None = None,
        **overrides,
) -> str:
    """
    Format a number scaled to a magnitude unit.

    Never raises for invalid values or formatting failures: both return ``fallback``.

    Unit families:
        - "bytes": divide by 1024 along B, KB, MB, GB, TB, PB - "1.00 MB"
        - "metric": divide by 1000 along "", K, M, B, T - "1.00M"
        - "short": locale compact notation, up to ``decimals`` fraction digits - "1.23M"
        - "long": locale standard grouping, up to ``decimals`` fraction digits - "1,234,567"

    Args:
        value: Number to format.
        options: UnitFormatOptions record.
        provider: LocaleProvider for "short" and "long", package default when None.
        **overrides: unit ("metric"), locale ("en-US"), decimals (2), fallback ("0").

    Examples:
        >>> format_with_unit(1048576, unit="bytes")
        '1.00 MB'
        >>> format_with_unit(-1234567, decimals=1)
        '-1.2M'
        >>> format_with_unit(float("nan"), fallback="-")
        '-'
    """
    opts = resolve_options(UnitFormatOptions, options, overrides)

    if not is_valid_number(value):
        return opts.fallback

    try:
        return _format_with_unit(value, opts, provider)
    except NumberFormatError as e:
        logger.debug("Unit formatting failed, using fallback", value=fmt_value(value), error=str(e))
        return opts.fallback


def _format_with_unit(value: float, opts: UnitFormatOptions, provider: LocaleProvider | None) -> str:
    validate_decimals(opts.decimals)
    try:
        family = UnitFamily(opts.unit)
    except ValueError:
        raise NumberFormatError(f"Invalid unit family: {fmt_value(opts.unit)}") from None

    if family is UnitFamily.BYTES:
        return _scale(value, opts.decimals, BINARY_UNITS, BINARY_STEP, separator=" ")
    if family is UnitFamily.METRIC:
        return _scale(value, opts.decimals, METRIC_UNITS, METRIC_STEP, separator="")

    provider = get_locale_provider(provider)
    if family is UnitFamily.SHORT:
        return provider.format_compact(value, opts.locale, opts.decimals)
    return provider.format_grouped_number(value, opts.locale, opts.decimals)


def _scale(value: float, decimals: int, units: tuple[str, ...], step: int, separator: str) -> str:
    size = abs(value)
    index = 0
    while size >= step and index < len(units) - 1:
        size /= step
        index += 1

    sign = "-" if value < 0 else ""
    return f"{sign}{to_fixed(size, decimals)}{separator}{units[index]}"
