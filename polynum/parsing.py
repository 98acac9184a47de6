"""
Locale-aware parsing of numerals typed or displayed by humans.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import structlog

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .locale import LocaleProvider, get_locale_provider
from .options import numbers_conf

logger = structlog.get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NUMERAL = re.compile(r"[-+]?\d*\.?\d*")


# Methods --------------------------------------------------------------------------------------------------------------

def parse_number(
        text: Any,
        locale: str = numbers_conf.DEFAULT_LOCALE,
        *,
        provider: LocaleProvider | None = None,
) -> float | None:
    """
    Parse a locale-formatted numeral into a float.

    Whitespace is removed, every group separator of the locale is dropped and the
    first decimal separator becomes ".". What remains must be an optional sign
    followed by digits with at most one period.

    Returns None instead of raising: for non-string input, blank text, malformed
    numerals, unknown locales and non-finite results.

    Examples:
        >>> parse_number("1,234.56")
        1234.56
        >>> parse_number("1.234,56", "de-DE")
        1234.56
        >>> parse_number("12.34.56") is None
        True
    """
    if not isinstance(text, str) or not text.strip():
        return None

    try:
        group, decimal = get_locale_provider(provider).lookup_symbols(locale)
    except NumberFormatError as e:
        logger.debug("Cannot resolve locale symbols", locale=locale, error=str(e))
        return None

    normalized = _WHITESPACE.sub("", text)
    if group:
        normalized = normalized.replace(group, "")
    if decimal and decimal != ".":
        normalized = normalized.replace(decimal, ".", 1)

    if normalized in ("", ".", "-", "+") or not _NUMERAL.fullmatch(normalized):
        return None

    try:
        parsed = float(normalized)
    except ValueError:
        # Sign-and-period leftovers such as "-." pass the pattern
        return None
    return parsed if math.isfinite(parsed) else None
