"""
Locale-aware number primitives backed by Babel.

The formatting and parsing modules never touch locale data directly: they go through
a LocaleProvider. BabelLocale is the default implementation; any object with the same
four methods can be passed as ``provider=`` to locale-using functions.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import copy
import re
from typing import Protocol, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
import structlog
from babel import Locale, UnknownLocaleError
from babel.numbers import format_compact_decimal, get_decimal_symbol, get_group_symbol

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NumberFormatError
from .options import numbers_conf
from .tools import fmt_value

logger = structlog.get_logger(__name__)

_CURRENCY_CODE = re.compile(r"[A-Za-z]{3}")


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class LocaleProvider(Protocol):
    """Protocol for locale-aware number rendering and symbol lookup."""

    def format_grouped_number(self, value: float, locale: str, max_fraction_digits: int) -> str: ...

    def format_currency(
            self,
            value: float,
            currency: str,
            locale: str,
            min_fraction_digits: int,
            max_fraction_digits: int,
            use_grouping: bool,
    ) -> str: ...

    def format_compact(self, value: float, locale: str, max_fraction_digits: int) -> str: ...

    def lookup_symbols(self, locale: str) -> tuple[str, str]: ...


class BabelLocale:
    """
    LocaleProvider implementation using CLDR data shipped with Babel.

    Locale tags are accepted in BCP 47 form (``en-US``) or POSIX form (``en_US``).
    Every failure is raised as polynum NumberFormatError.

    Examples:
        >>> babel_locale = BabelLocale()
        >>> babel_locale.lookup_symbols("de-DE")
        ('.', ',')
        >>> babel_locale.format_currency(1234.56, "EUR", "de-DE", 2, 2, True)
        '1.234,56\\xa0€'
    """

    def format_grouped_number(self, value: float, locale: str, max_fraction_digits: int) -> str:
        loc = self.parse_locale(locale)
        return self._apply(loc.decimal_formats[None], value, loc, (0, max_fraction_digits))

    def format_currency(
            self,
            value: float,
            currency: str,
            locale: str,
            min_fraction_digits: int,
            max_fraction_digits: int,
            use_grouping: bool,
    ) -> str:
        if not isinstance(currency, str) or not _CURRENCY_CODE.fullmatch(currency):
            raise NumberFormatError(f"Invalid currency code: {fmt_value(currency)}")
        for name, digits in (("minimum", min_fraction_digits), ("maximum", max_fraction_digits)):
            if (isinstance(digits, bool) or not isinstance(digits, int)
                    or not 0 <= digits <= numbers_conf.MAX_DECIMALS):
                raise NumberFormatError(f"Invalid {name} fraction digits: {fmt_value(digits)}")
        if min_fraction_digits > max_fraction_digits:
            raise NumberFormatError(
                f"Minimum fraction digits {min_fraction_digits} exceed maximum {max_fraction_digits}"
            )

        loc = self.parse_locale(locale)
        return self._apply(
            loc.currency_formats["standard"],
            value,
            loc,
            (min_fraction_digits, max_fraction_digits),
            currency=currency.upper(),
            group_separator=use_grouping,
        )

    def format_compact(self, value: float, locale: str, max_fraction_digits: int) -> str:
        loc = self.parse_locale(locale)
        try:
            return format_compact_decimal(
                value, format_type="short", locale=loc, fraction_digits=max_fraction_digits
            )
        except (ValueError, ArithmeticError) as e:
            raise NumberFormatError(f"Compact formatting failed: {e}") from e

    def lookup_symbols(self, locale: str) -> tuple[str, str]:
        loc = self.parse_locale(locale)
        return get_group_symbol(loc), get_decimal_symbol(loc)

    @staticmethod
    def parse_locale(locale: str) -> Locale:
        """
        Parse a locale tag into a Babel Locale.

        Raises:
            NumberFormatError: If the tag is not a string or names no known locale.
        """
        if not isinstance(locale, str) or not locale.strip():
            raise NumberFormatError(f"Invalid locale: {fmt_value(locale)}")
        try:
            return Locale.parse(locale.strip().replace("-", "_"))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning("Locale not supported", locale=locale, error=str(e))
            raise NumberFormatError(f"Unsupported locale: {fmt_value(locale)}") from e

    @staticmethod
    def _apply(pattern, value, loc: Locale, frac_prec: tuple[int, int], *,
               currency: str | None = None, group_separator: bool = True) -> str:
        # Pattern objects are cached on the Locale, never mutate them in place
        pattern = copy.copy(pattern)
        pattern.frac_prec = frac_prec
        try:
            return pattern.apply(
                value,
                loc,
                currency=currency,
                currency_digits=False,
                group_separator=group_separator,
            )
        except (ValueError, ArithmeticError) as e:
            raise NumberFormatError(f"Locale formatting failed: {e}") from e


# Methods --------------------------------------------------------------------------------------------------------------

default_provider = BabelLocale()


def get_locale_provider(provider: LocaleProvider | None = None) -> LocaleProvider:
    """Return ``provider`` when given, else the package default BabelLocale."""
    return default_provider if provider is None else provider
