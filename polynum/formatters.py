"""
Number formatters producing display strings.

Three failure policies apply, per function:

- format_number, format_currency, format_percentage return the configured
  ``fallback`` for an invalid value and raise NumberFormatError otherwise. Their
  ``*_result`` variants return a FormatResult instead of raising.
- to_exponential raises NumberFormatError.
- format_ordinal, to_words, pad_number and mask_number return ``str(value)`` for an
  invalid value.

Configuration errors (bad decimals, bad separators) always raise.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import structlog

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import FormatResult, NumberFormatError
from .locale import LocaleProvider, get_locale_provider
from .options import (
    CurrencyFormatOptions,
    MaskOptions,
    NumberFormatOptions,
    PercentageFormatOptions,
    numbers_conf,
    resolve_options,
)
from .tools import fmt_value, plain_str, to_exponential_str, to_fixed
from .validators import is_valid_number, is_valid_separator, validate_decimals, validate_number

logger = structlog.get_logger(__name__)

# @formatter:off
_UNITS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = ("ten", "eleven", "twelve", "thirteen", "fourteen",
          "fifteen", "sixteen", "seventeen", "eighteen", "nineteen")
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}
# @formatter:on

_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


# Grouped, Currency & Percentage ---------------------------------------------------------------------------------------

def format_number_result(value: Any, options: NumberFormatOptions | None = None, **overrides) -> FormatResult:
    """
    Format ``value`` with digit grouping, returning a FormatResult.

    See format_number() for options. Invalid values yield a failed result,
    invalid options raise NumberFormatError.
    """
    opts = resolve_options(NumberFormatOptions, options, overrides)

    if not is_valid_number(value):
        return FormatResult.fail(f"Invalid number input: {fmt_value(value)}")

    validate_decimals(opts.decimals)
    if not is_valid_separator(opts.thousands_separator) or not is_valid_separator(opts.decimal_separator):
        raise NumberFormatError("Invalid separator: must be a string of 1-3 characters")
    if opts.thousands_separator == opts.decimal_separator:
        raise NumberFormatError("Thousand separator and decimal separator must be different")

    if abs(value) >= numbers_conf.MAX_SAFE_INTEGER:
        return FormatResult.ok(to_exponential_str(value, opts.decimals))

    int_part, _, frac_part = to_fixed(abs(value), opts.decimals).partition(".")
    int_part = _THOUSANDS.sub(lambda _: opts.thousands_separator, int_part)
    formatted = f"{int_part}{opts.decimal_separator}{frac_part}" if frac_part else int_part
    return FormatResult.ok(f"-{formatted}" if value < 0 else formatted)


def format_number(value: Any, options: NumberFormatOptions | None = None, **overrides) -> str:
    """
    Format a number with thousands and decimal separators.

    Args:
        value: Number to format.
        options: NumberFormatOptions record, defaults applied when None.
        **overrides: Individual NumberFormatOptions fields:
            decimals (int): Fixed fractional digits in [0, 20], default 2.
            thousands_separator (str): Group separator, up to 3 chars, default ",".
            decimal_separator (str): Decimal separator, up to 3 chars, default ".".
            fallback (str | None): Returned for invalid values, default "0".
                None makes invalid values raise.

    Returns:
        Grouped numeral. Magnitudes at or above 2**53 - 1 use exponential notation.

    Raises:
        NumberFormatError: On invalid options, or an invalid value with fallback=None.

    Examples:
        >>> format_number(1234567.891)
        '1,234,567.89'
        >>> format_number(1234567.891, thousands_separator=".", decimal_separator=",")
        '1.234.567,89'
        >>> format_number(float("nan"), fallback="n/a")
        'n/a'
    """
    opts = resolve_options(NumberFormatOptions, options, overrides)
    return format_number_result(value, opts).unwrap(opts.fallback)


def format_currency_result(
        value: Any,
        options: CurrencyFormatOptions | None = None,
        *,
        provider: LocaleProvider | None = None,
        **overrides,
) -> FormatResult:
    """
    Format ``value`` as currency, returning a FormatResult.

    Raises:
        NumberFormatError: When |value| reaches 2**53 - 1.
    """
    opts = resolve_options(CurrencyFormatOptions, options, overrides)

    if not is_valid_number(value):
        return FormatResult.fail(f"Invalid number input: {fmt_value(value)}")
    if abs(value) >= numbers_conf.MAX_SAFE_INTEGER:
        raise NumberFormatError("Value exceeds maximum safe integer")

    try:
        formatted = get_locale_provider(provider).format_currency(
            value,
            opts.currency,
            opts.locale,
            opts.min_fraction_digits,
            opts.max_fraction_digits,
            opts.use_grouping,
        )
    except NumberFormatError as e:
        return FormatResult.fail(NumberFormatError(f"Currency formatting failed: {e}"))
    return FormatResult.ok(formatted)


def format_currency(
        value: Any,
        options: CurrencyFormatOptions | None = None,
        *,
        provider: LocaleProvider | None = None,
        **overrides,
) -> str:
    """
    Format a number as a currency amount using locale conventions.

    Args:
        value: Amount to format.
        options: CurrencyFormatOptions record, defaults applied when None.
        provider: LocaleProvider to use instead of the package default.
        **overrides: Individual CurrencyFormatOptions fields - currency ("USD"),
            locale ("en-US"), fallback (None), min_fraction_digits (2),
            max_fraction_digits (2), use_grouping (True).

    Raises:
        NumberFormatError: When |value| reaches 2**53 - 1 (fallback or not), or on an
            invalid value or locale failure without a fallback.

    Examples:
        >>> format_currency(-1234.56)
        '-$1,234.56'
        >>> format_currency(1234567.89, use_grouping=False)
        '$1234567.89'
    """
    opts = resolve_options(CurrencyFormatOptions, options, overrides)
    return format_currency_result(value, opts, provider=provider).unwrap(opts.fallback)


def format_percentage_result(value: Any, options: PercentageFormatOptions | None = None, **overrides) -> FormatResult:
    """Format ``value`` as a percentage, returning a FormatResult."""
    opts = resolve_options(PercentageFormatOptions, options, overrides)

    if not is_valid_number(value):
        return FormatResult.fail(f"Invalid number input: {fmt_value(value)}")
    validate_decimals(opts.decimals)
    if abs(value) >= numbers_conf.MAX_SAFE_INTEGER:
        raise NumberFormatError("Value exceeds maximum safe integer")

    percent = value * 100 if opts.multiplier else value
    return FormatResult.ok(f"{to_fixed(percent, opts.decimals)}%")


def format_percentage(value: Any, options: PercentageFormatOptions | None = None, **overrides) -> str:
    """
    Format a ratio as a percentage string.

    Args:
        value: Ratio (or percentage when multiplier=False).
        options: PercentageFormatOptions record.
        **overrides: decimals (2), fallback (None), multiplier (True).

    Examples:
        >>> format_percentage(0.1234)
        '12.34%'
        >>> format_percentage(12.34, multiplier=False)
        '12.34%'
    """
    opts = resolve_options(PercentageFormatOptions, options, overrides)
    return format_percentage_result(value, opts).unwrap(opts.fallback)


# Ordinals & Words -----------------------------------------------------------------------------------------------------

def format_ordinal(value: Any, locale: str = numbers_conf.DEFAULT_LOCALE) -> str:
    """
    Append the English ordinal suffix to a number.

    Suffixes are computed on the magnitude, the sign stays on the numeral. Other
    locales are accepted but get English suffixes. Invalid values are returned
    as ``str(value)``.

    Examples:
        >>> format_ordinal(21)
        '21st'
        >>> format_ordinal(112)
        '112th'
        >>> format_ordinal(-3)
        '-3rd'
    """
    if not is_valid_number(value):
        return str(value)
    _warn_english_only("format_ordinal", locale)

    n = abs(value)
    if 3 < n % 100 < 21:
        suffix = "th"
    else:
        suffix = _ORDINAL_SUFFIXES.get(n % 10, "th")
    return f"{plain_str(value)}{suffix}"


def to_words(value: Any, locale: str = numbers_conf.DEFAULT_LOCALE) -> str:
    """
    Spell out whole numbers from 0 to 99 in English.

    Negative numbers get a "negative " prefix. Values of 100 and above, and
    non-whole values, degrade to the plain numeral. Invalid values are returned
    as ``str(value)``.

    Examples:
        >>> to_words(42)
        'forty-two'
        >>> to_words(-7)
        'negative seven'
        >>> to_words(150)
        '150'
    """
    if not is_valid_number(value):
        return str(value)
    _warn_english_only("to_words", locale)
    return _spell(value)


def _spell(value: int | float) -> str:
    if value < 0:
        return f"negative {_spell(-value)}"
    if value >= 100 or value != int(value):
        return plain_str(value)

    n = int(value)
    if n < 10:
        return _UNITS[n]
    if n < 20:
        return _TEENS[n - 10]
    tens, digit = divmod(n, 10)
    return _TENS[tens] + (f"-{_UNITS[digit]}" if digit else "")


def _warn_english_only(func: str, locale: str) -> None:
    language = str(locale).replace("_", "-").split("-")[0].lower()
    if language != "en":
        logger.debug("Only English rules available, using English", func=func, locale=locale)


# Notation, Padding & Masking ------------------------------------------------------------------------------------------

def to_exponential(value: Any, precision: int = 2) -> str:
    """
    Render a number in exponential notation with ``precision`` mantissa decimals.

    Examples:
        >>> to_exponential(1234.567)
        '1.23e+3'
        >>> to_exponential(-0.00042, 1)
        '-4.2e-4'

    Raises:
        NumberFormatError: On a non-finite value or precision outside [0, 20].
    """
    validate_number(value)
    validate_decimals(precision, "precision")
    return to_exponential_str(value, precision)


def pad_number(value: Any, min_integers: int = 1, min_decimals: int = 0) -> str:
    """
    Zero-pad the integer part on the left and the fraction on the right.

    Args:
        value: Number to pad. Invalid values are returned as ``str(value)``.
        min_integers: Minimum integer digits.
        min_decimals: Minimum fractional digits. A zero fraction is added when the
            value has none and this is positive.

    Raises:
        NumberFormatError: If a width is not a non-negative integer.

    Examples:
        >>> pad_number(5, 3)
        '005'
        >>> pad_number(-3.5, 2, 3)
        '-03.500'
    """
    for name, width in (("min_integers", min_integers), ("min_decimals", min_decimals)):
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            raise NumberFormatError(f"{name} must be a non-negative integer, got {fmt_value(width)}")
    if not is_valid_number(value):
        return str(value)

    int_part, _, dec_part = plain_str(abs(value)).partition(".")
    int_part = int_part.rjust(min_integers, "0")
    dec_part = dec_part.ljust(min_decimals, "0")

    sign = "-" if value < 0 else ""
    return f"{sign}{int_part}.{dec_part}" if dec_part else f"{sign}{int_part}"


def mask_number(value: Any, options: MaskOptions | None = None, **overrides) -> str:
    """
    Hide digits of a number behind a mask string.

    Integer values keep ``start`` leading and ``end`` trailing digits visible. Values
    with a fraction have their whole integer part masked regardless of start/end.
    The sign of negative values is always kept, ``end=0`` shows no trailing digits,
    and digits covered by both ``start`` and ``end`` are shown once.

    Fractional digits are kept verbatim when ``preserve_decimals`` is set, otherwise
    each is replaced by "*" when the call passes no options at all, or by "#" when
    any option is given, even an option equal to its default.

    Args:
        value: Number to mask. Invalid values are returned as ``str(value)``.
        options: MaskOptions record.
        **overrides: start (0), end (2), mask ("*"), preserve_decimals (False).

    Examples:
        >>> mask_number(1234567)
        '*****67'
        >>> mask_number(1234567, start=2, end=2)
        '12***67'
        >>> mask_number(1234.56)
        '****.**'
        >>> mask_number(1234.56, preserve_decimals=False)
        '****.##'
    """
    explicit = options is not None or bool(overrides)
    opts = resolve_options(MaskOptions, options, overrides)
    if not is_valid_number(value):
        return str(value)
    for name, count in (("start", opts.start), ("end", opts.end)):
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise NumberFormatError(f"{name} must be a non-negative integer, got {fmt_value(count)}")

    int_part, has_fraction, dec_part = plain_str(abs(value)).partition(".")

    if has_fraction:
        masked = opts.mask * len(int_part)
    elif opts.start + opts.end >= len(int_part):
        masked = int_part
    else:
        head = int_part[:opts.start]
        tail = int_part[len(int_part) - opts.end:]
        masked = head + opts.mask * (len(int_part) - opts.start - opts.end) + tail

    if has_fraction:
        if not opts.preserve_decimals:
            dec_part = ("#" if explicit else "*") * len(dec_part)
        masked = f"{masked}.{dec_part}"

    return f"-{masked}" if value < 0 else masked
