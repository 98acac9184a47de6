#
# Polynum Tools & Utilities
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any

# Constants ------------------------------------------------------------------------------------------------------------

# Wide enough for 2**53 with 20 fractional digits or 1e21 with 20 fractional digits
_FIXED_CTX = Context(prec=64, rounding=ROUND_HALF_UP)

# Fixed-point output switches to exponent form from this magnitude on
FIXED_NOTATION_LIMIT = 1e21


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(x: Any) -> str:
    """
    Format the type of an object for exception messages.

    Examples:
        >>> fmt_type(3.5)
        '<type: float>'
        >>> fmt_type(float)
        '<type: float>'
    """
    cls = x if isinstance(x, type) else type(x)
    return f"<type: {cls.__name__}>"


def fmt_value(x: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception and log messages.

    Broken __repr__ methods are tolerated, long reprs are truncated with "...".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value(float("nan"))
        '<float: nan>'
    """
    t = type(x).__name__
    try:
        r = repr(x)
    except Exception as e:
        r = f"<{t} object (repr failed: {type(e).__name__})>"
    r = r.replace(">", "\\>")
    if len(r) > max_repr:
        r = r[:max(max_repr - 3, 0)] + "..."
    return f"<{t}: {r}>"


def plain_str(x: int | float) -> str:
    """
    Return the shortest positional numeral for a finite number.

    Whole floats drop the trailing ``.0`` and exponent forms are expanded, so the
    result only ever contains an optional sign, digits and at most one period.

    Examples:
        >>> plain_str(1234567.0)
        '1234567'
        >>> plain_str(1234.56)
        '1234.56'
        >>> plain_str(1e-7)
        '0.0000001'
    """
    if isinstance(x, int):
        return str(x)
    x = float(x)
    if x.is_integer():
        return str(int(x))
    s = repr(x)
    if "e" in s:
        s = format(Decimal(s), "f")
    return s


def to_fixed(x: int | float, decimals: int) -> str:
    """
    Render a number with exactly ``decimals`` fractional digits.

    Rounds half away from zero on the exact binary value of ``x``. Magnitudes of
    1e21 and above are rendered with to_exponential_str() instead.

    Examples:
        >>> to_fixed(2.5, 0)
        '3'
        >>> to_fixed(1234.5678, 2)
        '1234.57'
    """
    if abs(x) >= FIXED_NOTATION_LIMIT:
        return to_exponential_str(x, decimals)
    quantum = Decimal(1).scaleb(-decimals)
    return format(_FIXED_CTX.quantize(Decimal(x), quantum), "f")


def to_exponential_str(x: int | float, digits: int) -> str:
    """
    Render a number as ``d.ddde+N`` with ``digits`` fractional mantissa digits.

    The exponent is not zero-padded and always carries its sign.

    Examples:
        >>> to_exponential_str(1234.567, 2)
        '1.23e+3'
        >>> to_exponential_str(0.000123, 1)
        '1.2e-4'
    """
    d = Decimal(x)
    if d.is_zero():
        coeff, exp, sign = "0" * (digits + 1), 0, ""
    else:
        rounded = Context(prec=digits + 1, rounding=ROUND_HALF_UP).plus(d)
        coeff = "".join(str(n) for n in rounded.as_tuple().digits)
        coeff = coeff.ljust(digits + 1, "0")[:digits + 1]
        exp = rounded.adjusted()
        sign = "-" if rounded.is_signed() else ""

    mantissa = coeff[0] + ("." + coeff[1:] if digits else "")
    return f"{sign}{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def significant(x: int | float, digits: int) -> float:
    """Round ``x`` to ``digits`` significant digits, half away from zero."""
    if x == 0:
        return 0.0
    return float(Context(prec=digits, rounding=ROUND_HALF_UP).plus(Decimal(x)))


def floor_log10(x: int | float) -> int:
    """Return the decimal exponent of the leading digit of a non-zero number."""
    return math.floor(math.log10(abs(x)))
