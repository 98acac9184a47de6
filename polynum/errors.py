"""
Polynum error kind and result carrier.

Every numeric failure in the package is signalled with NumberFormatError. Formatters
that support a caller-supplied fallback compute a FormatResult first, so callers can
either unwrap it (fallback or raise) or inspect the failure without try/except.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass


# Classes --------------------------------------------------------------------------------------------------------------

class NumberFormatError(ValueError):
    """
    Invalid numeric input or configuration.

    This is the only error kind raised by polynum operations for bad values, bad
    option values, or failures of the underlying formatting primitive. It subclasses
    ValueError so generic callers that already handle ValueError keep working.
    """


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of a formatting call: either a formatted string or a failure.

    Exactly one of ``value`` and ``error`` is set.

    Examples:
        >>> FormatResult.ok("1,234.00").unwrap()
        '1,234.00'
        >>> FormatResult.fail("Invalid number input").unwrap(fallback="n/a")
        'n/a'
    """

    value: str | None = None
    error: NumberFormatError | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise TypeError("FormatResult requires exactly one of 'value' or 'error'")

    @classmethod
    def ok(cls, value: str) -> "FormatResult":
        return cls(value=value)

    @classmethod
    def fail(cls, error: NumberFormatError | str) -> "FormatResult":
        if not isinstance(error, NumberFormatError):
            error = NumberFormatError(error)
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self, fallback: str | None = None) -> str:
        """
        Return the formatted value, or the fallback on failure.

        Raises:
            NumberFormatError: The carried failure, when no fallback is configured.
        """
        if self.error is None:
            return self.value
        if fallback is not None:
            return fallback
        raise self.error
