#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from polynum.errors import NumberFormatError


# Classes --------------------------------------------------------------------------------------------------------------

class FakeLocale:
    """LocaleProvider double recording calls and returning tagged strings."""

    def __init__(self, symbols: tuple[str, str] = (",", "."), fail: bool = False):
        self.symbols = symbols
        self.fail = fail
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if self.fail:
            raise NumberFormatError(f"{name} failed")

    def format_grouped_number(self, value, locale, max_fraction_digits):
        self._record("grouped", value, locale, max_fraction_digits)
        return f"grouped:{value}"

    def format_currency(self, value, currency, locale, min_fraction_digits, max_fraction_digits, use_grouping):
        self._record("currency", value, currency, locale, min_fraction_digits, max_fraction_digits, use_grouping)
        return f"{currency}:{value}"

    def format_compact(self, value, locale, max_fraction_digits):
        self._record("compact", value, locale, max_fraction_digits)
        return f"compact:{value}"

    def lookup_symbols(self, locale):
        self._record("symbols", locale)
        return self.symbols


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def fake_locale():
    """Provider returning tagged strings and en-US style symbols."""
    return FakeLocale()


@pytest.fixture
def failing_locale():
    """Provider raising NumberFormatError from every method."""
    return FakeLocale(fail=True)
