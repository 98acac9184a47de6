#
# Polynum - Parsing Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from polynum.formatters import format_number
from polynum.parsing import parse_number


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParseNumber:

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("123", 123, id="int"),
            pytest.param("123.45", 123.45, id="float"),
            pytest.param("-123.45", -123.45, id="negative"),
            pytest.param("+123", 123, id="plus"),
            pytest.param("0", 0, id="zero"),
            pytest.param("  123  ", 123, id="whitespace"),
            pytest.param("1,234,567.5", 1234567.5, id="grouped"),
            pytest.param(".5", 0.5, id="leading-period"),
            pytest.param("5.", 5, id="trailing-period"),
        ],
    )
    def test_en_us(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("abc", id="letters"),
            pytest.param("", id="empty"),
            pytest.param("   ", id="blank"),
            pytest.param("12.34.56", id="two-periods"),
            pytest.param("-", id="sign-only"),
            pytest.param(".", id="period-only"),
            pytest.param("-.", id="sign-period"),
            pytest.param("1e5", id="exponent"),
            pytest.param("1-2", id="inner-sign"),
            pytest.param("9" * 400, id="overflow"),
        ],
    )
    def test_rejected(self, text):
        assert parse_number(text) is None

    @pytest.mark.parametrize("value", [123, None, 1.5, ["1"]])
    def test_non_string(self, value):
        assert parse_number(value) is None

    def test_custom_symbols(self, fake_locale):
        fake_locale.symbols = (".", ",")
        assert parse_number("1.234,56", "xx", provider=fake_locale) == 1234.56
        assert fake_locale.calls == [("symbols", "xx")]

    def test_provider_failure(self, failing_locale):
        assert parse_number("12", provider=failing_locale) is None


@pytest.mark.integration
class TestParseNumberBabel:

    def test_german(self):
        assert parse_number("1.234,56", "de-DE") == 1234.56

    def test_french(self):
        assert parse_number("1 234,56", "fr-FR") == 1234.56
        assert parse_number("1\u202f234,56", "fr-FR") == 1234.56

    def test_unknown_locale(self):
        assert parse_number("12", "zz") is None

    @pytest.mark.parametrize("value", [1234.56, -98765.43, 0.5, 1000000])
    def test_format_round_trip(self, value):
        assert parse_number(format_number(value)) == pytest.approx(value, abs=0.01)
