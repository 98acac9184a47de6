#
# Polynum - Errors & Options Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from polynum.errors import FormatResult, NumberFormatError
from polynum.options import NumberFormatOptions, RangeOptions, resolve_options


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatResult:

    def test_ok_unwraps_value(self):
        res = FormatResult.ok("1.00")
        assert res.is_ok
        assert res.unwrap() == "1.00"
        assert res.unwrap(fallback="x") == "1.00"

    def test_fail_returns_fallback(self):
        res = FormatResult.fail("bad")
        assert not res.is_ok
        assert isinstance(res.error, NumberFormatError)
        assert res.unwrap(fallback="n/a") == "n/a"

    def test_empty_string_is_a_fallback(self):
        assert FormatResult.fail("bad").unwrap(fallback="") == ""

    def test_fail_without_fallback_raises(self):
        with pytest.raises(NumberFormatError, match="bad"):
            FormatResult.fail("bad").unwrap()

    def test_requires_exactly_one(self):
        with pytest.raises(TypeError):
            FormatResult()
        with pytest.raises(TypeError):
            FormatResult(value="1", error=NumberFormatError("x"))


class TestResolveOptions:

    def test_defaults(self):
        opts = resolve_options(NumberFormatOptions, None, {})
        assert opts == NumberFormatOptions()
        assert opts.decimals == 2
        assert opts.fallback == "0"

    def test_overrides_merge_on_record(self):
        base = NumberFormatOptions(decimals=4)
        opts = resolve_options(NumberFormatOptions, base, {"thousands_separator": " "})
        assert opts.decimals == 4
        assert opts.thousands_separator == " "
        assert base.thousands_separator == ","

    def test_unknown_field_raises_type_error(self):
        with pytest.raises(TypeError):
            resolve_options(NumberFormatOptions, None, {"precision": 3})

    def test_wrong_record_type_raises(self):
        with pytest.raises(TypeError, match="NumberFormatOptions"):
            resolve_options(NumberFormatOptions, RangeOptions(), {})
