"""Tests for number validation."""

import math

import pytest

from isitvalid.shared.exceptions import FailureKind
from isitvalid.shared.outcome import Success
from isitvalid.shared.validators.number import (
    NumberOptions,
    count_decimal_places,
    describe,
    is_valid_number,
    parse_number,
    validate_number,
)


class TestNumberRangeAndPrecision:
    """Test bounds and decimal places."""

    def test_number_within_bounds_and_precision_passes(self):
        """Test a value inside every constraint is returned."""
        result = validate_number(3.2449, {"min": 1, "max": 5, "decimal_places": 4})
        assert result == Success(value=3.2449)

    def test_below_min_and_too_precise_fails(self):
        """Test the first failing check (min) is reported."""
        result = validate_number(3.2449, {"min": 4, "max": 5, "decimal_places": 3})
        assert result.is_valid is False
        assert result.kind == FailureKind.RANGE

    def test_too_many_decimal_places_fails(self):
        """Test precision alone can fail."""
        result = validate_number(3.2449, {"decimal_places": 3})
        assert result.kind == FailureKind.FORMAT
        assert result.reason == "Value must have at most 3 decimal place(s), got 4"

    def test_above_max_fails(self):
        """Test values over max fail."""
        result = validate_number(11, NumberOptions(max=10))
        assert result.kind == FailureKind.RANGE
        assert result.reason == "Value must be at most 10, got 11"

    def test_bounds_are_inclusive(self):
        """Test values equal to the bounds pass."""
        assert validate_number(5, {"min": 5, "max": 5}).is_valid

    def test_integral_float_has_no_decimal_places(self):
        """Test 100.0 counts as zero decimal places."""
        assert validate_number(100.0, {"decimal_places": 0}).is_valid

    def test_zero_decimal_places_rejects_fraction(self):
        """Test decimal_places=0 rejects any fractional part."""
        assert validate_number(1.5, {"decimal_places": 0}).kind == FailureKind.FORMAT

    def test_small_exponent_values_counted_exactly(self):
        """Test values printed in exponent notation are expanded before counting."""
        assert validate_number(1e-7, {"decimal_places": 6}).is_valid is False
        assert validate_number(1e-7, {"decimal_places": 7}).is_valid

    def test_infinity_is_range_checked(self):
        """Test infinities are numbers and obey bounds."""
        assert validate_number(math.inf).value == math.inf
        assert validate_number(math.inf, {"max": 10}).kind == FailureKind.RANGE


class TestNumberCoercion:
    """Test strict parsing of text and type checks."""

    @pytest.mark.parametrize(
        "text,expected",
        [("42", 42), ("-7", -7), ("+3", 3), ("3.14", 3.14), (" 7 ", 7), ("1e3", 1000.0), (".5", 0.5), ("2.", 2.0)],
    )
    def test_numeric_text_is_parsed(self, text, expected):
        """Test decimal literals are accepted."""
        result = validate_number(text)
        assert result.value == expected
        assert type(result.value) is type(expected)

    @pytest.mark.parametrize("text", ["12abc", "", "   ", "abc", "nan", "inf", "0x10", "1_000", "1.2.3", "--1", "1e"])
    def test_invalid_text_fails_with_type_error(self, text):
        """Test anything that is not a full decimal literal is rejected."""
        result = validate_number(text)
        assert result.kind == FailureKind.TYPE

    def test_type_error_names_the_input(self):
        """Test the reason includes the offending text."""
        assert validate_number("12abc").reason == "Value '12abc' is not a valid number"

    def test_nan_fails(self):
        """Test NaN is rejected."""
        result = validate_number(float("nan"))
        assert result.kind == FailureKind.TYPE
        assert "NaN" in result.reason

    @pytest.mark.parametrize("value", [True, False, None, [1], {"value": 1}])
    def test_non_numeric_types_fail(self, value):
        """Test booleans and other types are not numbers."""
        assert validate_number(value).kind == FailureKind.TYPE

    def test_text_obeys_bounds_after_parsing(self):
        """Test parsed text goes through the same checks."""
        assert validate_number("2.50", {"decimal_places": 1}).value == 2.5
        assert validate_number("20", {"max": 10}).kind == FailureKind.RANGE


class TestNumberHugeIntegers:
    """Test integers beyond the interpreter's int-to-text digit limit."""

    def test_overlong_integer_text_fails_with_type_error(self):
        """Test a 5000-digit literal is reported instead of raising."""
        result = validate_number("1" * 5000)
        assert result.kind == FailureKind.TYPE
        assert len(result.reason) < 100

    def test_huge_integer_over_max_fails_with_range_error(self):
        """Test the range reason is built without printing the whole integer."""
        result = validate_number(10**5000, {"max": 1})
        assert result.kind == FailureKind.RANGE
        assert result.reason.startswith("Value must be at most 1, got an integer of about ")
        assert result.reason.endswith(" digits")

    def test_huge_integer_without_bounds_passes(self):
        """Test a huge integer is still a number."""
        assert validate_number(10**5000).value == 10**5000


class TestNumberHelpers:
    """Test parsing and decimal counting helpers."""

    def test_parse_number_returns_none_for_garbage(self):
        """Test invalid text parses to None."""
        assert parse_number("12px") is None

    def test_parse_number_returns_none_for_overlong_integer(self):
        """Test integer text past the int-to-text digit limit parses to None."""
        assert parse_number("1" * 5000) is None

    @pytest.mark.parametrize(
        "value,expected",
        [(3, 0), (3.0, 0), (3.2449, 4), (0.1 + 0.2, 17), (1e-7, 7), (1.5e20, 0), (-0.25, 2), (math.inf, 0)],
    )
    def test_count_decimal_places(self, value, expected):
        """Test fractional digits are counted from the shortest decimal string."""
        assert count_decimal_places(value) == expected


class TestNumberProjections:
    """Test defaults, idempotence and the boolean projection."""

    def test_no_constraints_by_default(self):
        """Test any finite number passes with defaults."""
        assert validate_number(-123456.789).value == -123456.789

    @pytest.mark.parametrize("value", [3.2449, "42", " 0.5 "])
    def test_revalidating_output_is_idempotent(self, value):
        """Test validating the returned number again yields the same outcome."""
        options = {"min": 0, "max": 100, "decimal_places": 4}
        first = validate_number(value, options)
        assert validate_number(first.value, options) == first

    def test_is_valid_number(self):
        """Test the boolean projection."""
        assert is_valid_number("3.5", {"max": 4}) is True
        assert is_valid_number("3.5px") is False


class TestDescribe:
    """Test value rendering for failure reasons."""

    def test_short_values_use_repr(self):
        """Test short values are rendered as-is."""
        assert describe(11) == "11"
        assert describe("12abc") == "'12abc'"

    def test_long_values_are_shortened(self):
        """Test long text is cut to the limit."""
        text = describe("x" * 100)
        assert len(text) == 40
        assert text.endswith("...")

    def test_huge_integer_is_described_by_digit_count(self):
        """Test integers too long to print are summarized."""
        assert describe(10**5000).endswith(" digits")
