"""Tests for the small single-purpose data functions."""

import pytest

from clean_patterns.domain.base.exceptions import ValidationError
from clean_patterns.domain.base.value_objects import ErrorKind
from clean_patterns.domain.cleancode.data_processing import (
    calculate_sum,
    format_result,
    print_result,
    process_data,
    validate_data,
)
from clean_patterns.domain.cleancode.naming import calculate_percentage


class TestValidateData:
    """Test input validation."""

    def test_keeps_only_numbers_in_order(self):
        """Test that non-numeric items are dropped and order is kept."""
        assert validate_data([1, 2, "three", 4]) == [1, 2, 4]

    def test_accepts_floats_and_ignores_booleans(self):
        """Test that floats pass and booleans are not treated as numbers."""
        assert validate_data([1.5, True, None, 2]) == [1.5, 2]

    @pytest.mark.parametrize("data", [None, [], ()])
    def test_empty_data_rejected(self, data):
        """Test that empty or absent data fails with 'empty data'."""
        with pytest.raises(ValidationError, match="empty data") as exc_info:
            validate_data(data)
        assert exc_info.value.error_kind == ErrorKind.INVALID_INPUT

    def test_all_non_numeric_is_not_empty(self):
        """Test that a non-empty sequence without numbers validates to an empty list."""
        assert validate_data(["a", "b"]) == []


class TestCalculations:
    """Test sum, percentage and formatting helpers."""

    def test_sum_matches_builtin_sum(self):
        numbers = [3, 4.5, -2, 10]
        assert calculate_sum(numbers) == sum(numbers)

    def test_sum_of_validated_data_ignores_non_numeric(self):
        assert calculate_sum(validate_data([1, 2, "tres", 4])) == 7

    def test_percentage(self):
        """Test percentage calculation."""
        assert calculate_percentage(200, 15) == 30
        assert calculate_percentage(50, 0) == 0

    def test_format_result(self):
        assert format_result(7) == "The sum is: 7"

    def test_print_result(self, capsys):
        print_result(7)
        assert capsys.readouterr().out == "The sum is: 7\n"


class TestProcessData:
    """Test the composed pipeline that reports results instead of raising."""

    def test_success(self):
        result = process_data([1, 2, "three", 4])

        assert result.ok
        assert result.value == 7
        assert result.error_kind is None

    def test_empty_data_is_failed_result(self):
        result = process_data([])

        assert not result.ok
        assert result.error_kind == ErrorKind.INVALID_INPUT
        assert result.message == "empty data"

    def test_echo_prints_result(self, capsys):
        process_data([1, 2], echo=True)
        assert "The sum is: 3" in capsys.readouterr().out

    def test_unwrap_failed_result_raises(self):
        with pytest.raises(ValueError, match="invalid_input"):
            process_data(None).unwrap()
