"""Tests for formatting helpers and EstimateResult summary output."""

from __future__ import annotations

import pytest

from homecost.factory import create_default_engine
from homecost.formatting import format_cost_range, format_currency
from homecost.models.estimate import CostRange


class TestFormatCurrency:
    def test_rounds_to_whole_dollars(self) -> None:
        assert format_currency(2395.43) == "$2,395"
        assert format_currency(199.62) == "$200"

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(2.5, "$3"), (0.5, "$1"), (1234.5, "$1,235"), (-2.5, "-$3")],
    )
    def test_halves_round_away_from_zero(self, amount: float, expected: str) -> None:
        assert format_currency(amount) == expected

    def test_thousands_separator(self) -> None:
        assert format_currency(1_234_567.0) == "$1,234,567"

    def test_zero(self) -> None:
        assert format_currency(0.0) == "$0"
        assert format_currency(-0.4) == "$0"

    def test_negative(self) -> None:
        assert format_currency(-42.0) == "-$42"


class TestFormatCostRange:
    def test_range(self) -> None:
        cr = CostRange(low=2294.91, expected=2395.43, high=2495.94)
        assert format_cost_range(cr) == "$2,295 – $2,496"


class TestSummaryDict:
    def test_worked_example(self) -> None:
        result = create_default_engine().estimate(1975, 1750, 1.30)
        assert result is not None
        summary = result.to_summary_dict()

        assert summary["annual_formatted"] == "$2,395"
        assert summary["monthly_formatted"] == "$200"
        assert summary["annual_ci_formatted"] == "$2,295 – $2,496"
        assert summary["monthly_ci_formatted"] == "$191 – $208"
        assert summary["year_bracket"] == "1970-1979"
        assert summary["area_bracket"] == "1500-1999"
        assert summary["regional_scalar"] == 1.30

    def test_ci_strings_use_result_ranges(self) -> None:
        result = create_default_engine().estimate(1800, 500)
        assert result is not None
        summary = result.to_summary_dict()

        assert summary["annual_ci_formatted"] == format_cost_range(result.annual_range)
        assert summary["monthly_ci_formatted"] == format_cost_range(result.monthly_range)
