"""Estimate output models for the homecost engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CostRange(BaseModel):
    """A confidence interval around a point estimate, in dollars."""

    model_config = ConfigDict(frozen=True)

    low: float
    expected: float
    high: float

    @model_validator(mode="after")
    def low_le_expected_le_high(self) -> CostRange:
        if not (self.low <= self.expected <= self.high):
            msg = (
                f"Interval must bracket its estimate, "
                f"got low={self.low} expected={self.expected} high={self.high}"
            )
            raise ValueError(msg)
        return self


class EstimateResult(BaseModel):
    """Annual and monthly electricity cost with a 95% confidence interval.

    ``lo``/``hi`` bound the annual estimate; ``lo_month``/``hi_month`` are
    the same bounds divided by 12. The remaining fields record how the
    estimate was derived.
    """

    model_config = ConfigDict(frozen=True)

    annual: float
    monthly: float
    lo: float
    hi: float
    lo_month: float
    hi_month: float

    year_bracket: str
    area_bracket: str
    regional_scalar: float
    combined_cv: float = Field(ge=0)
    standard_error: float

    @property
    def annual_range(self) -> CostRange:
        return CostRange(low=self.lo, expected=self.annual, high=self.hi)

    @property
    def monthly_range(self) -> CostRange:
        return CostRange(low=self.lo_month, expected=self.monthly, high=self.hi_month)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat dict of display strings, rounded to whole dollars."""
        from homecost.formatting import format_cost_range, format_currency

        return {
            "monthly_formatted": format_currency(self.monthly),
            "annual_formatted": format_currency(self.annual),
            "monthly_ci_formatted": format_cost_range(self.monthly_range),
            "annual_ci_formatted": format_cost_range(self.annual_range),
            "year_bracket": self.year_bracket,
            "area_bracket": self.area_bracket,
            "regional_scalar": self.regional_scalar,
        }


class ChartConfig(BaseModel):
    """Bar chart description handed to an external renderer."""

    model_config = ConfigDict(frozen=True)

    chart_type: str = "bar"
    labels: list[str]
    values: list[float]
    dataset_label: str = "Estimated Monthly Bill ($)"
    y_axis_title: str = "Dollars per month"
    begin_at_zero: bool = True
    responsive: bool = True
    border_width: int = 1

    @model_validator(mode="after")
    def labels_match_values(self) -> ChartConfig:
        if len(self.labels) != len(self.values):
            msg = (
                f"Chart needs one label per value, "
                f"got {len(self.labels)} labels and {len(self.values)} values"
            )
            raise ValueError(msg)
        return self

    def to_chartjs(self) -> dict[str, Any]:
        """Render as a Chart.js configuration object."""
        return {
            "type": self.chart_type,
            "data": {
                "labels": list(self.labels),
                "datasets": [
                    {
                        "label": self.dataset_label,
                        "data": list(self.values),
                        "borderWidth": self.border_width,
                    }
                ],
            },
            "options": {
                "responsive": self.responsive,
                "scales": {
                    "y": {
                        "beginAtZero": self.begin_at_zero,
                        "title": {"display": True, "text": self.y_axis_title},
                    }
                },
            },
        }
