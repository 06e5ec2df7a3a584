"""Tests for the FastAPI application."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from homecost.api.app import INVALID_INPUT_MESSAGE, create_app
from homecost.engine import CostEngine
from homecost.factory import create_default_engine

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _create_test_client(cost_engine: object | None = None) -> TestClient:
    app = create_app(cost_engine=cost_engine)  # type: ignore[arg-type]
    return TestClient(app)


def _make_spy_engine() -> MagicMock:
    """A mock engine that delegates to the real default engine."""
    real = create_default_engine()
    mock = MagicMock(spec=CostEngine)
    mock.estimate_or_raise.side_effect = real.estimate_or_raise
    return mock


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health_returns_200(self) -> None:
        client = _create_test_client()
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


# ---------------------------------------------------------------------------
# Estimate endpoint
# ---------------------------------------------------------------------------


class TestEstimateSuccess:
    def test_numeric_body_returns_estimate(self) -> None:
        client = _create_test_client()
        response = client.post(
            "/api/estimate", json={"year": 1975, "sqft": 1750, "scalar": 1.3}
        )

        assert response.status_code == 200
        data = response.json()
        assert "estimate" in data
        assert "summary_dict" in data
        assert "chart" in data
        assert data["estimate"]["year_bracket"] == "1970-1979"
        assert data["summary_dict"]["annual_formatted"] == "$2,395"

    def test_string_body_is_parsed(self) -> None:
        client = _create_test_client()
        response = client.post(
            "/api/estimate", json={"year": "1975", "sqft": "1750 sq ft", "scalar": "1.3"}
        )

        assert response.status_code == 200
        assert response.json()["estimate"]["area_bracket"] == "1500-1999"

    def test_chart_has_twelve_months(self) -> None:
        client = _create_test_client()
        data = client.post("/api/estimate", json={"year": 1975, "sqft": 1750}).json()

        chart = data["chart"]
        assert chart["type"] == "bar"
        assert chart["data"]["labels"][0] == "Jan"
        assert len(chart["data"]["datasets"][0]["data"]) == 12

    def test_engine_receives_parsed_values(self) -> None:
        engine = _make_spy_engine()
        client = _create_test_client(cost_engine=engine)

        client.post("/api/estimate", json={"year": "1975", "sqft": 1750.6, "scalar": "1.1"})

        args = engine.estimate_or_raise.call_args.args
        assert args == (1975, 1750, 1.1)

    def test_bad_scalar_falls_back_to_default(self) -> None:
        engine = _make_spy_engine()
        client = _create_test_client(cost_engine=engine)

        response = client.post(
            "/api/estimate", json={"year": 1975, "sqft": 1750, "scalar": "-2"}
        )

        assert response.status_code == 200
        assert engine.estimate_or_raise.call_args.args[2] == 1.30
        assert response.json()["estimate"]["regional_scalar"] == 1.30

    @pytest.mark.parametrize("scalar", ["1e999", "1e308", 1e308, True])
    def test_unusable_scalar_keeps_interval_finite(self, scalar: object) -> None:
        client = _create_test_client()
        response = client.post(
            "/api/estimate", json={"year": 1975, "sqft": 1750, "scalar": scalar}
        )

        assert response.status_code == 200
        estimate = response.json()["estimate"]
        assert estimate["regional_scalar"] == 1.30
        assert estimate["hi"] >= estimate["annual"] >= estimate["lo"]

    def test_missing_scalar_uses_default(self) -> None:
        client = _create_test_client()
        data = client.post("/api/estimate", json={"year": 1975, "sqft": 1750}).json()
        assert data["estimate"]["regional_scalar"] == 1.30


class TestEstimateInvalidInput:
    @pytest.mark.parametrize(
        "body",
        [{"year": True, "sqft": 1750}, {"year": 1975, "sqft": False}],
    )
    def test_boolean_inputs_return_422(self, body: dict[str, object]) -> None:
        client = _create_test_client()
        response = client.post("/api/estimate", json=body)

        assert response.status_code == 422
        assert response.json()["detail"] == INVALID_INPUT_MESSAGE

    def test_non_numeric_year_returns_422(self) -> None:
        client = _create_test_client()
        response = client.post("/api/estimate", json={"year": "abc", "sqft": 1750})

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == INVALID_INPUT_MESSAGE
        assert "chart" not in data

    def test_missing_sqft_returns_422(self) -> None:
        client = _create_test_client()
        response = client.post("/api/estimate", json={"year": 1975})

        assert response.status_code == 422
        assert response.json()["detail"] == INVALID_INPUT_MESSAGE


# ---------------------------------------------------------------------------
# Sample estimate
# ---------------------------------------------------------------------------


class TestSampleEstimate:
    def test_sample_estimate(self) -> None:
        client = _create_test_client()
        response = client.get("/api/sample-estimate")

        assert response.status_code == 200
        data = response.json()
        assert data["inputs"] == {"year": 1975, "sqft": 1750, "scalar": 1.3}
        assert data["summary_dict"]["monthly_formatted"] == "$200"
        assert len(data["chart"]["data"]["datasets"][0]["data"]) == 12

    def test_engine_is_created_lazily_once(self) -> None:
        app = create_app()
        client = TestClient(app)
        assert app.state.cost_engine is None

        client.get("/api/sample-estimate")
        first = app.state.cost_engine
        client.get("/api/sample-estimate")

        assert isinstance(first, CostEngine)
        assert app.state.cost_engine is first
