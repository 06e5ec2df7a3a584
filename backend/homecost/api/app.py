"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from homecost.data.reference import DEFAULT_REGIONAL_SCALAR  # noqa: E402
from homecost.engine import COST_DATA_VERSION, ENGINE_VERSION  # noqa: E402
from homecost.exceptions import UnresolvableInputError  # noqa: E402
from homecost.inputs import parse_int, resolve_regional_scalar  # noqa: E402
from homecost.seasonal import build_chart_config  # noqa: E402

if TYPE_CHECKING:
    from homecost.engine import CostEngine
    from homecost.models.estimate import EstimateResult

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter a valid year and square footage."
DEFAULT_CORS_ORIGINS = "http://localhost:3000"


class EstimateRequest(BaseModel):
    """Raw calculator form values; numbers or strings are both accepted.

    ``bool`` is listed first so JSON booleans reach the parsers unchanged
    instead of being coerced to 0 or 1.
    """

    year: bool | int | float | str | None = None
    sqft: bool | int | float | str | None = None
    scalar: bool | int | float | str | None = None


def _cors_origins() -> list[str]:
    raw = os.environ.get("HOMECOST_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _estimate_payload(result: EstimateResult) -> dict[str, Any]:
    return {
        "estimate": result.model_dump(mode="json"),
        "summary_dict": result.to_summary_dict(),
        "chart": build_chart_config(result.monthly).to_chartjs(),
    }


def create_app(*, cost_engine: CostEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on first
        request.
    """
    app = FastAPI(title="homecost", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from homecost.factory import create_default_engine

        eng = create_default_engine()
        app.state.cost_engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": ENGINE_VERSION,
            "cost_data_version": COST_DATA_VERSION,
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        year = parse_int(request.year)
        sqft = parse_int(request.sqft)
        scalar = resolve_regional_scalar(request.scalar)

        engine = _get_cost_engine()
        try:
            result = engine.estimate_or_raise(year, sqft, scalar)
        except UnresolvableInputError as exc:
            logger.info("Rejected estimate request: %s", exc)
            raise HTTPException(status_code=422, detail=INVALID_INPUT_MESSAGE) from exc
        return _estimate_payload(result)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        engine = _get_cost_engine()
        result = engine.estimate_or_raise(1975, 1750, DEFAULT_REGIONAL_SCALAR)
        payload = _estimate_payload(result)
        payload["inputs"] = {
            "year": 1975,
            "sqft": 1750,
            "scalar": DEFAULT_REGIONAL_SCALAR,
        }
        return payload

    return app
