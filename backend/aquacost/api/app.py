"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from aquacost.engine import ENGINE_VERSION
from aquacost.exceptions import AquaCostError
from aquacost.models.inputs import HVACInput, RainwaterInput

if TYPE_CHECKING:
    from aquacost.engine import EstimationEngine
    from aquacost.models.result import CalculatorResult

logger = logging.getLogger(__name__)

CORS_ORIGINS_ENV = "AQUACOST_CORS_ORIGINS"
_DEFAULT_CORS_ORIGINS = "http://localhost:8081"


def _cors_origins() -> list[str]:
    raw = os.environ.get(CORS_ORIGINS_ENV, _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _result_payload(result: CalculatorResult) -> dict[str, Any]:
    return {
        "result": result.model_dump(mode="json", exclude_none=True),
        "summary": result.to_summary_dict(),
    }


def create_app(*, engine: EstimationEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on first
        request, honouring ``AQUACOST_CATALOG_PATH``.
    """
    app = FastAPI(title="AquaCost", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject a custom catalog
    app.state.engine = engine

    def _get_engine() -> EstimationEngine:
        eng: EstimationEngine | None = app.state.engine
        if eng is not None:
            return eng
        from aquacost.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/catalog
    # ------------------------------------------------------------------

    @app.get("/api/catalog")
    def catalog() -> dict[str, Any]:
        try:
            return _get_engine().catalog.model_dump(mode="json")
        except AquaCostError as exc:
            logger.exception("Catalog error")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # POST /api/rainwater/estimate
    # ------------------------------------------------------------------

    @app.post("/api/rainwater/estimate", response_model=None)
    def estimate_rainwater(
        form: dict[str, Any] = Body(...),
    ) -> dict[str, Any] | JSONResponse:
        try:
            eng = _get_engine()
            errors = eng.validate_rainwater(form)
            if errors:
                return JSONResponse(status_code=422, content={"errors": errors})
            result = eng.estimate_rainwater(RainwaterInput.model_validate(form))
        except AquaCostError as exc:
            logger.exception("Engine error during rainwater estimate")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return _result_payload(result)

    # ------------------------------------------------------------------
    # POST /api/hvac/estimate
    # ------------------------------------------------------------------

    @app.post("/api/hvac/estimate", response_model=None)
    def estimate_hvac(
        form: dict[str, Any] = Body(...),
    ) -> dict[str, Any] | JSONResponse:
        try:
            eng = _get_engine()
            errors = eng.validate_hvac(form)
            if errors:
                return JSONResponse(status_code=422, content={"errors": errors})
            result = eng.estimate_hvac(HVACInput.model_validate(form))
        except AquaCostError as exc:
            logger.exception("Engine error during HVAC estimate")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return _result_payload(result)

    return app
