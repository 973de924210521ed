"""FastAPI application for the robotic mowing ROI calculator."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mowroi.config.settings import Settings
from mowroi.engine.resolver import resolve_flag
from mowroi.equipment.loader import CatalogLoadResult, fetch_catalog, load_catalog
from mowroi.leads.client import LeadDeliveryError, LeadEmailClient
from mowroi.leads.schema import LeadRequest, LeadValidationError
from mowroi.orchestrator.payload import build_calculator_data, json_safe, report_to_dict
from mowroi.orchestrator.pipeline import run_analysis

logger = logging.getLogger(__name__)

_HILLY_KEYS = ("isHilly", "is_hilly")


def _initial_catalog(settings: Settings) -> CatalogLoadResult:
    path = Path(settings.equipment_catalog_path) if settings.equipment_catalog_path else None
    return load_catalog(path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.equipment_catalog_url:
        fetched = await fetch_catalog(settings.equipment_catalog_url)
        # Keep the file/shipped catalog rather than downgrading to the fallback
        if not fetched.used_fallback:
            app.state.catalog = fetched
    logger.info(f"Equipment catalog source: {app.state.catalog.source.value}")
    yield
    await app.state.lead_client.aclose()


def get_catalog(request: Request) -> CatalogLoadResult:
    return request.app.state.catalog


def get_lead_client(request: Request) -> LeadEmailClient:
    return request.app.state.lead_client


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Autonomous Mowing ROI API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalog = _initial_catalog(settings)
    app.state.lead_client = LeadEmailClient(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.post("/api/calculate")
    async def calculate(
        body: dict[str, Any] = Body(default_factory=dict),
        catalog: CatalogLoadResult = Depends(get_catalog),
    ):
        """Run the full ROI analysis for a set of calculator inputs."""
        raw = dict(body)
        is_hilly = None
        for key in _HILLY_KEYS:
            if key in raw:
                is_hilly = resolve_flag(raw.pop(key))

        report = run_analysis(raw, catalog=catalog.catalog, is_hilly=is_hilly)
        payload = report_to_dict(report)
        payload["calculatorData"] = build_calculator_data(report)
        return json_safe(payload)

    @app.get("/api/equipment/models")
    async def equipment_models(catalog: CatalogLoadResult = Depends(get_catalog)):
        """List the mower models the recommender can choose from."""
        return {
            "source": catalog.source.value,
            "usedFallback": catalog.used_fallback,
            "models": [m.model_dump(by_alias=True) for m in catalog.catalog.models],
        }

    @app.post("/api/lead")
    async def submit_lead(
        body: LeadRequest,
        client: LeadEmailClient = Depends(get_lead_client),
    ):
        """Validate a lead and forward it to the sales inbox."""
        try:
            lead = body.validate_contact()
        except LeadValidationError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})

        try:
            await client.send(lead)
        except LeadDeliveryError:
            return JSONResponse(status_code=500, content={"error": "Failed to send email"})
        except Exception:
            logger.exception("Lead submission failed")
            return JSONResponse(status_code=500, content={"error": "Internal server error"})

        return {"success": True}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


_settings = Settings()
logging.basicConfig(level=_settings.log_level)
app = create_app(_settings)
