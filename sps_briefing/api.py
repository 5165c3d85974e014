"""
FastAPI front end for the dispatch briefing engine.

Exposes briefing generation plus the geocode, route and road-event
building blocks as JSON endpoints. The CLI (cli.py) works independently.
"""

import logging
import os
import sys
from functools import lru_cache
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sps_briefing import __version__
from sps_briefing.config import Settings
from sps_briefing.data_models import Coordinate, Disambiguation
from sps_briefing.errors import LocationNotFound
from sps_briefing.models import BriefingRequest, GeocodeRequest, RoadEventsRequest, RouteRequest
from sps_briefing.services.geocoder import Geocoder
from sps_briefing.services.http_client import HttpClient
from sps_briefing.services.orchestrator import BriefingOrchestrator
from sps_briefing.services.providers import fetch_road_events
from sps_briefing.services.route_computer import RouteComputer, format_travel_info

_LOGGING_CONFIGURED = False


def configure_logging(settings: Settings) -> None:
    """Console plus rotating file logging, configured once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))

    os.makedirs(settings.log_dir, exist_ok=True)
    # 10MB per file, keep 5 backups
    file_handler = RotatingFileHandler(
        os.path.join(settings.log_dir, "sps_briefing.log"), maxBytes=10 * 1024 * 1024, backupCount=5
    )
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    app_logger = logging.getLogger("sps_briefing")
    app_logger.setLevel(logging.INFO)
    app_logger.addHandler(console_handler)
    app_logger.addHandler(file_handler)
    # Uvicorn installs its own root handlers
    app_logger.propagate = False
    _LOGGING_CONFIGURED = True


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


def get_client() -> HttpClient:
    """A fresh client per request; only settings are process-wide."""
    return HttpClient(get_settings())


def get_orchestrator() -> BriefingOrchestrator:
    return BriefingOrchestrator(settings=get_settings(), client=get_client())


def get_geocoder() -> Geocoder:
    return Geocoder(get_client(), get_settings())


def get_route_computer() -> RouteComputer:
    return RouteComputer(get_client(), get_settings())


configure_logging(get_settings())
logger = logging.getLogger(__name__)
logger.info(f"Briefing API starting (version {__version__})")

app = FastAPI(
    title="SPS Dispatch Briefing API",
    description="Route and briefing aggregation for wildfire dispatch",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors with clear messages."""
    error_messages = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        error_messages.append(f"{field}: {error['msg']}")

    return JSONResponse(
        status_code=422,
        content={"detail": "; ".join(error_messages)}
    )


@app.exception_handler(LocationNotFound)
async def location_not_found_handler(request: Request, exc: LocationNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc), "query": exc.query})


def _disambiguation_body(result: Disambiguation) -> Dict[str, Any]:
    return {
        "status": "disambiguation",
        "field": result.target,
        "query": result.query,
        "candidates": jsonable_encoder(result.candidates),
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "SPS Dispatch Briefing API",
        "version": __version__,
        "endpoints": {
            "POST /briefing": "Build a dispatch briefing",
            "POST /geocode": "Resolve a place name",
            "POST /route": "Drive estimate between two points",
            "POST /road-events": "Active road events near a point or along a corridor",
            "GET /health": "Health check",
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/briefing")
def briefing(request: BriefingRequest, orchestrator: BriefingOrchestrator = Depends(get_orchestrator)):
    """
    Build a dispatch briefing.

    Returns:
        {"status": "ok", "briefing": ...}, or a disambiguation body when the
        community or origin matched several places
    """
    try:
        result = orchestrator.build_briefing(
            request.community,
            fire_number=request.fire_number,
            origin=request.origin_value(),
        )
    except (LocationNotFound, ValueError):
        raise
    except Exception as e:
        logger.error(f"Briefing for {request.community!r} failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Briefing generation failed: {e}")

    if isinstance(result, Disambiguation):
        return _disambiguation_body(result)
    return {"status": "ok", "briefing": jsonable_encoder(result)}


@app.post("/geocode")
def geocode(request: GeocodeRequest, geocoder: Geocoder = Depends(get_geocoder)):
    result = geocoder.resolve(request.address)
    if isinstance(result, Disambiguation):
        return _disambiguation_body(result)
    return {"status": "ok", "match": jsonable_encoder(result)}


@app.post("/route")
def route(request: RouteRequest, route_computer: RouteComputer = Depends(get_route_computer)):
    """Drive estimate with ferry and overnight flags."""
    origin = Coordinate(request.origin_lat, request.origin_lng)
    destination = Coordinate(request.dest_lat, request.dest_lng)
    estimate = route_computer.compute(origin, destination, request.origin, request.destination)
    info = format_travel_info(
        estimate,
        request.origin or origin.label(),
        request.destination or destination.label(),
    )
    return jsonable_encoder(info)


@app.post("/road-events")
def road_events(request: RoadEventsRequest, client: HttpClient = Depends(get_client),
                settings: Settings = Depends(get_settings)):
    result = fetch_road_events(
        client, settings,
        center=request.center(),
        radius_km=request.radius_km,
        origin=request.origin(),
        destination=request.destination(),
    )
    if not result.ok:
        raise HTTPException(status_code=503, detail=f"Road events unavailable: {result.failed_reason}")
    return {"events": jsonable_encoder(result.value), "count": len(result.value)}


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    # Input the models let through but the engine rejects
    return JSONResponse(status_code=400, content={"detail": str(exc)})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
