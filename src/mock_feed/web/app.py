"""FastAPI transport for the mock feed."""

from __future__ import annotations

import logging
import os
import random
import threading
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from mock_feed import __version__
from mock_feed.config import FeedConfig
from mock_feed.errors import NotInitializedError
from mock_feed.geometry import PolylineFeatureSet, load_feature_set
from mock_feed.simulation.service import MockFeedService
from mock_feed.web.schemas import (
    FeatureResultResponse,
    HealthResponse,
    InitializeRequest,
    InitializeResponse,
    StatusResponse,
)

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

# The service requires strictly sequential calls; endpoints run in a threadpool.
_lock = threading.Lock()
_service: MockFeedService | None = None


def _make_service(config: FeedConfig, seed: int | None) -> MockFeedService:
    rng = random.Random(seed) if seed is not None else random.Random()
    return MockFeedService(config, rng=rng)


def reset_service() -> None:
    """Drop the current service (the next page request fails until re-initialized)."""
    global _service
    with _lock:
        _service = None


def _load_default_geometry() -> None:
    """Initialize from ``MOCK_FEED_GEOMETRY`` when that variable is set."""
    global _service
    geometry_path = os.environ.get("MOCK_FEED_GEOMETRY")
    if not geometry_path:
        return
    seed = os.environ.get("MOCK_FEED_SEED")
    try:
        service = _make_service(FeedConfig.from_env(), int(seed) if seed else None)
        service.initialize(load_feature_set(geometry_path))
    except ValueError:  # includes GeometryError
        _logger.exception("Cannot initialize feed from MOCK_FEED_GEOMETRY=%s", geometry_path)
        raise
    _logger.info("Feed initialized from %s", geometry_path)
    with _lock:
        _service = service


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    _load_default_geometry()
    yield


app = FastAPI(title="Mock Tracked-Asset Feed", version=__version__, lifespan=_lifespan)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.post("/api/initialize", response_model=InitializeResponse)
def initialize(req: InitializeRequest) -> InitializeResponse:
    """Replace the feed with one built from the posted polylines."""
    global _service
    overrides = req.config.model_dump() if req.config is not None else {}
    try:
        config = FeedConfig.from_partial(overrides)
        feature_set = PolylineFeatureSet.from_dict(
            {"features": [f.model_dump() for f in req.features]}
        )
        service = _make_service(config, req.seed)
        service.initialize(feature_set)
    except ValueError as exc:  # includes GeometryError
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    with _lock:
        _service = service
    return InitializeResponse(track_count=service.track_count, page_size=config.page_size)


@app.get("/api/next", response_model=FeatureResultResponse)
def next_page() -> FeatureResultResponse:
    """Return the next page of observations."""
    with _lock:
        if _service is None:
            raise HTTPException(status_code=409, detail="Feed is not initialized")
        try:
            result = _service.next()
        except NotInitializedError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
    return FeatureResultResponse.model_validate(result.to_dict())


@app.get("/api/status", response_model=StatusResponse)
def status() -> StatusResponse:
    with _lock:
        if _service is None:
            return StatusResponse(initialized=False, track_count=0, page_size=0, tick_count=0)
        return StatusResponse(
            initialized=_service.is_initialized,
            track_count=_service.track_count,
            page_size=_service.config.page_size,
            tick_count=_service.tick_count,
        )
