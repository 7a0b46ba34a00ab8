"""Shared test fixtures."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi import FastAPI

from quickwatch.api.dependencies import get_now
from quickwatch.api.routes import health, movies, quickwatch, theaters, timeline, watched

TOKYO_TZ = ZoneInfo("Asia/Tokyo")


@pytest.fixture
def now() -> datetime:
    """Fixed clock used by API tests: 18:00 Tokyo time."""
    return datetime(2026, 10, 18, 18, 0, tzinfo=TOKYO_TZ)


@pytest.fixture
def test_app(now: datetime) -> FastAPI:
    """Minimal FastAPI app with the clock pinned to the now fixture."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(quickwatch.router, prefix="/api")
    app.include_router(theaters.router, prefix="/api")
    app.include_router(movies.router, prefix="/api")
    app.include_router(timeline.router, prefix="/api")
    app.include_router(watched.router, prefix="/api")
    app.dependency_overrides[get_now] = lambda: now
    return app
