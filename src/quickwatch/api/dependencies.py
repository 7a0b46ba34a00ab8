"""Request-scoped FastAPI dependencies."""

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import Query

from quickwatch.config import settings
from quickwatch.utils.geo import Coordinate


def get_now() -> datetime:
    """
    Current instant in the configured local timezone.

    Routes take "now" through this dependency so tests can pin the clock.
    """
    return datetime.now(ZoneInfo(settings.timezone))


def get_user_location(
    lat: float | None = Query(None, ge=-90, le=90, description="User latitude"),
    lng: float | None = Query(None, ge=-180, le=180, description="User longitude"),
) -> Coordinate:
    """User location from query parameters, falling back to the configured default."""
    if lat is None or lng is None:
        return Coordinate(latitude=settings.default_latitude, longitude=settings.default_longitude)
    return Coordinate(latitude=lat, longitude=lng)
