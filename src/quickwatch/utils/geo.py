"""Geolocation utilities for distance calculations."""

import math
from dataclasses import dataclass

# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees."""

    latitude: float
    longitude: float


def calculate_haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """
    Calculate straight-line distance between two points using Haversine formula.

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees

    Returns:
        Distance in kilometers (float)

    Example:
        >>> # Shibuya Station to Shinjuku Station (~3.4km)
        >>> distance = calculate_haversine_distance(35.6580, 139.7016, 35.6896, 139.7006)
        >>> 3.2 < distance < 3.7
        True
    """
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = math.radians(lat2)
    lon2_rad = math.radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    # d = 2r × arcsin(√(sin²(Δφ/2) + cos(φ1)×cos(φ2)×sin²(Δλ/2)))
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    # Clamp so rounding noise near antipodal points cannot push asin out of domain
    c = 2 * math.asin(math.sqrt(min(1.0, a)))

    return EARTH_RADIUS_KM * c


def distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometers between two coordinates."""
    return calculate_haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def format_distance(km: float) -> str:
    """
    Format a distance for display.

    Distances under a kilometer are shown in whole meters ("350m"), rounded
    half up, anything else in kilometers with one decimal place ("2.3km").
    A distance that rounds to 1000m is shown as "1.0km".
    """
    meters = math.floor(km * 1000 + 0.5)
    if meters < 1000:
        return f"{meters}m"
    return f"{km:.1f}km"
