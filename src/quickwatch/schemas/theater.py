"""Pydantic schemas for theater data."""

from pydantic import BaseModel, ConfigDict


class TheaterResponse(BaseModel):
    """Theater response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    chain: str
    chain_color: str
    address: str
    latitude: float
    longitude: float


class TheaterWithDistance(TheaterResponse):
    """Theater annotated for the user's position and favorites."""

    distance_km: float
    distance_label: str
    is_favorite: bool = False


class FavoriteStatus(BaseModel):
    theater_id: str
    is_favorite: bool
