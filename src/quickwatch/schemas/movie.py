"""Pydantic schemas for movie data."""

from pydantic import BaseModel, ConfigDict


class MovieResponse(BaseModel):
    """Movie response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    poster_url: str | None = None
    duration: int
    genre: str
    ranking: int | None = None
    rating: float | None = None
