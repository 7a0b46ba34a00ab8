"""Pydantic schemas for viewing history."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from quickwatch.schemas.movie import MovieResponse
from quickwatch.schemas.theater import TheaterResponse


class WatchedMovieResponse(BaseModel):
    """Viewing history entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    watched_at: datetime
    memo: str
    movie: MovieResponse
    theater: TheaterResponse | None = None


class MemoUpdate(BaseModel):
    memo: str
