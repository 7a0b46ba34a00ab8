"""Pydantic schemas for API requests and responses."""

from quickwatch.schemas.movie import MovieResponse
from quickwatch.schemas.showtime import (
    MovieWithShowtimes,
    QuickWatchResponse,
    RankedShowtimeResponse,
)
from quickwatch.schemas.theater import FavoriteStatus, TheaterResponse, TheaterWithDistance
from quickwatch.schemas.watched import MemoUpdate, WatchedMovieResponse

__all__ = [
    "FavoriteStatus",
    "MemoUpdate",
    "MovieResponse",
    "MovieWithShowtimes",
    "QuickWatchResponse",
    "RankedShowtimeResponse",
    "TheaterResponse",
    "TheaterWithDistance",
    "WatchedMovieResponse",
]
