"""Pydantic schemas for ranked showtimes."""

import math
from datetime import datetime

from pydantic import BaseModel

from quickwatch.schemas.movie import MovieResponse
from quickwatch.schemas.theater import TheaterResponse
from quickwatch.services.badges import Badge
from quickwatch.services.candidates import Candidate
from quickwatch.services.ranking import SortMode
from quickwatch.utils.geo import format_distance


class RankedShowtimeResponse(BaseModel):
    """A showtime as presented to the user, with its theater and movie."""

    id: int
    start_time: datetime
    screen: str
    theater: TheaterResponse
    movie: MovieResponse
    distance_km: float
    distance_label: str
    minutes_until_start: int
    score: float | None = None
    badges: list[Badge] = []

    @classmethod
    def from_candidate(
        cls,
        candidate: Candidate,
        now: datetime,
        badges: list[Badge] | None = None,
    ) -> "RankedShowtimeResponse":
        showtime = candidate.showtime
        seconds_until_start = (showtime.start_time - now).total_seconds()
        return cls(
            id=showtime.id,
            start_time=showtime.start_time,
            screen=showtime.screen,
            theater=TheaterResponse.model_validate(candidate.theater),
            movie=MovieResponse.model_validate(candidate.movie),
            distance_km=round(candidate.distance_km, 2),
            distance_label=format_distance(candidate.distance_km),
            minutes_until_start=math.floor(seconds_until_start / 60),
            score=round(candidate.score, 4) if candidate.score is not None else None,
            badges=badges or [],
        )


class QuickWatchResponse(BaseModel):
    """Response for the quick-watch endpoint."""

    sort: SortMode
    total: int
    window_start: datetime
    window_end: datetime
    showtimes: list[RankedShowtimeResponse]


class MovieWithShowtimes(BaseModel):
    """A movie with today's remaining showtimes, nearest theater first."""

    movie: MovieResponse
    showtimes: list[RankedShowtimeResponse]
