"""Ranking candidates: showtimes joined with their theater, movie and distance."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from quickwatch.models import Movie, Showtime, Theater
from quickwatch.utils.geo import Coordinate, distance

# Movies without a box-office position rank behind everything that has one
MISSING_RANKING = 999
MISSING_RATING = 0.0


def has_ranking(movie: Movie) -> bool:
    """Whether the movie has a usable box-office position."""
    return movie.ranking is not None and movie.ranking > 0


def effective_ranking(movie: Movie) -> int:
    """Movie ranking with the missing-value default applied."""
    return movie.ranking if has_ranking(movie) else MISSING_RANKING


def effective_rating(movie: Movie) -> float:
    """Movie rating with the missing-value default applied."""
    return movie.rating or MISSING_RATING


@dataclass(frozen=True)
class Candidate:
    """
    A showtime considered for ranking.

    Carries the distance from the user and, once scored, the composite
    recommendation score. Instances are immutable; scoring returns copies.
    """

    showtime: Showtime
    distance_km: float
    score: float | None = None

    @property
    def theater(self) -> Theater:
        return self.showtime.theater

    @property
    def movie(self) -> Movie:
        return self.showtime.movie

    @property
    def movie_id(self) -> str:
        return self.showtime.movie.id

    @property
    def start_time(self) -> datetime:
        return self.showtime.start_time


def build_candidates(
    showtimes: Iterable[Showtime], user_location: Coordinate
) -> list[Candidate]:
    """
    Compute the distance to each showtime's theater.

    Showtimes must already have their theater and movie loaded.

    Args:
        showtimes: Showtimes with theater and movie relationships populated
        user_location: Where the user is standing

    Returns:
        One candidate per showtime, in input order
    """
    return [
        Candidate(
            showtime=showtime,
            distance_km=distance(user_location, showtime.theater.coordinate),
        )
        for showtime in showtimes
    ]
