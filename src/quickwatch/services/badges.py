"""Highlight badges for showtime candidates."""

from collections.abc import Sequence
from enum import Enum

from quickwatch.services.candidates import Candidate, has_ranking

HIGH_RATING_THRESHOLD = 4.0
TRENDING_RANKING_CUTOFF = 10


class Badge(str, Enum):
    EARLIEST_START = "earliest-start"
    NEAREST = "nearest"
    HIGH_RATING = "high-rating"
    TRENDING = "trending"


def compute_badges(candidates: Sequence[Candidate]) -> dict[int, list[Badge]]:
    """
    Tag each candidate with the highlights that apply to it.

    "earliest-start" and "nearest" go to every candidate tied for the batch
    minimum; "high-rating" and "trending" depend only on the movie.

    Args:
        candidates: The batch being presented

    Returns:
        Mapping of showtime id to its badges (possibly empty)
    """
    if not candidates:
        return {}

    earliest_start = min(c.start_time for c in candidates)
    nearest_distance = min(c.distance_km for c in candidates)

    badges: dict[int, list[Badge]] = {}
    for candidate in candidates:
        movie = candidate.movie
        tags: list[Badge] = []

        if candidate.start_time == earliest_start:
            tags.append(Badge.EARLIEST_START)
        if candidate.distance_km == nearest_distance:
            tags.append(Badge.NEAREST)
        if movie.rating is not None and movie.rating >= HIGH_RATING_THRESHOLD:
            tags.append(Badge.HIGH_RATING)
        if has_ranking(movie) and movie.ranking <= TRENDING_RANKING_CUTOFF:
            tags.append(Badge.TRENDING)

        badges[candidate.showtime.id] = tags

    return badges
