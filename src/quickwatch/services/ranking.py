"""Ordering strategies for showtime candidates."""

import logging
from collections import deque
from collections.abc import Sequence
from datetime import datetime
from enum import Enum

from quickwatch.services.candidates import Candidate, effective_ranking
from quickwatch.services.scoring import score_candidates

logger = logging.getLogger(__name__)

# A single movie may fill at most this many consecutive slots in popularity order
MAX_CONSECUTIVE_SHOWTIMES = 4


class SortMode(str, Enum):
    """Selectable ordering policy."""

    RECOMMENDED = "recommended"
    RANKING = "ranking"
    DISTANCE = "distance"
    TIME = "time"


def sort_by_recommendation(candidates: Sequence[Candidate], now: datetime) -> list[Candidate]:
    """Highest score first; equal scores keep their input order."""
    scored = score_candidates(candidates, now)
    return sorted(scored, key=lambda c: c.score, reverse=True)


def sort_by_distance(candidates: Sequence[Candidate]) -> list[Candidate]:
    return sorted(candidates, key=lambda c: c.distance_km)


def sort_by_start_time(candidates: Sequence[Candidate]) -> list[Candidate]:
    return sorted(candidates, key=lambda c: c.start_time)


def interleave_by_popularity(
    candidates: Sequence[Candidate],
    max_consecutive: int = MAX_CONSECUTIVE_SHOWTIMES,
) -> list[Candidate]:
    """
    Order by movie popularity without letting one movie crowd out the rest.

    Showtimes are queued per movie (keeping their input order) and movies are
    visited from most to least popular. Each slot goes to the most popular
    movie that still has showtimes, unless that movie already holds the
    previous max_consecutive slots, in which case the next movie down gets it.
    When only a capped movie is left its remaining showtimes are emitted
    anyway.

    Args:
        candidates: Candidates to order
        max_consecutive: Longest allowed run of a single movie

    Returns:
        All candidates, each exactly once
    """
    queues: dict[str, deque[Candidate]] = {}
    rankings: dict[str, int] = {}
    for candidate in candidates:
        movie_id = candidate.movie_id
        if movie_id not in queues:
            queues[movie_id] = deque()
            rankings[movie_id] = effective_ranking(candidate.movie)
        queues[movie_id].append(candidate)

    # sorted() is stable, so equal rankings keep first-appearance order
    movie_order = sorted(queues, key=lambda movie_id: rankings[movie_id])

    result: list[Candidate] = []
    last_movie_id: str | None = None
    run_length = 0

    while len(result) < len(candidates):
        picked = next(
            (
                movie_id
                for movie_id in movie_order
                if queues[movie_id]
                and (movie_id != last_movie_id or run_length < max_consecutive)
            ),
            None,
        )

        if picked is None:
            # Only the capped movie has showtimes left
            picked = next(movie_id for movie_id in movie_order if queues[movie_id])
            logger.debug(f"Run cap reached with no alternatives, continuing with movie {picked}")
            run_length = 1
        elif picked == last_movie_id:
            run_length += 1
        else:
            run_length = 1

        result.append(queues[picked].popleft())
        last_movie_id = picked

    return result


def rank(
    candidates: Sequence[Candidate],
    mode: SortMode,
    *,
    now: datetime,
) -> list[Candidate]:
    """
    Order candidates using the selected strategy.

    Args:
        candidates: Candidates for one request
        mode: Ordering policy
        now: Current instant, used by the recommended ordering

    Returns:
        New list of candidates; recommended ordering returns scored copies
    """
    mode = SortMode(mode)

    if mode is SortMode.RECOMMENDED:
        return sort_by_recommendation(candidates, now)
    if mode is SortMode.RANKING:
        return interleave_by_popularity(candidates)
    if mode is SortMode.DISTANCE:
        return sort_by_distance(candidates)
    return sort_by_start_time(candidates)
