"""Composite recommendation scoring for showtime candidates.

Each candidate gets a weighted score in [0, 1]:

    0.60 * distance + 0.20 * time-to-start + 0.15 * popularity + 0.05 * rating

Distance and time are min/max normalized against the batch, so a score is
only meaningful relative to the other candidates scored alongside it.
Closest and soonest dominate; popularity and rating act as tie-breakers.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import datetime

from quickwatch.services.candidates import Candidate, effective_ranking, effective_rating

DISTANCE_WEIGHT = 0.60
TIME_WEIGHT = 0.20
RANKING_WEIGHT = 0.15
RATING_WEIGHT = 0.05

# Rankings at or beyond this position contribute nothing
RANKING_SCALE = 100
MAX_RATING = 5.0


@dataclass(frozen=True)
class ScoringContext:
    """Batch-wide extrema that scores are normalized against."""

    max_distance_km: float
    earliest_start: datetime
    latest_start: datetime
    now: datetime
    batch_size: int

    @classmethod
    def from_candidates(
        cls, candidates: Sequence[Candidate], now: datetime
    ) -> "ScoringContext":
        """
        Compute the context for a non-empty batch.

        Raises:
            ValueError: If candidates is empty
        """
        if not candidates:
            raise ValueError("Cannot build a scoring context for an empty batch")

        start_times = [c.start_time for c in candidates]
        return cls(
            max_distance_km=max(c.distance_km for c in candidates),
            earliest_start=min(start_times),
            latest_start=max(start_times),
            now=now,
            batch_size=len(candidates),
        )


def distance_score(candidate: Candidate, context: ScoringContext) -> float:
    # A lone candidate is the nearest and the soonest by definition
    if context.batch_size == 1 or context.max_distance_km <= 0:
        return 1.0
    return 1 - (candidate.distance_km / context.max_distance_km)


def time_score(candidate: Candidate, context: ScoringContext) -> float:
    time_range = (context.latest_start - context.earliest_start).total_seconds()
    if context.batch_size == 1 or time_range <= 0:
        return 1.0

    time_to_start = (candidate.start_time - context.now).total_seconds()
    earliest_time_to_start = (context.earliest_start - context.now).total_seconds()
    return 1 - ((time_to_start - earliest_time_to_start) / time_range)


def ranking_score(candidate: Candidate) -> float:
    return max(0.0, 1 - (effective_ranking(candidate.movie) / RANKING_SCALE))


def rating_score(candidate: Candidate) -> float:
    return effective_rating(candidate.movie) / MAX_RATING


def score(candidate: Candidate, context: ScoringContext) -> float:
    """
    Compute the weighted recommendation score for one candidate.

    Args:
        candidate: Candidate from the batch the context was built from
        context: Batch extrema and the current instant

    Returns:
        Score where higher is better, practically within 0.0-1.0
    """
    return (
        DISTANCE_WEIGHT * distance_score(candidate, context)
        + TIME_WEIGHT * time_score(candidate, context)
        + RANKING_WEIGHT * ranking_score(candidate)
        + RATING_WEIGHT * rating_score(candidate)
    )


def score_candidates(candidates: Sequence[Candidate], now: datetime) -> list[Candidate]:
    """Return copies of the candidates with their score filled in, in input order."""
    if not candidates:
        return []

    context = ScoringContext.from_candidates(candidates, now)
    return [replace(c, score=score(c, context)) for c in candidates]
