"""Movies API endpoints."""

import logging
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quickwatch.api.dependencies import get_now, get_user_location
from quickwatch.config import settings
from quickwatch.database import get_db
from quickwatch.models import Movie, Showtime
from quickwatch.schemas import MovieResponse, MovieWithShowtimes, RankedShowtimeResponse
from quickwatch.services.candidates import build_candidates
from quickwatch.services.ranking import SortMode, rank
from quickwatch.utils.geo import Coordinate
from quickwatch.utils.time import end_of_day

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/movies", response_model=list[MovieResponse])
async def get_movies(db: AsyncSession = Depends(get_db)) -> list[Movie]:
    """Get all movies, most popular first. Unranked movies come last."""
    stmt = select(Movie).order_by(Movie.ranking.asc().nulls_last(), Movie.title)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/movies/{movie_id}/showtimes", response_model=MovieWithShowtimes)
async def get_movie_showtimes(
    movie_id: str,
    user_location: Coordinate = Depends(get_user_location),
    now: datetime = Depends(get_now),
    db: AsyncSession = Depends(get_db),
) -> MovieWithShowtimes:
    """
    Remaining showtimes today for one movie, nearest theater first.

    Showtimes starting within the quick-watch lead time are left out since
    there is no realistic way to make them.
    """
    movie = await db.get(Movie, movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=f"Movie {movie_id} not found")

    window_start = now + timedelta(minutes=settings.quickwatch_min_lead_minutes)
    window_end = end_of_day(now)

    stmt = (
        select(Showtime)
        .options(
            selectinload(Showtime.theater),
            selectinload(Showtime.movie),
        )
        .where(
            and_(
                Showtime.movie_id == movie_id,
                Showtime.start_time >= window_start,
                Showtime.start_time <= window_end,
            )
        )
        .order_by(Showtime.start_time)
    )

    result = await db.execute(stmt)
    showtimes = result.scalars().all()

    ranked = rank(build_candidates(showtimes, user_location), SortMode.DISTANCE, now=now)
    logger.info(f"Movie {movie_id}: {len(ranked)} showtimes left today")

    return MovieWithShowtimes(
        movie=MovieResponse.model_validate(movie),
        showtimes=[RankedShowtimeResponse.from_candidate(c, now) for c in ranked],
    )
