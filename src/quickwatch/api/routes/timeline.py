"""Timeline API endpoint: today's schedule at the user's favorite theaters."""

import logging
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quickwatch.api.dependencies import get_now, get_user_location
from quickwatch.config import settings
from quickwatch.database import get_db
from quickwatch.models import FavoriteTheater, Showtime
from quickwatch.schemas import RankedShowtimeResponse
from quickwatch.services.candidates import build_candidates
from quickwatch.services.ranking import SortMode, rank
from quickwatch.utils.geo import Coordinate
from quickwatch.utils.time import end_of_day

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/timeline", response_model=list[RankedShowtimeResponse])
async def get_timeline(
    user_location: Coordinate = Depends(get_user_location),
    now: datetime = Depends(get_now),
    db: AsyncSession = Depends(get_db),
) -> list[RankedShowtimeResponse]:
    """
    Remaining showtimes today at favorite theaters, in start-time order.

    Returns an empty list when the user has no favorite theaters.
    """
    favorites_result = await db.execute(select(FavoriteTheater.theater_id))
    theater_ids = list(favorites_result.scalars().all())

    if not theater_ids:
        logger.info("Timeline requested with no favorite theaters")
        return []

    stmt = (
        select(Showtime)
        .options(
            selectinload(Showtime.theater),
            selectinload(Showtime.movie),
        )
        .where(
            and_(
                Showtime.theater_id.in_(theater_ids),
                Showtime.start_time >= now + timedelta(minutes=settings.quickwatch_min_lead_minutes),
                Showtime.start_time <= end_of_day(now),
            )
        )
        .order_by(Showtime.start_time)
    )

    result = await db.execute(stmt)
    showtimes = result.scalars().all()

    ranked = rank(build_candidates(showtimes, user_location), SortMode.TIME, now=now)
    logger.info(f"Timeline: {len(ranked)} showtimes across {len(theater_ids)} favorite theaters")

    return [RankedShowtimeResponse.from_candidate(c, now) for c in ranked]
