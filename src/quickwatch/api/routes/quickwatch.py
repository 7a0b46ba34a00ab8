"""Quick-watch API endpoint: what can I see in the next hour and a half?"""

import logging
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, Query
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quickwatch.api.dependencies import get_now, get_user_location
from quickwatch.config import settings
from quickwatch.database import get_db
from quickwatch.models import Showtime
from quickwatch.schemas import QuickWatchResponse, RankedShowtimeResponse
from quickwatch.services.badges import compute_badges
from quickwatch.services.candidates import build_candidates
from quickwatch.services.ranking import SortMode, rank
from quickwatch.utils.geo import Coordinate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/quickwatch", response_model=QuickWatchResponse)
async def get_quickwatch(
    sort: SortMode = Query(SortMode.RECOMMENDED, description="recommended, ranking, distance or time"),
    user_location: Coordinate = Depends(get_user_location),
    now: datetime = Depends(get_now),
    db: AsyncSession = Depends(get_db),
) -> QuickWatchResponse:
    """
    Showtimes starting soon near the user.

    Covers showtimes starting between the configured lead time and window
    end (10 and 90 minutes from now by default), ordered by the chosen
    strategy and annotated with highlight badges.
    """
    window_start = now + timedelta(minutes=settings.quickwatch_min_lead_minutes)
    window_end = now + timedelta(minutes=settings.quickwatch_window_minutes)

    stmt = (
        select(Showtime)
        .options(
            selectinload(Showtime.theater),
            selectinload(Showtime.movie),
        )
        .where(
            and_(
                Showtime.start_time >= window_start,
                Showtime.start_time <= window_end,
            )
        )
        .order_by(Showtime.start_time)
    )

    result = await db.execute(stmt)
    showtimes = result.scalars().all()

    candidates = build_candidates(showtimes, user_location)
    badges = compute_badges(candidates)
    ranked = rank(candidates, sort, now=now)

    logger.info(
        f"Quick-watch: {len(ranked)} showtimes between "
        f"{window_start:%H:%M} and {window_end:%H:%M}, sort={sort.value}"
    )

    return QuickWatchResponse(
        sort=sort,
        total=len(ranked),
        window_start=window_start,
        window_end=window_end,
        showtimes=[
            RankedShowtimeResponse.from_candidate(c, now, badges[c.showtime.id])
            for c in ranked
        ],
    )
