"""Theater API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quickwatch.api.dependencies import get_user_location
from quickwatch.database import get_db
from quickwatch.models import FavoriteTheater, Theater
from quickwatch.schemas import FavoriteStatus, TheaterResponse, TheaterWithDistance
from quickwatch.utils.geo import Coordinate, distance, format_distance

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/theaters", response_model=list[TheaterWithDistance])
async def get_theaters(
    user_location: Coordinate = Depends(get_user_location),
    db: AsyncSession = Depends(get_db),
) -> list[TheaterWithDistance]:
    """
    Get all theaters, nearest first.

    Each theater is flagged with whether it is one of the user's favorites.
    """
    result = await db.execute(select(Theater).order_by(Theater.name))
    theaters = result.scalars().all()

    favorites_result = await db.execute(select(FavoriteTheater.theater_id))
    favorite_ids = set(favorites_result.scalars().all())

    with_distance = sorted(
        ((theater, distance(user_location, theater.coordinate)) for theater in theaters),
        key=lambda pair: pair[1],
    )

    return [
        TheaterWithDistance(
            **TheaterResponse.model_validate(theater).model_dump(),
            distance_km=round(distance_km, 2),
            distance_label=format_distance(distance_km),
            is_favorite=theater.id in favorite_ids,
        )
        for theater, distance_km in with_distance
    ]


async def _get_theater_or_404(db: AsyncSession, theater_id: str) -> Theater:
    theater = await db.get(Theater, theater_id)
    if theater is None:
        raise HTTPException(status_code=404, detail=f"Theater {theater_id} not found")
    return theater


@router.put("/theaters/{theater_id}/favorite", response_model=FavoriteStatus)
async def add_favorite(
    theater_id: str,
    db: AsyncSession = Depends(get_db),
) -> FavoriteStatus:
    """Add a theater to the user's favorites. Adding twice is a no-op."""
    await _get_theater_or_404(db, theater_id)

    result = await db.execute(
        select(FavoriteTheater).where(FavoriteTheater.theater_id == theater_id)
    )
    if result.scalar_one_or_none() is None:
        db.add(FavoriteTheater(theater_id=theater_id))
        logger.info(f"Added favorite theater {theater_id}")

    return FavoriteStatus(theater_id=theater_id, is_favorite=True)


@router.delete("/theaters/{theater_id}/favorite", response_model=FavoriteStatus)
async def remove_favorite(
    theater_id: str,
    db: AsyncSession = Depends(get_db),
) -> FavoriteStatus:
    """Remove a theater from the user's favorites."""
    await _get_theater_or_404(db, theater_id)

    await db.execute(delete(FavoriteTheater).where(FavoriteTheater.theater_id == theater_id))
    logger.info(f"Removed favorite theater {theater_id}")

    return FavoriteStatus(theater_id=theater_id, is_favorite=False)
