"""Viewing history API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quickwatch.database import get_db
from quickwatch.models import WatchedMovie
from quickwatch.schemas import MemoUpdate, WatchedMovieResponse

router = APIRouter()


@router.get("/watched", response_model=list[WatchedMovieResponse])
async def get_watched(db: AsyncSession = Depends(get_db)) -> list[WatchedMovie]:
    """Get the viewing history, most recent first."""
    stmt = (
        select(WatchedMovie)
        .options(
            selectinload(WatchedMovie.movie),
            selectinload(WatchedMovie.theater),
        )
        .order_by(WatchedMovie.watched_at.desc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.patch("/watched/{watched_id}", response_model=WatchedMovieResponse)
async def update_memo(
    watched_id: int,
    update: MemoUpdate,
    db: AsyncSession = Depends(get_db),
) -> WatchedMovie:
    """Replace the memo on a viewing history entry."""
    watched = await db.get(
        WatchedMovie,
        watched_id,
        options=[selectinload(WatchedMovie.movie), selectinload(WatchedMovie.theater)],
    )
    if watched is None:
        raise HTTPException(status_code=404, detail=f"Watched entry {watched_id} not found")

    watched.memo = update.memo
    return watched
