"""Tests for the viewing history endpoints."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from quickwatch.database import get_db
from quickwatch.models import Movie, Theater, WatchedMovie

TOKYO_TZ = ZoneInfo("Asia/Tokyo")


def make_watched(
    id: int,
    movie_id: str,
    watched_at: datetime,
    memo: str = "",
    theater: Theater | None = None,
) -> WatchedMovie:
    movie = Movie(id=movie_id, title=movie_id.replace("-", " ").title(), duration=115, genre="drama")
    w = WatchedMovie(
        id=id,
        movie_id=movie_id,
        theater_id=theater.id if theater else None,
        watched_at=watched_at,
        memo=memo,
    )
    w.movie = movie
    w.theater = theater
    return w


async def send(test_app: FastAPI, db: AsyncMock, method: str, url: str, json=None):
    async def override():
        yield db

    test_app.dependency_overrides[get_db] = override
    try:
        async with AsyncClient(
            transport=ASGITransport(app=test_app), base_url="http://test"
        ) as client:
            return await client.request(method, url, json=json)
    finally:
        test_app.dependency_overrides.pop(get_db, None)


async def test_list_watched(test_app: FastAPI) -> None:
    theater = Theater(
        id="movix-kameari",
        name="MOVIX 亀有",
        chain="MOVIX",
        address="東京都葛飾区",
        latitude=35.7672,
        longitude=139.8479,
    )
    entries = [
        make_watched(2, "quiet-hours", datetime(2026, 10, 12, 21, 0, tzinfo=TOKYO_TZ), "Great score", theater),
        make_watched(1, "harbor-lights", datetime(2026, 10, 3, 19, 30, tzinfo=TOKYO_TZ)),
    ]
    result = MagicMock()
    result.scalars.return_value.all.return_value = entries
    db = AsyncMock()
    db.execute = AsyncMock(return_value=result)

    response = await send(test_app, db, "GET", "/api/watched")

    assert response.status_code == 200
    data = response.json()
    assert [w["id"] for w in data] == [2, 1]
    assert data[0]["memo"] == "Great score"
    assert data[0]["theater"]["chain_color"] == "blue"
    assert data[1]["theater"] is None
    assert data[1]["movie"]["id"] == "harbor-lights"


async def test_update_memo(test_app: FastAPI) -> None:
    entry = make_watched(1, "harbor-lights", datetime(2026, 10, 3, 19, 30, tzinfo=TOKYO_TZ))
    db = AsyncMock()
    db.get = AsyncMock(return_value=entry)

    response = await send(test_app, db, "PATCH", "/api/watched/1", json={"memo": "Saw it twice"})

    assert response.status_code == 200
    assert response.json()["memo"] == "Saw it twice"
    assert entry.memo == "Saw it twice"


async def test_update_memo_unknown_entry_returns_404(test_app: FastAPI) -> None:
    db = AsyncMock()
    db.get = AsyncMock(return_value=None)

    response = await send(test_app, db, "PATCH", "/api/watched/99", json={"memo": "?"})

    assert response.status_code == 404


async def test_update_memo_requires_memo_field(test_app: FastAPI) -> None:
    db = AsyncMock()

    response = await send(test_app, db, "PATCH", "/api/watched/1", json={})

    assert response.status_code == 422
