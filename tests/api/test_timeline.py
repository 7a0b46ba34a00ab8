"""Tests for the favorite-theater timeline endpoint."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from quickwatch.database import get_db
from quickwatch.models import Movie, Showtime, Theater


def make_theater(id: str = "toho-shibuya", name: str = "TOHOシネマズ 渋谷") -> Theater:
    return Theater(
        id=id,
        name=name,
        chain="TOHOシネマズ",
        address="東京都渋谷区",
        latitude=35.6597,
        longitude=139.6996,
    )


def make_movie(id: str, title: str) -> Movie:
    return Movie(id=id, title=title, duration=110, genre="drama", ranking=5, rating=4.1)


def make_showtime(theater: Theater, movie: Movie, showtime_id: int, start_time: datetime) -> Showtime:
    s = Showtime(
        id=showtime_id,
        theater_id=theater.id,
        movie_id=movie.id,
        start_time=start_time,
        screen="2",
    )
    s.theater = theater
    s.movie = movie
    return s


def scalars_result(items: list) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = items
    return result


async def get_timeline(test_app: FastAPI, db: AsyncMock):
    async def override():
        yield db

    test_app.dependency_overrides[get_db] = override
    try:
        async with AsyncClient(
            transport=ASGITransport(app=test_app), base_url="http://test"
        ) as client:
            return await client.get("/api/timeline")
    finally:
        test_app.dependency_overrides.pop(get_db, None)


async def test_no_favorites_returns_empty_list(test_app: FastAPI) -> None:
    db = AsyncMock()
    db.execute = AsyncMock(return_value=scalars_result([]))

    response = await get_timeline(test_app, db)

    assert response.status_code == 200
    assert response.json() == []
    # The showtime query is skipped entirely
    db.execute.assert_awaited_once()


async def test_favorites_listed_in_start_time_order(test_app: FastAPI, now: datetime) -> None:
    shibuya = make_theater()
    shinjuku = make_theater("toho-shinjuku", "TOHOシネマズ 新宿")
    showtimes = [
        make_showtime(shinjuku, make_movie("quiet-hours", "Quiet Hours"), 1, now + timedelta(hours=2)),
        make_showtime(shibuya, make_movie("harbor-lights", "Harbor Lights"), 2, now + timedelta(minutes=30)),
        make_showtime(shibuya, make_movie("northern-line", "Northern Line"), 3, now + timedelta(hours=4)),
    ]
    db = AsyncMock()
    db.execute = AsyncMock(
        side_effect=[scalars_result(["toho-shibuya", "toho-shinjuku"]), scalars_result(showtimes)]
    )

    response = await get_timeline(test_app, db)

    assert response.status_code == 200
    data = response.json()
    assert [s["id"] for s in data] == [2, 1, 3]
    assert [s["minutes_until_start"] for s in data] == [30, 120, 240]
    assert data[0]["theater"]["id"] == "toho-shibuya"
    assert db.execute.await_count == 2
