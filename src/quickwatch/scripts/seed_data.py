"""Seed script to populate demo theaters, movies and today's showtimes."""

import asyncio
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from sqlalchemy import select

from quickwatch.config import settings
from quickwatch.database import AsyncSessionLocal
from quickwatch.models import Movie, Showtime, Theater

THEATERS_DATA = [
    {
        "id": "toho-shinjuku",
        "name": "TOHOシネマズ 新宿",
        "chain": "TOHOシネマズ",
        "address": "東京都新宿区歌舞伎町1-19-1",
        "latitude": 35.6951,
        "longitude": 139.7020,
    },
    {
        "id": "toho-shibuya",
        "name": "TOHOシネマズ 渋谷",
        "chain": "TOHOシネマズ",
        "address": "東京都渋谷区道玄坂2-6-17",
        "latitude": 35.6597,
        "longitude": 139.6996,
    },
    {
        "id": "piccadilly-shinjuku",
        "name": "新宿ピカデリー",
        "chain": "ピカデリー",
        "address": "東京都新宿区新宿3-15-15",
        "latitude": 35.6927,
        "longitude": 139.7035,
    },
    {
        "id": "humax-ikebukuro",
        "name": "ヒューマックスシネマズ 池袋",
        "chain": "ヒューマックスシネマズ",
        "address": "東京都豊島区東池袋1-22-10",
        "latitude": 35.7306,
        "longitude": 139.7108,
    },
    {
        "id": "109-futakotamagawa",
        "name": "109シネマズ 二子玉川",
        "chain": "109シネマズ",
        "address": "東京都世田谷区玉川1-14-1",
        "latitude": 35.6115,
        "longitude": 139.6265,
    },
    {
        "id": "united-toyosu",
        "name": "ユナイテッド・シネマ 豊洲",
        "chain": "ユナイテッド・シネマ",
        "address": "東京都江東区豊洲2-4-9",
        "latitude": 35.6553,
        "longitude": 139.7946,
    },
    {
        "id": "aeon-itabashi",
        "name": "イオンシネマ 板橋",
        "chain": "イオンシネマ",
        "address": "東京都板橋区徳丸2-6-1",
        "latitude": 35.7707,
        "longitude": 139.6604,
    },
]

MOVIES_DATA = [
    {"id": "harbor-lights", "title": "Harbor Lights", "duration": 124, "genre": "drama", "ranking": 1, "rating": 4.4},
    {"id": "the-last-relay", "title": "The Last Relay", "duration": 138, "genre": "action", "ranking": 2, "rating": 3.9},
    {"id": "paper-moon-garden", "title": "Paper Moon Garden", "duration": 102, "genre": "animation", "ranking": 3, "rating": 4.6},
    {"id": "quiet-hours", "title": "Quiet Hours", "duration": 97, "genre": "thriller", "ranking": 8, "rating": 3.5},
    {"id": "northern-line", "title": "Northern Line", "duration": 115, "genre": "mystery", "ranking": 15, "rating": 4.1},
    {"id": "summer-of-static", "title": "Summer of Static", "duration": 109, "genre": "comedy", "ranking": 42, "rating": None},
    {"id": "restored-classic", "title": "A Restored Classic", "duration": 141, "genre": "classic", "ranking": None, "rating": 4.8},
]

FIRST_SHOWTIME_HOUR = 9
LAST_SHOWTIME_HOUR = 23
# Cleaning and trailers between screenings
TURNAROUND_MINUTES = 25


def build_demo_showtimes(now: datetime) -> list[dict]:
    """
    Generate a day of showtimes for every theater/movie pair.

    Start times are staggered per pair and repeat every runtime plus
    turnaround, rounded up to five minutes, between 09:00 and 23:00 on the
    day of now. Output is deterministic for a given day.

    Args:
        now: Any instant on the day to generate (timezone-aware)

    Returns:
        Showtime column values ready for Showtime(**data)
    """
    day_start = now.replace(hour=FIRST_SHOWTIME_HOUR, minute=0, second=0, microsecond=0)
    last_start = now.replace(hour=LAST_SHOWTIME_HOUR, minute=0, second=0, microsecond=0)

    showtimes: list[dict] = []
    for theater_index, theater in enumerate(THEATERS_DATA):
        for movie_index, movie in enumerate(MOVIES_DATA):
            offset = (theater_index * 7 + movie_index * 13) % 60
            interval = -(-(movie["duration"] + TURNAROUND_MINUTES) // 5) * 5
            screen = str(movie_index + 1)

            start_time = day_start + timedelta(minutes=offset)
            while start_time <= last_start:
                showtimes.append(
                    {
                        "theater_id": theater["id"],
                        "movie_id": movie["id"],
                        "start_time": start_time,
                        "screen": screen,
                    }
                )
                start_time += timedelta(minutes=interval)

    return showtimes


async def seed_data() -> None:
    """Seed theaters and movies if missing, then today's showtimes."""
    now = datetime.now(ZoneInfo(settings.timezone))

    async with AsyncSessionLocal() as session:
        for theater_data in THEATERS_DATA:
            if await session.get(Theater, theater_data["id"]):
                print(f"Theater {theater_data['id']} already exists, skipping")
                continue
            session.add(Theater(**theater_data))
            print(f"Added theater: {theater_data['name']}")

        for movie_data in MOVIES_DATA:
            if await session.get(Movie, movie_data["id"]):
                print(f"Movie {movie_data['id']} already exists, skipping")
                continue
            session.add(Movie(**movie_data))
            print(f"Added movie: {movie_data['title']}")

        await session.flush()

        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        result = await session.execute(
            select(Showtime.id).where(
                Showtime.start_time >= day_start,
                Showtime.start_time < day_start + timedelta(days=1),
            ).limit(1)
        )
        if result.scalar_one_or_none() is not None:
            print("Showtimes for today already exist, skipping")
        else:
            showtimes_data = build_demo_showtimes(now)
            session.add_all(Showtime(**data) for data in showtimes_data)
            print(f"Added {len(showtimes_data)} showtimes for {now:%Y-%m-%d}")

        await session.commit()
        print("Seeding complete")


def main() -> None:
    asyncio.run(seed_data())


if __name__ == "__main__":
    main()
