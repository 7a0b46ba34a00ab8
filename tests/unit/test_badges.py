"""Unit tests for highlight badges."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from quickwatch.models import Movie, Showtime, Theater
from quickwatch.services.badges import Badge, compute_badges
from quickwatch.services.candidates import Candidate

TOKYO_TZ = ZoneInfo("Asia/Tokyo")
NOW = datetime(2026, 10, 18, 18, 0, tzinfo=TOKYO_TZ)

_THEATER = Theater(
    id="united-toyosu",
    name="ユナイテッド・シネマ 豊洲",
    chain="ユナイテッド・シネマ",
    address="",
    latitude=35.6553,
    longitude=139.7946,
)


def make_candidate(
    showtime_id: int,
    distance_km: float = 2.0,
    minutes_from_now: int = 45,
    ranking: int | None = None,
    rating: float | None = None,
) -> Candidate:
    movie = Movie(
        id=f"movie-{showtime_id}",
        title=f"Movie {showtime_id}",
        duration=110,
        genre="drama",
        ranking=ranking,
        rating=rating,
    )
    showtime = Showtime(
        id=showtime_id,
        theater_id=_THEATER.id,
        movie_id=movie.id,
        start_time=NOW + timedelta(minutes=minutes_from_now),
        screen="3",
    )
    showtime.theater = _THEATER
    showtime.movie = movie
    return Candidate(showtime=showtime, distance_km=distance_km)


def test_empty_batch_has_no_badges():
    assert compute_badges([]) == {}


def test_earliest_start_goes_to_all_tied_candidates():
    candidates = [
        make_candidate(1, distance_km=3.0, minutes_from_now=15),
        make_candidate(2, distance_km=3.0, minutes_from_now=15),
        make_candidate(3, distance_km=1.0, minutes_from_now=40),
    ]

    badges = compute_badges(candidates)

    assert Badge.EARLIEST_START in badges[1]
    assert Badge.EARLIEST_START in badges[2]
    assert Badge.EARLIEST_START not in badges[3]


def test_nearest_goes_to_all_tied_candidates():
    candidates = [
        make_candidate(1, distance_km=0.4, minutes_from_now=30),
        make_candidate(2, distance_km=2.5, minutes_from_now=20),
        make_candidate(3, distance_km=0.4, minutes_from_now=60),
    ]

    badges = compute_badges(candidates)

    assert badges[1] == [Badge.NEAREST]
    assert badges[2] == [Badge.EARLIEST_START]
    assert badges[3] == [Badge.NEAREST]


def test_high_rating_threshold_is_inclusive():
    candidates = [
        make_candidate(1, rating=4.0),
        make_candidate(2, rating=3.9),
        make_candidate(3, rating=None),
    ]

    badges = compute_badges(candidates)

    assert Badge.HIGH_RATING in badges[1]
    assert Badge.HIGH_RATING not in badges[2]
    assert Badge.HIGH_RATING not in badges[3]


def test_trending_requires_top_ten_ranking():
    candidates = [
        make_candidate(1, ranking=1),
        make_candidate(2, ranking=10),
        make_candidate(3, ranking=11),
        make_candidate(4, ranking=None),
    ]

    badges = compute_badges(candidates)

    assert Badge.TRENDING in badges[1]
    assert Badge.TRENDING in badges[2]
    assert Badge.TRENDING not in badges[3]
    assert Badge.TRENDING not in badges[4]


def test_single_candidate_gets_every_applicable_badge_in_order():
    candidate = make_candidate(1, ranking=3, rating=4.5)

    assert compute_badges([candidate]) == {
        1: [Badge.EARLIEST_START, Badge.NEAREST, Badge.HIGH_RATING, Badge.TRENDING]
    }


def test_candidate_with_no_highlights_gets_empty_list():
    candidates = [
        make_candidate(1, distance_km=1.0, minutes_from_now=20),
        make_candidate(2, distance_km=5.0, minutes_from_now=80, ranking=50, rating=2.0),
    ]

    assert compute_badges(candidates)[2] == []


def test_recomputing_gives_identical_badges():
    candidates = [
        make_candidate(1, distance_km=0.8, minutes_from_now=25, ranking=4, rating=4.2),
        make_candidate(2, distance_km=1.9, minutes_from_now=12, ranking=60),
        make_candidate(3, distance_km=0.8, minutes_from_now=70, rating=4.9),
    ]

    assert compute_badges(candidates) == compute_badges(candidates)


def test_badge_values_are_stable_strings():
    assert [b.value for b in Badge] == ["earliest-start", "nearest", "high-rating", "trending"]


def test_non_positive_ranking_is_not_trending():
    candidates = [make_candidate(1, ranking=0), make_candidate(2, ranking=50)]

    badges = compute_badges(candidates)

    assert Badge.TRENDING not in badges[1]
    assert Badge.TRENDING not in badges[2]
