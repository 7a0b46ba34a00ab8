"""SQLAlchemy ORM models."""

from quickwatch.models.base import Base
from quickwatch.models.favorite_theater import FavoriteTheater
from quickwatch.models.movie import Movie
from quickwatch.models.showtime import Showtime
from quickwatch.models.theater import Theater
from quickwatch.models.watched_movie import WatchedMovie

__all__ = ["Base", "FavoriteTheater", "Movie", "Showtime", "Theater", "WatchedMovie"]
