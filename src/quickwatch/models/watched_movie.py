"""Watched movie model for the user's viewing history."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickwatch.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from quickwatch.models.movie import Movie
    from quickwatch.models.theater import Theater


class WatchedMovie(Base, TimestampMixin):
    """
    Viewing history entry.

    The theater is optional since a movie may have been watched elsewhere.
    """

    __tablename__ = "watched_movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    movie_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    theater_id: Mapped[str | None] = mapped_column(
        String(100),
        ForeignKey("theaters.id", ondelete="SET NULL"),
        nullable=True,
    )
    watched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    memo: Mapped[str] = mapped_column(Text, nullable=False, default="")

    movie: Mapped["Movie"] = relationship()
    theater: Mapped[Optional["Theater"]] = relationship()

    def __repr__(self) -> str:
        return f"<WatchedMovie(movie_id={self.movie_id!r}, watched_at={self.watched_at})>"
