"""Showtime model for movie screening times at theaters."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickwatch.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from quickwatch.models.movie import Movie
    from quickwatch.models.theater import Theater


class Showtime(Base, TimestampMixin):
    """
    Movie showtime model.

    Links a theater, a movie, and a specific start time on a screen.
    """

    __tablename__ = "showtimes"
    __table_args__ = (
        UniqueConstraint(
            "theater_id",
            "movie_id",
            "start_time",
            name="uq_theater_movie_time",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Foreign keys
    theater_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("theaters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    movie_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    screen: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    # Relationships
    theater: Mapped["Theater"] = relationship(back_populates="showtimes")
    movie: Mapped["Movie"] = relationship(back_populates="showtimes")

    def __repr__(self) -> str:
        return (
            f"<Showtime(theater_id={self.theater_id!r}, "
            f"movie_id={self.movie_id!r}, "
            f"start_time={self.start_time})>"
        )
