"""Movie model for storing film metadata."""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickwatch.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from quickwatch.models.showtime import Showtime


class Movie(Base, TimestampMixin):
    """
    Movie model.

    ranking is the box-office position (1 = most popular) and rating is an
    average review score out of 5. Both are optional.
    """

    __tablename__ = "movies"
    __table_args__ = (
        CheckConstraint("duration > 0", name="ck_movies_duration_positive"),
        CheckConstraint("ranking IS NULL OR ranking > 0", name="ck_movies_ranking_positive"),
        CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 5)", name="ck_movies_rating_range"),
    )

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    poster_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    ranking: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Relationships
    showtimes: Mapped[list["Showtime"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r}, ranking={self.ranking})>"
