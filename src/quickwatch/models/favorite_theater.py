"""Favorite theater model ("my theaters")."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickwatch.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from quickwatch.models.theater import Theater


class FavoriteTheater(Base, TimestampMixin):
    """A theater the user follows; drives the timeline."""

    __tablename__ = "favorite_theaters"
    __table_args__ = (UniqueConstraint("theater_id", name="uq_favorite_theater"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    theater_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("theaters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    theater: Mapped["Theater"] = relationship()

    def __repr__(self) -> str:
        return f"<FavoriteTheater(theater_id={self.theater_id!r})>"
