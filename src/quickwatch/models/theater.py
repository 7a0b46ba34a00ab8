"""Theater model for storing cinema venue information."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickwatch.models.base import Base, TimestampMixin
from quickwatch.utils.chains import chain_color
from quickwatch.utils.geo import Coordinate

if TYPE_CHECKING:
    from quickwatch.models.showtime import Showtime


class Theater(Base, TimestampMixin):
    """
    Theater venue model.

    The chain label is free text; it is only used to pick a display color.
    """

    __tablename__ = "theaters"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    chain: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    # Relationships
    showtimes: Mapped[list["Showtime"]] = relationship(
        back_populates="theater",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Theater(id={self.id!r}, name={self.name!r}, chain={self.chain!r})>"

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @property
    def chain_color(self) -> str:
        return chain_color(self.chain)
