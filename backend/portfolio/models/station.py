"""
Portfolio Backend — Air Quality Station SQLAlchemy Model
==========================================================

What:  ORM model for the `air_quality_stations` table behind the demo
       dashboard and data explorer.
Why:   The demos must work without a live AQICN token, so a curated set of
       stations with a snapshot reading lives in the database.

Columns of note:
    - aqi / category / pollutant: the snapshot reading. category is the
      display band ("Good", "Moderate", ...) derived from aqi when omitted.
    - last_updated: ISO timestamp string of the reading, as reported.
    - status: 'active' or 'inactive'.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, func, text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.database import Base


class AirQualityStation(Base):
    __tablename__ = "air_quality_stations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    coordinates_lng: Mapped[float] = mapped_column(Float, nullable=False)
    coordinates_lat: Mapped[float] = mapped_column(Float, nullable=False)
    aqi: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(64), nullable=False)
    pollutant: Mapped[str] = mapped_column(String(32), nullable=False)
    last_updated: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="active",
        server_default=text("'active'"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.current_timestamp(),
    )

    __table_args__ = (
        Index("idx_air_quality_stations_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<AirQualityStation(id={self.id}, name='{self.name}', aqi={self.aqi})>"
