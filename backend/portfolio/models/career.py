"""
Portfolio Backend — Career SQLAlchemy Models
==============================================

What:  ORM models for the `career_positions` and `career_accomplishments` tables.
Why:   A position owns an ordered list of bullet accomplishments; keeping them
       in their own table lets an edit replace the list without touching the
       position row's identity.
Who:   Used by CareerService, the seeding routine and Alembic.

Table Design Rationale:
    - start_date / end_date: free-form "YYYY-MM" strings, exactly what the
      resume shows. end_date NULL means "current position".
    - coordinates_lng / coordinates_lat: the map marker, stored as two REAL
      columns and exposed as a [lng, lat] pair.
    - accomplishments.sort_order: preserves the order the admin typed them in.

Cascade:
    Deleting a position deletes its accomplishments. The ORM cascade handles
    this for deletes issued through the session; the FK's ON DELETE CASCADE
    covers raw SQL deletes on engines that enforce foreign keys.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CareerPosition(Base):
    """
    One employment record.

    Query Patterns:
        - Timeline: SELECT ... ORDER BY start_date ASC
          → idx_career_positions_start_date
    """

    __tablename__ = "career_positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[str] = mapped_column(String(32), nullable=False)
    end_date: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    coordinates_lng: Mapped[float] = mapped_column(Float, nullable=False)
    coordinates_lat: Mapped[float] = mapped_column(Float, nullable=False)

    # Python-side defaults keep the values readable right after flush; a
    # server-generated value would be expired and need a reload.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.current_timestamp(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.current_timestamp(),
    )

    # lazy="selectin": async sessions cannot lazy-load on attribute access,
    # so the bullets are always fetched together with their positions.
    accomplishments: Mapped[List["CareerAccomplishment"]] = relationship(
        back_populates="position",
        cascade="all, delete-orphan",
        order_by="CareerAccomplishment.sort_order",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_career_positions_start_date", "start_date"),
    )

    def __repr__(self) -> str:
        return f"<CareerPosition(id={self.id}, title='{self.title}', company='{self.company}')>"


class CareerAccomplishment(Base):
    """One bullet point under a career position."""

    __tablename__ = "career_accomplishments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    position_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("career_positions.id", ondelete="CASCADE"),
        nullable=False,
    )
    accomplishment: Mapped[str] = mapped_column(Text, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    position: Mapped[CareerPosition] = relationship(back_populates="accomplishments")

    __table_args__ = (
        Index("idx_career_accomplishments_position", "position_id", "sort_order"),
    )

    def __repr__(self) -> str:
        return f"<CareerAccomplishment(position_id={self.position_id}, sort_order={self.sort_order})>"
