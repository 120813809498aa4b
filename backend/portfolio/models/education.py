"""
Portfolio Backend — Education SQLAlchemy Model
================================================

What:  ORM model for the `education` table.
How:   Everything except degree, field of study and institution is optional.
       Accomplishments are a short list of strings kept in a JSON column
       (TEXT on SQLite, JSON on PostgreSQL); they are never queried on their own.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Education(Base):
    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    degree: Mapped[str] = mapped_column(String(255), nullable=False)
    field_of_study: Mapped[str] = mapped_column(String(255), nullable=False)
    institution: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    start_date: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    end_date: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    gpa: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    coordinates_lng: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    coordinates_lat: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    accomplishments: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=lambda: [])
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

    def __repr__(self) -> str:
        return f"<Education(id={self.id}, degree='{self.degree}', institution='{self.institution}')>"
