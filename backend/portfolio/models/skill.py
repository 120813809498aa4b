"""
Portfolio Backend — Skill SQLAlchemy Model
============================================

What:  ORM model for the `skills` table that feeds the skills matrix/chart.
How:   Names are unique; proficiency is a 1-5 rating enforced by a CHECK
       constraint as well as by the request schema.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    proficiency: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.current_timestamp(),
    )

    __table_args__ = (
        CheckConstraint("proficiency >= 1 AND proficiency <= 5", name="ck_skills_proficiency"),
    )

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name='{self.name}', proficiency={self.proficiency})>"
