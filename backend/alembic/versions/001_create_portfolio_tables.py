"""Create portfolio tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates career_positions, career_accomplishments, skills,
       air_quality_stations and education.
How:   Portable column types only, so the same revision runs on SQLite and
       PostgreSQL.

Rollback: downgrade() drops every table (all content is lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.func.current_timestamp(),
    )


def upgrade() -> None:
    op.create_table(
        "career_positions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("start_date", sa.String(32), nullable=False),
        # NULL end_date marks the current position
        sa.Column("end_date", sa.String(32), nullable=True),
        sa.Column("coordinates_lng", sa.Float(), nullable=False),
        sa.Column("coordinates_lat", sa.Float(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("idx_career_positions_start_date", "career_positions", ["start_date"])

    op.create_table(
        "career_accomplishments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "position_id",
            sa.Integer(),
            sa.ForeignKey("career_positions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("accomplishment", sa.Text(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(
        "idx_career_accomplishments_position",
        "career_accomplishments",
        ["position_id", "sort_order"],
    )

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("proficiency", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        sa.CheckConstraint(
            "proficiency >= 1 AND proficiency <= 5", name="ck_skills_proficiency"
        ),
    )

    op.create_table(
        "air_quality_stations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("coordinates_lng", sa.Float(), nullable=False),
        sa.Column("coordinates_lat", sa.Float(), nullable=False),
        sa.Column("aqi", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("pollutant", sa.String(32), nullable=False),
        sa.Column("last_updated", sa.String(64), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default=sa.text("'active'")),
        _timestamp("created_at"),
    )
    op.create_index("idx_air_quality_stations_name", "air_quality_stations", ["name"])

    op.create_table(
        "education",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("degree", sa.String(255), nullable=False),
        sa.Column("field_of_study", sa.String(255), nullable=False),
        sa.Column("institution", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("start_date", sa.String(32), nullable=True),
        sa.Column("end_date", sa.String(32), nullable=True),
        sa.Column("gpa", sa.String(16), nullable=True),
        sa.Column("coordinates_lng", sa.Float(), nullable=True),
        sa.Column("coordinates_lat", sa.Float(), nullable=True),
        sa.Column("accomplishments", sa.JSON(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )


def downgrade() -> None:
    op.drop_table("education")
    op.drop_index("idx_air_quality_stations_name", table_name="air_quality_stations")
    op.drop_table("air_quality_stations")
    op.drop_table("skills")
    op.drop_index("idx_career_accomplishments_position", table_name="career_accomplishments")
    op.drop_table("career_accomplishments")
    op.drop_index("idx_career_positions_start_date", table_name="career_positions")
    op.drop_table("career_positions")
