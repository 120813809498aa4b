"""
Portfolio Backend — Application Package Initializer
=====================================================

What: Marks the `portfolio` directory as a Python package.
Why:  Enables module imports like `from portfolio.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin REST API over a small relational schema:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, admin gate
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Queries, seeding, AQICN, email
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
