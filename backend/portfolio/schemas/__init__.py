"""
Portfolio Backend — Pydantic Request/Response Schemas
=======================================================

What:  The API contract between the SPA and the backend.
Why:   Schemas are separate from SQLAlchemy models so the wire format
       (camelCase, [lng, lat] coordinate pairs) can differ from the
       storage format (snake_case, two REAL columns).
"""
