"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from . import db


def get_db(request: Request) -> db.Database:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialized. Open it in the app lifespan.")
    return database
