"""
Topic business logic.
"""

from __future__ import annotations

from core import db

from . import repository


def _to_topic(row: dict) -> dict:
    return {
        "slug": str(row["slug"]),
        "description": str(row["description"]),
    }


async def list_topics(conn: db.Database) -> list[dict]:
    rows = await repository.list_topics(conn)
    return [_to_topic(row) for row in rows]
