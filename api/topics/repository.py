"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_topics(conn: db.Database) -> list[dict[str, Any]]:
    return await conn.fetch_all(
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug ASC
        """
    )


async def topic_exists(conn: db.Database, slug: str) -> bool:
    row = await conn.fetch_one(
        """
        SELECT 1 AS ok
        FROM topics
        WHERE slug = $1
        LIMIT 1
        """,
        slug,
    )
    return row is not None
