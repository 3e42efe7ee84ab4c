"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_users(conn: db.Database) -> list[dict[str, Any]]:
    return await conn.fetch_all(
        """
        SELECT username, name, avatar_url
        FROM users
        ORDER BY username ASC
        """
    )


async def get_user_by_username(conn: db.Database, username: str) -> dict[str, Any] | None:
    return await conn.fetch_one(
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )
