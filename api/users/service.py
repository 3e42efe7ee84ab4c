"""
User business logic.
"""

from __future__ import annotations

import logging

from core import db
from core.errors import NotFoundError

from . import repository

logger = logging.getLogger(__name__)


def _to_user(row: dict) -> dict:
    return {
        "username": str(row["username"]),
        "name": str(row["name"]),
        "avatar_url": row["avatar_url"],
    }


async def list_users(conn: db.Database) -> list[dict]:
    rows = await repository.list_users(conn)
    return [_to_user(row) for row in rows]


async def get_user(conn: db.Database, username: str) -> dict:
    username = (username or "").strip()
    row = await repository.get_user_by_username(conn, username)
    if row is None:
        logger.debug("No user with username %r", username)
        raise NotFoundError("no user with this username exists")
    return _to_user(row)
