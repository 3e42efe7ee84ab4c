"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_comments_for_article(conn: db.Database, article_id: int) -> list[dict[str, Any]]:
    return await conn.fetch_all(
        """
        SELECT comment_id, article_id, author, body, votes, created_at
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        """,
        article_id,
    )


async def delete_comment(conn: db.Database, comment_id: int) -> int:
    """
    Delete a comment. Returns the number of rows removed (0 or 1).
    """
    return await conn.execute(
        """
        DELETE FROM comments
        WHERE comment_id = $1
        """,
        comment_id,
    )
