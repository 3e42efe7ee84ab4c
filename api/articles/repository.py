"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

# sort key -> SQL expression. ORDER BY is never built from raw user input.
SORT_COLUMNS: dict[str, str] = {
    "article_id": "a.article_id",
    "title": "a.title",
    "topic": "a.topic",
    "author": "a.author",
    "created_at": "a.created_at",
    "votes": "a.votes",
    "comment_count": "comment_count",
}

SORT_ORDERS: dict[str, str] = {
    "asc": "ASC",
    "desc": "DESC",
}

_ARTICLE_WITH_COUNT_SELECT = """
    SELECT
      a.article_id,
      a.title,
      a.topic,
      a.author,
      a.body,
      a.created_at,
      a.votes,
      count(c.comment_id)::int AS comment_count
    FROM articles a
    LEFT JOIN comments c ON c.article_id = a.article_id
"""


async def list_articles(
    conn: db.Database,
    *,
    sort_by: str = "created_at",
    order: str = "desc",
    topic: str | None = None,
) -> list[dict[str, Any]]:
    """
    List articles with their comment counts.

    `sort_by` and `order` must be keys of SORT_COLUMNS / SORT_ORDERS.
    """
    sort_expr = SORT_COLUMNS[sort_by]
    direction = SORT_ORDERS[order]
    return await conn.fetch_all(
        _ARTICLE_WITH_COUNT_SELECT
        + f"""
        WHERE ($1::text IS NULL OR a.topic = $1)
        GROUP BY a.article_id
        ORDER BY {sort_expr} {direction}, a.article_id {direction}
        """,
        topic,
    )


async def get_article(conn: db.Database, article_id: int) -> dict[str, Any] | None:
    return await conn.fetch_one(
        _ARTICLE_WITH_COUNT_SELECT
        + """
        WHERE a.article_id = $1
        GROUP BY a.article_id
        """,
        article_id,
    )


async def increment_votes(conn: db.Database, article_id: int, inc_votes: int) -> dict[str, Any] | None:
    """
    Atomically add `inc_votes` to an article's votes.
    Returns the updated row, or None when the article does not exist.
    """
    return await conn.fetch_one(
        """
        UPDATE articles
        SET votes = votes + $2
        WHERE article_id = $1
        RETURNING article_id, title, topic, author, body, created_at, votes
        """,
        article_id,
        inc_votes,
    )
