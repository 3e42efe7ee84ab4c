"""
Comment business logic.
"""

from __future__ import annotations

import logging

from core import db
from core.errors import NotFoundError
from core.params import format_timestamp, parse_id

from . import repository

logger = logging.getLogger(__name__)


def _to_comment(row: dict) -> dict:
    return {
        "comment_id": int(row["comment_id"]),
        "article_id": int(row["article_id"]),
        "author": str(row["author"]),
        "body": str(row["body"]),
        "votes": int(row["votes"]),
        "created_at": format_timestamp(row["created_at"]),
    }


async def list_article_comments(conn: db.Database, raw_article_id: str) -> list[dict]:
    # Article existence is not checked: an unknown article simply has no comments.
    article_id = parse_id(raw_article_id)
    rows = await repository.list_comments_for_article(conn, article_id)
    return [_to_comment(row) for row in rows]


async def remove_comment(conn: db.Database, raw_comment_id: str) -> None:
    comment_id = parse_id(raw_comment_id)
    deleted = await repository.delete_comment(conn, comment_id)
    if deleted == 0:
        logger.debug("No comment with id %s to delete", comment_id)
        raise NotFoundError("no comment with this id exists")
    logger.info("Deleted comment %s", comment_id)
