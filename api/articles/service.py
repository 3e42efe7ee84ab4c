"""
Article business logic.

Scope:
- list articles (sortable, filterable by topic) with comment counts
- fetch a single article
- apply vote increments
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from core import db
from core.errors import InvalidInputError, NotFoundError, NullValueError
from core.params import format_timestamp, parse_id
from topics import repository as topic_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

ARTICLE_NOT_FOUND_MSG = "no article with this id exists"


def _to_article(row: dict) -> dict:
    article = {
        "article_id": int(row["article_id"]),
        "title": str(row["title"]),
        "topic": str(row["topic"]),
        "author": str(row["author"]),
        "body": str(row["body"]),
        "created_at": format_timestamp(row["created_at"]),
        "votes": int(row["votes"]),
    }
    if "comment_count" in row:
        article["comment_count"] = int(row["comment_count"])
    return article


def parse_vote_update(body: Any) -> schemas.ArticleVoteUpdate:
    """
    Validate a raw PATCH body into an ArticleVoteUpdate.

    Missing/null `inc_votes` -> NullValueError; anything else invalid -> InvalidInputError.
    """
    if body is None:
        raise NullValueError()
    if not isinstance(body, dict):
        raise InvalidInputError()
    if body.get("inc_votes") is None:
        raise NullValueError()
    try:
        return schemas.ArticleVoteUpdate.model_validate(body)
    except ValidationError as exc:
        raise InvalidInputError() from exc


async def list_articles(
    conn: db.Database,
    *,
    sort_by: str | None = None,
    order: str | None = None,
    topic: str | None = None,
) -> list[dict]:
    sort_by = (sort_by or "created_at").strip()
    order = (order or "desc").strip().lower()
    if sort_by not in repository.SORT_COLUMNS or order not in repository.SORT_ORDERS:
        raise InvalidInputError()

    rows = await repository.list_articles(conn, sort_by=sort_by, order=order, topic=topic)
    # An empty result is only an error when the topic itself is unknown.
    if topic is not None and not rows and not await topic_repository.topic_exists(conn, topic):
        logger.debug("No topic with slug %r", topic)
        raise NotFoundError("no topic with this slug exists")
    return [_to_article(row) for row in rows]


async def get_article(conn: db.Database, raw_article_id: str) -> dict:
    article_id = parse_id(raw_article_id)
    row = await repository.get_article(conn, article_id)
    if row is None:
        logger.debug("No article with id %s", article_id)
        raise NotFoundError(ARTICLE_NOT_FOUND_MSG)
    return _to_article(row)


async def update_article_votes(conn: db.Database, raw_article_id: str, body: Any) -> dict:
    article_id = parse_id(raw_article_id)
    update = parse_vote_update(body)
    row = await repository.increment_votes(conn, article_id, update.inc_votes)
    if row is None:
        logger.debug("No article with id %s to update", article_id)
        raise NotFoundError(ARTICLE_NOT_FOUND_MSG)
    logger.info("Article %s votes changed by %s", article_id, update.inc_votes)
    return _to_article(row)
