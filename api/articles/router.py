"""
Article API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from comments import service as comment_service
from core import db
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.get("/articles")
async def get_articles(
    sort_by: str | None = Query(default=None, max_length=50),
    order: str | None = Query(default=None, max_length=10),
    topic: str | None = Query(default=None, max_length=200),
    conn: db.Database = Depends(get_db),
) -> dict:
    articles = await service.list_articles(conn, sort_by=sort_by, order=order, topic=topic)
    return {"articles": articles}


@router.get("/articles/{article_id}")
async def get_article(article_id: str, conn: db.Database = Depends(get_db)) -> dict:
    article = await service.get_article(conn, article_id)
    return {"article": article}


@router.get("/articles/{article_id}/comments")
async def get_article_comments(article_id: str, conn: db.Database = Depends(get_db)) -> dict:
    comments = await comment_service.list_article_comments(conn, article_id)
    return {"comments": comments}


@router.patch("/articles/{article_id}")
async def patch_article(
    article_id: str,
    body: Any = Body(default=None),
    conn: db.Database = Depends(get_db),
) -> dict:
    """
    Increment an article's votes by `inc_votes`. Other body keys are ignored.
    """
    article = await service.update_article_votes(conn, article_id, body)
    return {"article": article}
