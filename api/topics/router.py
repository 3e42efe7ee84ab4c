"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core import db
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.get("/topics")
async def get_topics(conn: db.Database = Depends(get_db)) -> dict:
    topics = await service.list_topics(conn)
    return {"topics": topics}
