"""
Comment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core import db
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: str, conn: db.Database = Depends(get_db)) -> Response:
    await service.remove_comment(conn, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
