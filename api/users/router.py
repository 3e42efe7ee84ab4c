"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core import db
from core.dependencies import get_db

from . import service

router = APIRouter()


@router.get("/users")
async def get_users(conn: db.Database = Depends(get_db)) -> dict:
    users = await service.list_users(conn)
    return {"users": users}


@router.get("/users/{username}")
async def get_user(username: str, conn: db.Database = Depends(get_db)) -> dict:
    user = await service.get_user(conn, username)
    return {"user": user}
