import logging
import os
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from comments import router as comments_router
from core.db import Database
from core.errors import register_exception_handlers
from topics import router as topics_router
from users import router as users_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Open the DB pool once per process.
    app.state.db = await Database.connect()
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


app = FastAPI(title="news-api", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

api_router = APIRouter(prefix="/api")


@api_router.get("")
def root() -> dict:
    return {"msg": "all ok"}


api_router.include_router(topics_router.router, tags=["topics"])
api_router.include_router(articles_router.router, tags=["articles"])
api_router.include_router(comments_router.router, tags=["comments"])
api_router.include_router(users_router.router, tags=["users"])

app.include_router(api_router)
