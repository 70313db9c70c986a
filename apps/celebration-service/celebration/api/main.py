"""
FastAPI app assembly: logging, middleware, static assets and router wiring.
"""
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from celebration.db.database import init_sqlite_schema
from celebration.api.photos import router as photos_router
from celebration.api.videos import router as videos_router
from celebration.api.guestbook import router as guestbook_router
from celebration.api.support import router as support_router
from celebration.api.web import router as web_router
from celebration.utils.config import get_config

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Database schema is managed by Alembic migrations; SQLite runs have none.
    if init_sqlite_schema():
        logger.info("sqlite_schema_created")
    yield


app = FastAPI(
    title="Birthday Celebration Service",
    description="Photos, video links and guestbook messages for a single birthday celebration.",
    version=os.getenv("VERSION", "1.0.0"),
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_config().cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(photos_router)
app.include_router(videos_router)
app.include_router(guestbook_router)
app.include_router(support_router)
app.include_router(web_router)
