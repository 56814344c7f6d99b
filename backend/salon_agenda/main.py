# backend/salon_agenda/main.py
import logging
import sys

from fastapi import FastAPI

from .config import settings
from .database import Base, engine
from . import models  # noqa: F401  (registers the tables on Base.metadata)
from .routers import availability as availability_router
from .routers import blocks as blocks_router
from .routers import collaborators as collaborators_router
from .routers import schedules as schedules_router

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Logs to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s]: %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Salon Agenda", version="0.1.0")

# --- API Routers ---
app.include_router(collaborators_router.router)
app.include_router(schedules_router.router)
app.include_router(blocks_router.router)
app.include_router(availability_router.router)


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("Salon agenda started (env=%s)", settings.APP_ENV)


@app.get("/ping")
def ping():
    return {"ok": True}

# uvicorn salon_agenda.main:app --reload
