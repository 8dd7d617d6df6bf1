# serenity_pulse/main.py
"""ASGI entry point: ``uvicorn serenity_pulse.main:app``."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from serenity_pulse.config import settings
from serenity_pulse.infrastructure.db.bootstrap import init_engine, dispose_engine
from serenity_pulse.api.access.routes import router as access_router
from serenity_pulse.api.admin.routes import router as admin_router
from serenity_pulse.api.breathing.routes import router as breathing_router
from serenity_pulse.api.checkin.routes import router as checkin_router
from serenity_pulse.api.goals.routes import router as goals_router
from serenity_pulse.api.profile.routes import router as profile_router
from serenity_pulse.api.progress.routes import router as progress_router
from serenity_pulse.api.suggestions.routes import router as suggestions_router

logging.basicConfig(
    level=getattr(logging, settings().log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
for noisy in ("sqlalchemy.engine", "httpx", "openai"):
    logging.getLogger(noisy).setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_engine(settings())
    logger.info("Serenity Pulse API started")
    yield
    await dispose_engine()


app = FastAPI(title="Serenity Pulse API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(checkin_router)
app.include_router(goals_router)
app.include_router(progress_router)
app.include_router(admin_router)
app.include_router(profile_router)
app.include_router(suggestions_router)
app.include_router(breathing_router)
app.include_router(access_router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
