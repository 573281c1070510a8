import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import health, relevance
from app.routers.health import VERSION
from app.services.relevance_service import RelevanceService

logger = logging.getLogger(__name__)


def _build_allowed_origins() -> list[str]:
    origins = [settings.frontend_url]
    if settings.app_env.lower() != "production":
        for origin in ("http://localhost:3000", "http://localhost:3001"):
            if origin not in origins:
                origins.append(origin)
    return origins


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger("app").setLevel(settings.log_level.upper())
    app.state.relevance_service = RelevanceService.from_settings(settings)
    logger.info(
        "[App] Relevance service ready (stemmer=%s, scoring_enabled=%s)",
        settings.stemmer,
        settings.relevance_scoring_enabled,
    )
    yield


app = FastAPI(
    title="Title Relevance API",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_build_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(relevance.router, prefix="/api")
