"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from podcast_generator.api.routes import router
from podcast_generator.config import Settings, get_settings
from podcast_generator.logging_config import configure_logging
from podcast_generator.orchestrator import PodcastOrchestrator, build_orchestrator

logger = structlog.get_logger()

_STATIC_DIR = Path(__file__).resolve().parent / "web" / "static"


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

_DEFAULT_ORIGINS = {
    "http://localhost:3000",
    "http://localhost:8000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8000",
}


def _get_allowed_origins(settings: Settings) -> set[str]:
    origins = set(_DEFAULT_ORIGINS)
    if settings.allowed_origins:
        origins.update(o.strip() for o in settings.allowed_origins.split(",") if o.strip())
    return origins


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(
    settings: Settings | None = None,
    orchestrator: PodcastOrchestrator | None = None,
) -> FastAPI:
    """Build the API app.

    *settings* defaults to the process-wide environment settings and
    *orchestrator* to the production OpenAI/ElevenLabs wiring.
    """
    settings = settings or get_settings()
    orchestrator = orchestrator or build_orchestrator(settings)
    allowed_origins = _get_allowed_origins(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "app.startup",
            allowed_origins=sorted(allowed_origins),
            script_model=settings.script_model,
            synthesis_enabled=settings.voice_id is not None,
        )
        if settings.voice_id is None:
            logger.warning("app.synthesis_disabled", detail="ELEVEN_VOICE_ID not set")
        yield
        logger.info("app.shutdown")

    app = FastAPI(
        title="Podcast Generator",
        description="AI podcast script and voice generation",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.orchestrator = orchestrator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return HTMLResponse((_STATIC_DIR / "index.html").read_text(encoding="utf-8"))

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


def app_factory() -> FastAPI:
    """Entry point for ``uvicorn --factory podcast_generator.main:app_factory``."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    return create_app(settings)
