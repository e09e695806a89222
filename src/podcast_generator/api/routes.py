"""FastAPI route handlers for the generation API."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from podcast_generator.api.dependencies import get_app_settings, get_orchestrator
from podcast_generator.api.schemas import GenerateRequest, GenerateResponse
from podcast_generator.config import Settings
from podcast_generator.errors import ScriptGenerationError
from podcast_generator.orchestrator import PodcastOrchestrator

logger = structlog.get_logger()

router = APIRouter(prefix="/api")


@router.post(
    "/generate",
    response_model=GenerateResponse,
    response_model_by_alias=True,
    responses={500: {"description": "Script generation failed", "content": {"text/plain": {}}}},
)
async def generate(
    body: GenerateRequest,
    orchestrator: PodcastOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_app_settings),
):
    """Generate a podcast script and, when a voice is configured, its audio."""
    request = body.to_domain()
    logger.info("generate.request", mode=request.mode, minutes=request.minutes)

    try:
        result = await orchestrator.generate(request)
    except ScriptGenerationError:
        logger.exception("generate.script_failed", mode=request.mode)
        return PlainTextResponse("Script generation failed", status_code=500)

    return GenerateResponse.from_result(result, mime_type=settings.audio_mime_type)
