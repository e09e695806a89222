"""Conditional edge routing functions for the generation graph."""

from __future__ import annotations

from typing import Literal

import structlog

from podcast_generator.graph.state import GenerationState

logger = structlog.get_logger()

END = "__end__"


def route_after_script(state: GenerationState) -> Literal["narrator", "__end__"]:
    """Route after scriptwriter: narrate when a voice is configured, else finish."""
    if state.get("voice_id"):
        return "narrator"
    logger.warning("route_after_script.no_voice", detail="ELEVEN_VOICE_ID not set, returning script only")
    return END
