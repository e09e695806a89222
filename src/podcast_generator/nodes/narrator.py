"""Narrator node — voices the generated script with ElevenLabs."""

from __future__ import annotations

import base64

import structlog

from podcast_generator.errors import SpeechSynthesisError
from podcast_generator.graph.state import GenerationState
from podcast_generator.tools.interfaces import SpeechSynthesizer

logger = structlog.get_logger()


def make_narrator(speech_synthesizer: SpeechSynthesizer):
    """Return the narrator node bound to *speech_synthesizer*.

    A synthesis failure does not fail the run: the node records the reason
    in ``synthesis_error`` and leaves ``audio`` empty.
    """

    async def narrator(state: GenerationState) -> dict:
        voice_id = state["voice_id"]
        script = state.get("script", "")

        logger.info("narrator.start", voice_id=voice_id, script_len=len(script))

        try:
            audio_bytes = await speech_synthesizer.synthesize(script, voice_id)
        except SpeechSynthesisError as exc:
            logger.warning("narrator.failed", voice_id=voice_id, reason=exc.reason)
            return {"audio": None, "synthesis_error": exc.reason}

        logger.info("narrator.done", bytes=len(audio_bytes))
        return {
            "audio": base64.b64encode(audio_bytes).decode("ascii"),
            "synthesis_error": None,
        }

    return narrator
