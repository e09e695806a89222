"""Request orchestration: prompt → script → optional narration → result."""

from __future__ import annotations

import structlog

from podcast_generator.config import Settings
from podcast_generator.graph.builder import build_graph
from podcast_generator.models.request import GenerationResult, PodcastRequest
from podcast_generator.tools.elevenlabs import ElevenLabsSynthesizer
from podcast_generator.tools.interfaces import SpeechSynthesizer, TextGenerator
from podcast_generator.tools.openai_script import OpenAIScriptGenerator

logger = structlog.get_logger()


class PodcastOrchestrator:
    """Runs the generation graph for one request at a time.

    Holds no per-request state, so a single instance serves every request.
    Settings are read-only once the orchestrator is built.
    """

    def __init__(
        self,
        settings: Settings,
        text_generator: TextGenerator,
        speech_synthesizer: SpeechSynthesizer,
    ):
        self.settings = settings
        self.text_generator = text_generator
        self.speech_synthesizer = speech_synthesizer
        self._graph = build_graph(
            text_generator=text_generator,
            speech_synthesizer=speech_synthesizer,
            system_prompt=settings.script_system_prompt,
        )

    async def generate(self, request: PodcastRequest) -> GenerationResult:
        """Generate a script and, when a voice is configured, its audio.

        Raises:
            ScriptGenerationError: Script generation failed; nothing is returned.
        """
        final_state = await self._graph.ainvoke(
            {
                "request": request,
                "voice_id": self.settings.voice_id,
                "audio": None,
                "synthesis_error": None,
            }
        )

        result = GenerationResult(
            script=final_state.get("script", ""),
            audio=final_state.get("audio"),
            synthesis_error=final_state.get("synthesis_error"),
        )
        logger.info(
            "orchestrator.done",
            mode=request.mode,
            has_audio=result.audio is not None,
            degraded=result.degraded,
        )
        return result


def build_orchestrator(settings: Settings) -> PodcastOrchestrator:
    """Wire the production OpenAI and ElevenLabs collaborators."""
    return PodcastOrchestrator(
        settings=settings,
        text_generator=OpenAIScriptGenerator(
            api_key=settings.openai_api_key,
            model=settings.script_model,
        ),
        speech_synthesizer=ElevenLabsSynthesizer(
            api_key=settings.elevenlabs_api_key,
            model_id=settings.tts_model_id,
            stability=settings.tts_stability,
            similarity_boost=settings.tts_similarity_boost,
            output_format=settings.tts_output_format,
        ),
    )
