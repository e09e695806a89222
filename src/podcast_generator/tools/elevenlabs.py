"""ElevenLabs TTS — async helper class."""

from __future__ import annotations

import httpx
import structlog
from elevenlabs import AsyncElevenLabs, VoiceSettings
from elevenlabs.core.api_error import ApiError

from podcast_generator.errors import SpeechSynthesisError

logger = structlog.get_logger()


class ElevenLabsSynthesizer:
    """``SpeechSynthesizer`` backed by the ElevenLabs text-to-speech API.

    Model and voice settings are fixed per instance; only the text and the
    voice id vary per call.
    """

    def __init__(
        self,
        api_key: str,
        model_id: str = "eleven_multilingual_v2",
        stability: float = 0.5,
        similarity_boost: float = 0.8,
        output_format: str = "mp3_44100_128",
    ):
        self.api_key = api_key
        self.model_id = model_id
        self.voice_settings = VoiceSettings(
            stability=stability, similarity_boost=similarity_boost,
        )
        self.output_format = output_format

    async def synthesize(self, text: str, voice_id: str) -> bytes:
        """Convert *text* to speech with *voice_id*.

        Args:
            text: The full script.
            voice_id: ElevenLabs voice ID (cloned or preset).

        Returns:
            MP3 audio bytes.

        Raises:
            SpeechSynthesisError: If the API returns an error status, the
                connection fails, or the audio is empty.
        """
        logger.info(
            "elevenlabs_tts.start",
            voice_id=voice_id,
            model_id=self.model_id,
            text_len=len(text),
        )

        chunks: list[bytes] = []
        try:
            # Own the HTTP pool so it is closed after every call
            async with httpx.AsyncClient() as http:
                client = AsyncElevenLabs(api_key=self.api_key, httpx_client=http)
                audio_iter = client.text_to_speech.convert(
                    voice_id=voice_id,
                    text=text,
                    model_id=self.model_id,
                    voice_settings=self.voice_settings,
                    output_format=self.output_format,
                )
                async for chunk in audio_iter:
                    chunks.append(chunk)
        except ApiError as exc:
            logger.error(
                "elevenlabs_tts.api_error",
                voice_id=voice_id,
                status_code=exc.status_code,
                body=exc.body,
            )
            raise SpeechSynthesisError(
                "ElevenLabs TTS failed", status_code=exc.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("elevenlabs_tts.transport_error", voice_id=voice_id, error=str(exc))
            raise SpeechSynthesisError("ElevenLabs TTS unreachable") from exc
        except Exception as exc:
            logger.exception("elevenlabs_tts.error", voice_id=voice_id)
            raise SpeechSynthesisError("ElevenLabs TTS failed") from exc

        audio_data = b"".join(chunks)
        if not audio_data:
            logger.error("elevenlabs_tts.empty_audio", voice_id=voice_id)
            raise SpeechSynthesisError("ElevenLabs returned empty audio")

        logger.info("elevenlabs_tts.done", bytes_received=len(audio_data))
        return audio_data
