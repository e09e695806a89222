"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

DEFAULT_SYSTEM_PROMPT = (
    "You are a senior audio producer. Produce clean podcast scripts with timecodes."
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Script generation (OpenAI)
    openai_api_key: str = ""
    script_model: str = "gpt-4.1"
    script_system_prompt: str = DEFAULT_SYSTEM_PROMPT

    # Speech synthesis (ElevenLabs)
    elevenlabs_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("elevenlabs_api_key", "eleven_api_key"),
    )
    # Blank disables synthesis entirely
    eleven_voice_id: str = ""
    tts_model_id: str = "eleven_multilingual_v2"
    tts_stability: float = 0.5
    tts_similarity_boost: float = 0.8
    tts_output_format: str = "mp3_44100_128"
    audio_mime_type: str = "audio/mpeg"

    # HTTP
    allowed_origins: str = ""

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def voice_id(self) -> str | None:
        """The configured ElevenLabs voice, or None when synthesis is off."""
        voice = self.eleven_voice_id.strip()
        return voice or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once at startup."""
    return Settings()
