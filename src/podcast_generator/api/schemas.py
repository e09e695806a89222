"""Request/Response schemas for the FastAPI endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from podcast_generator.models.request import GenerationResult, PodcastRequest, build_request


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mode: Any = Field(default="solo", description="'dialogue' selects the dialogue template; anything else means solo")
    topic: StrictStr
    # Any JSON value; normalized to [1, 60] with a default of 5
    minutes: Any = None
    name: Optional[str] = None
    speaker_a: Optional[str] = Field(default=None, alias="speakerA")
    speaker_b: Optional[str] = Field(default=None, alias="speakerB")

    def to_domain(self) -> PodcastRequest:
        return build_request(
            mode=self.mode,
            topic=self.topic,
            minutes=self.minutes,
            name=self.name,
            speaker_a=self.speaker_a,
            speaker_b=self.speaker_b,
        )


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    script: str
    audio: Optional[str] = Field(default=None, description="Base64-encoded audio")
    synthesis_error: Optional[str] = Field(default=None, alias="synthesisError")
    mime_type: str = Field(default="audio/mpeg", alias="mimeType")

    @classmethod
    def from_result(cls, result: GenerationResult, mime_type: str) -> "GenerateResponse":
        return cls(
            script=result.script,
            audio=result.audio,
            synthesis_error=result.synthesis_error,
            mime_type=mime_type,
        )
