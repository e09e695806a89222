"""Per-request state passed between the generation graph's nodes."""

from __future__ import annotations

from typing import Optional

from typing_extensions import TypedDict

from podcast_generator.models.request import PodcastRequest


class GenerationState(TypedDict, total=False):
    request: PodcastRequest
    voice_id: Optional[str]  # None when speech synthesis is not configured

    prompt: str
    script: str

    audio: Optional[str]  # base64-encoded
    synthesis_error: Optional[str]
