"""Form state for the podcast client, with pre-submit validation."""

from __future__ import annotations

from typing import Any

from podcast_generator.models.request import (
    DEFAULT_MINUTES,
    DIALOGUE_MODE,
    MAX_MINUTES,
    MIN_MINUTES,
    SOLO_MODE,
    estimate_words,
)

TOPIC_REQUIRED = "Topic is required."
SPEAKERS_REQUIRED = "Both speakers are required in dialogue mode."


class PodcastForm:
    def __init__(
        self,
        mode: str = SOLO_MODE,
        topic: str = "",
        name: str = "",
        speaker_a: str = "",
        speaker_b: str = "",
        minutes: Any = DEFAULT_MINUTES,
    ):
        self.mode = mode
        self.topic = topic
        self.name = name
        self.speaker_a = speaker_a
        self.speaker_b = speaker_b
        self._minutes = DEFAULT_MINUTES
        self.minutes = minutes

    @property
    def minutes(self) -> int:
        return self._minutes

    @minutes.setter
    def minutes(self, value: Any) -> None:
        # Behaves like <input type="number" min=1 max=60>: junk is ignored
        try:
            minutes = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return
        self._minutes = max(MIN_MINUTES, min(MAX_MINUTES, minutes))

    @property
    def estimated_words(self) -> int:
        """Live word estimate shown next to the duration control."""
        return estimate_words(self._minutes)

    def validate(self) -> str | None:
        """Return an error message, or None when the form may be submitted."""
        if not self.topic.strip():
            return TOPIC_REQUIRED
        if self.mode == DIALOGUE_MODE and (
            not self.speaker_a.strip() or not self.speaker_b.strip()
        ):
            return SPEAKERS_REQUIRED
        return None

    def to_payload(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "name": self.name,
            "topic": self.topic,
            "minutes": self._minutes,
            "speakerA": self.speaker_a,
            "speakerB": self.speaker_b,
        }

    def reset(self) -> None:
        self.mode = SOLO_MODE
        self.topic = ""
        self.name = ""
        self.speaker_a = ""
        self.speaker_b = ""
        self._minutes = DEFAULT_MINUTES
