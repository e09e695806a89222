"""Request-scoped domain models: podcast requests and generation results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

WORDS_PER_MINUTE = 150
MIN_MINUTES = 1
MAX_MINUTES = 60
DEFAULT_MINUTES = 5

DIALOGUE_MODE = "dialogue"
SOLO_MODE = "solo"


# ---------------------------------------------------------------------------
# Duration → word count
# ---------------------------------------------------------------------------


def normalize_minutes(value: Any) -> float:
    """Coerce a user-supplied duration into minutes within [1, 60].

    Missing, non-numeric and NaN values fall back to 5 minutes.
    """
    if value is None or isinstance(value, bool):
        return float(DEFAULT_MINUTES)
    if isinstance(value, int):
        # JSON integers can be too large for a float
        return float(max(MIN_MINUTES, min(MAX_MINUTES, value)))
    try:
        minutes = float(value)
    except (TypeError, ValueError, OverflowError):
        return float(DEFAULT_MINUTES)
    if math.isnan(minutes):
        return float(DEFAULT_MINUTES)
    return max(float(MIN_MINUTES), min(float(MAX_MINUTES), minutes))


def estimate_words(minutes: Any) -> int:
    """Return the target word count for a duration.

    Rounds half up, matching the browser client's ``Math.round``.
    """
    return int(math.floor(normalize_minutes(minutes) * WORDS_PER_MINUTE + 0.5))


def format_minutes(minutes: float) -> str:
    """Render minutes without a trailing ``.0`` (``5.0`` → ``"5"``)."""
    return f"{minutes:g}"


# ---------------------------------------------------------------------------
# Request variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SoloRequest:
    """Single-narrator podcast, voiced by ``name`` (a person or a role)."""

    topic: str
    minutes: float
    name: str = ""

    mode = SOLO_MODE

    @property
    def target_words(self) -> int:
        return estimate_words(self.minutes)


@dataclass(frozen=True)
class DialogueRequest:
    """Two-party conversation between ``speaker_a`` and ``speaker_b``."""

    topic: str
    minutes: float
    speaker_a: str
    speaker_b: str

    mode = DIALOGUE_MODE

    @property
    def target_words(self) -> int:
        return estimate_words(self.minutes)


PodcastRequest = Union[SoloRequest, DialogueRequest]


def build_request(
    mode: str | None,
    topic: str,
    minutes: Any = None,
    name: str | None = None,
    speaker_a: str | None = None,
    speaker_b: str | None = None,
) -> PodcastRequest:
    """Build the request variant for ``mode``.

    Only ``"dialogue"`` selects the dialogue variant; every other value,
    including unknown ones, falls back to solo.
    """
    clamped = normalize_minutes(minutes)
    if mode == DIALOGUE_MODE:
        return DialogueRequest(
            topic=topic,
            minutes=clamped,
            speaker_a=speaker_a or "",
            speaker_b=speaker_b or "",
        )
    return SoloRequest(topic=topic, minutes=clamped, name=name or "")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a successful generation.

    ``audio`` is base64-encoded MP3. At most one of ``audio`` and
    ``synthesis_error`` is set; both are None when no voice is configured.
    """

    script: str
    audio: str | None = None
    synthesis_error: str | None = None

    @property
    def degraded(self) -> bool:
        return self.synthesis_error is not None
