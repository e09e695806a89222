"""Exception hierarchy for the generation pipeline.

Script generation failures are fatal for a request. Speech synthesis
failures are recoverable: the request degrades to a text-only result.
"""

from __future__ import annotations


class PodcastGeneratorError(Exception):
    """Base class for all podcast generator errors."""


class ScriptGenerationError(PodcastGeneratorError):
    """The text-generation service could not produce a script."""


class SpeechSynthesisError(PodcastGeneratorError):
    """The speech-synthesis service could not render the script.

    ``reason`` is the short, user-facing description returned to clients.
    """

    def __init__(self, reason: str, *, status_code: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
