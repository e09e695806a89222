"""Collaborator interfaces for the two external generative services.

The orchestrator depends only on these protocols, so tests can pass
deterministic fakes instead of live API clients.
"""

from __future__ import annotations

from typing import Protocol


class TextGenerator(Protocol):
    """Produces a script from a system instruction and a user prompt."""

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Return the generated text, or ``""`` when the service sent none.

        Raises:
            ScriptGenerationError: The call failed or the response was unusable.
        """
        ...


class SpeechSynthesizer(Protocol):
    """Renders text as audio with a given voice."""

    async def synthesize(self, text: str, voice_id: str) -> bytes:
        """Return the encoded audio bytes.

        Raises:
            SpeechSynthesisError: The service rejected the request or sent no audio.
        """
        ...
