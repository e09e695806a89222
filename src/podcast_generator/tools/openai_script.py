"""OpenAI chat-completions script generation — async helper class."""

from __future__ import annotations

import structlog
from openai import AsyncOpenAI, OpenAIError

from podcast_generator.errors import ScriptGenerationError

logger = structlog.get_logger()


class OpenAIScriptGenerator:
    """``TextGenerator`` backed by the OpenAI chat completions API."""

    def __init__(self, api_key: str, model: str = "gpt-4.1"):
        self.api_key = api_key
        self.model = model

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Generate a script with a single chat completion.

        Args:
            system_prompt: Fixed producer instruction.
            user_prompt: Rendered podcast prompt.

        Returns:
            The first choice's message content, or ``""`` if it is missing.

        Raises:
            ScriptGenerationError: On transport errors, non-success statuses
                or missing credentials.
        """
        logger.info(
            "openai_script.start",
            model=self.model,
            prompt_len=len(user_prompt),
        )

        try:
            async with AsyncOpenAI(api_key=self.api_key or None) as client:
                completion = await client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                )
        except OpenAIError as exc:
            logger.error("openai_script.failed", model=self.model, error=str(exc))
            raise ScriptGenerationError(f"Script generation failed: {exc}") from exc

        choices = completion.choices or []
        message = choices[0].message if choices else None
        script = (message.content if message else None) or ""

        logger.info("openai_script.done", script_len=len(script))
        return script
