"""Scriptwriter node — renders the podcast prompt and generates the script."""

from __future__ import annotations

import structlog

from podcast_generator.graph.state import GenerationState
from podcast_generator.models.request import (
    DialogueRequest,
    PodcastRequest,
    format_minutes,
)
from podcast_generator.tools.interfaces import TextGenerator

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Prompt templates
# ---------------------------------------------------------------------------

SOLO_PROMPT_TEMPLATE = """\
Generate a SOLO podcast script.

Voice role / name: {name}
Topic: {topic}
Length: about {minutes} minutes (~{target_words} words).

Include:
- A 1-sentence intro
- Timecodes every 30-60 seconds like [00:45]
- A 1-sentence outro
- A short line that this is an AI simulation, not the real person.

Return ONLY the script text."""

DIALOGUE_PROMPT_TEMPLATE = """\
Generate a DIALOGUE podcast script.

Speaker A: {speaker_a}
Speaker B: {speaker_b}
Topic: {topic}
Length: about {minutes} minutes (~{target_words} words).

Requirements:
- Natural back-and-forth conversation
- 2-4 sentence turns
- Timecodes every 30-60 seconds like [00:45]
- Use labels exactly:
  {speaker_a}: ...
  {speaker_b}: ...
- Include a 1-sentence intro & 1-sentence outro
- Make it clear this is an AI-generated simulation of the speakers.

Return ONLY the script text."""


def build_prompt(request: PodcastRequest) -> str:
    """Render the user prompt for *request*.

    The dialogue template only sees the two speakers and the solo template
    only sees the name; topic and names are interpolated verbatim.
    """
    if isinstance(request, DialogueRequest):
        return DIALOGUE_PROMPT_TEMPLATE.format(
            speaker_a=request.speaker_a,
            speaker_b=request.speaker_b,
            topic=request.topic,
            minutes=format_minutes(request.minutes),
            target_words=request.target_words,
        )
    return SOLO_PROMPT_TEMPLATE.format(
        name=request.name,
        topic=request.topic,
        minutes=format_minutes(request.minutes),
        target_words=request.target_words,
    )


# ---------------------------------------------------------------------------
# Node implementation
# ---------------------------------------------------------------------------


def make_scriptwriter(text_generator: TextGenerator, system_prompt: str):
    """Return the scriptwriter node bound to *text_generator*.

    Failures from the generator propagate and abort the graph run.
    """

    async def scriptwriter(state: GenerationState) -> dict:
        request = state["request"]
        prompt = build_prompt(request)

        logger.info(
            "scriptwriter.start",
            mode=request.mode,
            minutes=request.minutes,
            target_words=request.target_words,
        )

        script = await text_generator.generate(system_prompt, prompt)

        logger.info("scriptwriter.done", script_len=len(script))
        return {"prompt": prompt, "script": script}

    return scriptwriter
