"""Shared fixtures: settings and deterministic collaborator fakes."""

from __future__ import annotations

import pytest

from podcast_generator.config import Settings
from podcast_generator.errors import SpeechSynthesisError
from podcast_generator.orchestrator import PodcastOrchestrator


class FakeTextGenerator:
    def __init__(self, script: str = "[00:00] Welcome to the show.", error: Exception | None = None):
        self.script = script
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.script


class FakeSynthesizer:
    def __init__(self, audio: bytes = b"ID3\x03\x00fake-mp3\xff\xfb", fail: bool = False):
        self.audio = audio
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    async def synthesize(self, text: str, voice_id: str) -> bytes:
        self.calls.append((text, voice_id))
        if self.fail:
            raise SpeechSynthesisError("ElevenLabs TTS failed", status_code=401)
        return self.audio


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def settings() -> Settings:
    return make_settings(eleven_voice_id="voice-123")


@pytest.fixture
def settings_without_voice() -> Settings:
    return make_settings(eleven_voice_id="")


@pytest.fixture
def text_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def synthesizer() -> FakeSynthesizer:
    return FakeSynthesizer()


@pytest.fixture
def orchestrator(settings, text_generator, synthesizer) -> PodcastOrchestrator:
    return PodcastOrchestrator(settings, text_generator, synthesizer)
