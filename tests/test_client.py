"""Tests for the Python presentation client: form, playback and session."""

import asyncio
import base64
import json
from pathlib import Path

import httpx
import pytest

from podcast_generator.client.form import SPEAKERS_REQUIRED, TOPIC_REQUIRED, PodcastForm
from podcast_generator.client.playback import AudioResource, decode_audio
from podcast_generator.client.session import PodcastSession
from podcast_generator.models.request import estimate_words

AUDIO = bytes(range(256)) * 4


class RecordingServer:
    """httpx transport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


def _submit(form: PodcastForm, response: httpx.Response):
    server = RecordingServer(response)

    async def run():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(server), base_url="http://test",
        ) as http:
            session = PodcastSession(http, form)
            ok = await session.submit()
            return session, ok

    session, ok = asyncio.run(run())
    return session, ok, server


class TestPodcastForm:
    def test_defaults(self):
        form = PodcastForm()
        assert form.mode == "solo"
        assert form.minutes == 5
        assert form.estimated_words == 750

    def test_estimate_matches_server_formula(self):
        form = PodcastForm()
        for minutes in range(1, 61):
            form.minutes = minutes
            assert form.estimated_words == estimate_words(minutes) == minutes * 150

    def test_minutes_are_bounded(self):
        form = PodcastForm(minutes=0)
        assert form.minutes == 1
        form.minutes = 120
        assert form.minutes == 60
        form.minutes = "abc"
        assert form.minutes == 60

    def test_empty_topic_rejected(self):
        assert PodcastForm(topic="   ").validate() == TOPIC_REQUIRED

    def test_dialogue_needs_both_speakers(self):
        form = PodcastForm(mode="dialogue", topic="Art", speaker_a="Frida", speaker_b="")
        assert form.validate() == SPEAKERS_REQUIRED
        form.speaker_b = "Diego"
        assert form.validate() is None

    def test_solo_does_not_need_speakers(self):
        assert PodcastForm(topic="Art").validate() is None

    def test_payload_uses_wire_names(self):
        form = PodcastForm(mode="dialogue", topic="Art", speaker_a="A", speaker_b="B", minutes=7)
        assert form.to_payload() == {
            "mode": "dialogue",
            "name": "",
            "topic": "Art",
            "minutes": 7,
            "speakerA": "A",
            "speakerB": "B",
        }

    def test_reset(self):
        form = PodcastForm(mode="dialogue", topic="Art", speaker_a="A", speaker_b="B", minutes=30)
        form.reset()
        assert form.to_payload() == PodcastForm().to_payload()


class TestPlayback:
    def test_base64_round_trip_is_byte_exact(self):
        payload = base64.b64encode(AUDIO).decode("ascii")
        assert decode_audio(payload) == AUDIO

    def test_invalid_base64_raises(self):
        with pytest.raises(ValueError):
            decode_audio("not base64!!")

    def test_url_points_at_playable_file(self):
        resource = AudioResource.from_base64(base64.b64encode(AUDIO).decode("ascii"))
        try:
            url = resource.url
            assert url.startswith("file://")
            assert url.endswith(".mp3")
            assert resource.path.read_bytes() == AUDIO
            assert resource.url == url
        finally:
            resource.release()
        assert resource.path is None

    def test_release_removes_file(self):
        resource = AudioResource(data=b"abc")
        resource.url
        path = resource.path
        resource.release()
        assert not path.exists()

    def test_save(self, tmp_path):
        output = AudioResource(data=AUDIO).save(tmp_path / "episode.mp3")
        assert Path(output).read_bytes() == AUDIO


class TestPodcastSession:
    def test_empty_topic_makes_no_request(self):
        session, ok, server = _submit(PodcastForm(topic=""), httpx.Response(200, json={}))
        assert not ok
        assert session.error == TOPIC_REQUIRED
        assert server.requests == []

    def test_dialogue_missing_speaker_b_makes_no_request(self):
        form = PodcastForm(mode="dialogue", topic="Art", speaker_a="Frida")
        session, ok, server = _submit(form, httpx.Response(200, json={}))
        assert not ok
        assert session.error == SPEAKERS_REQUIRED
        assert server.requests == []

    def test_success_decodes_audio(self):
        body = {
            "script": "[00:00] Intro\n\n[00:45]  Body",
            "audio": base64.b64encode(AUDIO).decode("ascii"),
            "synthesisError": None,
            "mimeType": "audio/mpeg",
        }
        session, ok, server = _submit(PodcastForm(topic="Art", name="Curator"), httpx.Response(200, json=body))

        assert ok
        assert session.script == body["script"]
        assert session.audio.data == AUDIO
        assert session.synthesis_warning == ""
        assert session.error == ""
        assert not session.loading

        sent = json.loads(server.requests[0].content)
        assert server.requests[0].url.path == "/api/generate"
        assert sent["topic"] == "Art"
        assert sent["name"] == "Curator"

    def test_degraded_response_shows_warning(self):
        body = {"script": "text only", "audio": None, "synthesisError": "ElevenLabs TTS failed"}
        session, ok, _ = _submit(PodcastForm(topic="Art"), httpx.Response(200, json=body))

        assert ok
        assert session.script == "text only"
        assert session.audio is None
        assert session.synthesis_warning == "ElevenLabs TTS failed"
        assert session.error == ""

    def test_server_error_shows_body_text(self):
        session, ok, _ = _submit(
            PodcastForm(topic="Art"), httpx.Response(500, text="Script generation failed"),
        )
        assert not ok
        assert session.error == "Script generation failed"
        assert session.script == ""
        assert session.audio is None

    def test_submit_clears_previous_result(self):
        async def run():
            responses = iter([
                httpx.Response(200, json={"script": "first", "audio": base64.b64encode(b"x").decode()}),
                httpx.Response(500, text="down"),
            ])
            transport = httpx.MockTransport(lambda request: next(responses))
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
                session = PodcastSession(http, PodcastForm(topic="Art"))
                await session.submit()
                first_audio = session.audio
                first_audio.url
                await session.submit()
                return session, first_audio

        session, first_audio = asyncio.run(run())
        assert session.script == ""
        assert session.audio is None
        assert session.error == "down"
        assert first_audio.path is None

    def test_reset_clears_everything(self):
        body = {"script": "s", "audio": None, "synthesisError": "failed"}
        session, _, _ = _submit(PodcastForm(topic="Art", minutes=20), httpx.Response(200, json=body))

        session.reset()

        assert session.script == ""
        assert session.synthesis_warning == ""
        assert session.error == ""
        assert session.form.topic == ""
        assert session.form.minutes == 5
