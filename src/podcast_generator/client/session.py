"""Client session: submits the form and holds the displayed result."""

from __future__ import annotations

import httpx
import structlog

from podcast_generator.client.form import PodcastForm
from podcast_generator.client.playback import AudioResource

logger = structlog.get_logger()

GENERATE_PATH = "/api/generate"


class PodcastSession:
    """Mirrors the browser page: one form, one script, one audio player.

    Args:
        http: Client whose ``base_url`` points at the API server.
    """

    def __init__(self, http: httpx.AsyncClient, form: PodcastForm | None = None):
        self.http = http
        self.form = form or PodcastForm()
        self.loading = False
        self.script = ""
        self.audio: AudioResource | None = None
        self.error = ""
        self.synthesis_warning = ""

    def _clear_result(self) -> None:
        if self.audio is not None:
            self.audio.release()
        self.audio = None
        self.script = ""
        self.error = ""
        self.synthesis_warning = ""

    async def submit(self) -> bool:
        """Validate and submit the form.

        Returns:
            True when a script was received (with or without audio).
        """
        self._clear_result()

        problem = self.form.validate()
        if problem:
            self.error = problem
            return False

        self.loading = True
        try:
            response = await self.http.post(GENERATE_PATH, json=self.form.to_payload())
            if response.is_error:
                self.error = response.text or "Request failed"
                logger.warning("session.request_failed", status_code=response.status_code)
                return False

            data = response.json()
            self.script = data.get("script") or ""

            if data.get("synthesisError"):
                self.synthesis_warning = data["synthesisError"]

            if data.get("audio"):
                self.audio = AudioResource.from_base64(
                    data["audio"], mime_type=data.get("mimeType") or "audio/mpeg",
                )
            return True
        except (httpx.HTTPError, ValueError) as exc:
            self.error = str(exc) or "Something went wrong"
            logger.warning("session.error", error=self.error)
            return False
        finally:
            self.loading = False

    def reset(self) -> None:
        self.form.reset()
        self._clear_result()
