"""Turns a base64 audio payload into a locally playable resource."""

from __future__ import annotations

import base64
import binascii
import tempfile
from dataclasses import dataclass
from pathlib import Path

_SUFFIXES = {
    "audio/mpeg": ".mp3",
    "audio/wav": ".wav",
    "audio/ogg": ".ogg",
}


def decode_audio(payload: str) -> bytes:
    """Decode a base64 payload into the original audio bytes.

    Raises:
        ValueError: If *payload* is not valid base64.
    """
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 audio payload: {exc}") from exc


@dataclass
class AudioResource:
    """Decoded audio written to a temporary file that a player can open."""

    data: bytes
    mime_type: str = "audio/mpeg"
    path: Path | None = None

    @classmethod
    def from_base64(cls, payload: str, mime_type: str = "audio/mpeg") -> "AudioResource":
        return cls(data=decode_audio(payload), mime_type=mime_type)

    @property
    def url(self) -> str:
        """``file://`` URL for the audio, creating the backing file on first use."""
        if self.path is None:
            suffix = _SUFFIXES.get(self.mime_type, ".bin")
            with tempfile.NamedTemporaryFile(
                prefix="podcast-", suffix=suffix, delete=False,
            ) as fp:
                fp.write(self.data)
            self.path = Path(fp.name)
        return self.path.as_uri()

    def save(self, output_path: str | Path) -> Path:
        output = Path(output_path)
        output.write_bytes(self.data)
        return output

    def release(self) -> None:
        """Delete the backing file, if any."""
        if self.path is not None:
            self.path.unlink(missing_ok=True)
            self.path = None
