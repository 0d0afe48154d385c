"""Audio encoding — file contents → base64 payload with its declared mime type."""
import asyncio
import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from srtgen.constants import (
    DATA_URL_TEMPLATE,
    DEFAULT_MIME_TYPE,
    MSG_ENCODED,
    MSG_NOT_DATA_URL,
    MSG_READ_FAILED,
)
from srtgen.errors import FormatError, ReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AudioFile:
    """A readable binary stream plus the media type it declares."""

    stream: BinaryIO
    mime_type: str
    name: str = ""

    @classmethod
    def open(cls, path: str | Path, mime_type: str | None = None) -> "AudioFile":
        path = Path(path)
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            stream=open(path, "rb"),
            mime_type=mime_type or guessed or DEFAULT_MIME_TYPE,
            name=path.name,
        )

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "AudioFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass(frozen=True)
class AudioPayload:
    data: str
    mime_type: str


def to_data_url(raw: bytes, mime_type: str) -> str:
    data = base64.standard_b64encode(raw).decode()
    return DATA_URL_TEMPLATE.format(mime_type=mime_type, data=data)


def strip_data_url_preamble(data_url: str, mime_type: str) -> str:
    """Return the base64 payload following the exact `data:<mime>;base64,` preamble.

    The mime type may itself contain commas inside quoted parameters.
    """
    preamble = DATA_URL_TEMPLATE.format(mime_type=mime_type, data="")
    match data_url.startswith(preamble):
        case True:
            return data_url[len(preamble):]
        case False:
            raise FormatError(MSG_NOT_DATA_URL)


async def encode_audio(audio: AudioFile) -> AudioPayload:
    """Read the whole stream and return it as a base64 AudioPayload.

    Raises ReadError when the stream cannot be read and FormatError when the
    read does not produce bytes.
    """
    try:
        raw = await asyncio.to_thread(audio.stream.read)
    except Exception as exc:
        raise ReadError(MSG_READ_FAILED % (audio.name or "<stream>", exc)) from exc

    match raw:
        case bytes() | bytearray():
            pass
        case _:
            raise FormatError(MSG_NOT_DATA_URL)

    payload = AudioPayload(
        data=strip_data_url_preamble(to_data_url(bytes(raw), audio.mime_type), audio.mime_type),
        mime_type=audio.mime_type,
    )
    logger.debug(MSG_ENCODED, audio.name or "<stream>", audio.mime_type, len(payload.data))
    return payload
