"""SubtitleGenerator — audio file + target language → SRT transcript."""
import logging
import time

from srtgen.config import Config
from srtgen.constants import (
    MSG_API_KEY_MISSING,
    MSG_GENERATED,
    MSG_GENERATION_FAILED,
    MSG_REQUESTING,
    SYSTEM_INSTRUCTION,
)
from srtgen.encoding import AudioFile, AudioPayload, encode_audio
from srtgen.errors import ConfigurationError, ErrorKind, RemoteCallError, SubtitleError
from srtgen.inference.client import InferenceClient
from srtgen.inference.factory import build_inference_client
from srtgen.prompt import build_prompt
from srtgen.result import Transcript, TranscriptionFailure, TranscriptionResult

logger = logging.getLogger(__name__)


def _failure(kind: ErrorKind, exc: BaseException) -> TranscriptionFailure:
    message = str(exc)
    kind = kind if message else ErrorKind.UNKNOWN
    logger.error(MSG_GENERATION_FAILED, kind.value, message or repr(exc))
    return TranscriptionFailure(kind=kind, message=message)


class SubtitleGenerator:
    """Runs one encode → prompt → infer round trip per call.

    Holds no per-call state, so one instance may serve concurrent calls.
    """

    def __init__(self, config: Config, client: InferenceClient | None = None) -> None:
        self._config = config
        self._client = client

    def _require_client(self) -> InferenceClient:
        match self._config.api_key:
            case None | "":
                raise ConfigurationError(MSG_API_KEY_MISSING)
            case _:
                pass
        return self._client or build_inference_client(self._config)

    async def _infer(
        self, client: InferenceClient, instruction: str, payload: AudioPayload
    ) -> str:
        try:
            return await client.infer(instruction, SYSTEM_INSTRUCTION, payload)
        except SubtitleError:
            raise
        except Exception as exc:
            raise RemoteCallError(str(exc)) from exc

    async def transcribe(self, audio: AudioFile, language: str) -> TranscriptionResult:
        """Generate subtitles for `audio` in `language`.

        Only ConfigurationError escapes; every other failure is returned as a
        TranscriptionFailure.
        """
        client = self._require_client()
        started = time.monotonic()
        try:
            payload = await encode_audio(audio)
            instruction = build_prompt(language)
            logger.info(MSG_REQUESTING, self._config.backend, self._config.model, language)
            text = (await self._infer(client, instruction, payload)).strip()
        except SubtitleError as exc:
            return _failure(exc.kind, exc)
        except Exception as exc:
            return _failure(ErrorKind.UNKNOWN, exc)

        logger.info(MSG_GENERATED, time.monotonic() - started, len(text))
        return Transcript(text=text)

    async def generate(self, audio: AudioFile, language: str) -> str:
        """String contract: the transcript, or a human-readable error message."""
        return (await self.transcribe(audio, language)).render()


async def generate_srt_from_audio(audio: AudioFile, language: str) -> str:
    """Read configuration from the environment and generate subtitles."""
    return await SubtitleGenerator(Config.from_env()).generate(audio, language)
