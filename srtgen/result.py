"""Tagged transcription outcome: a transcript or a classified failure."""
from dataclasses import dataclass

from srtgen.constants import MSG_ERROR_PREFIX, MSG_UNKNOWN_ERROR
from srtgen.errors import ErrorKind


@dataclass(frozen=True)
class Transcript:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class TranscriptionFailure:
    kind: ErrorKind
    message: str

    def render(self) -> str:
        """Legacy string form: prefixed message, or the fallback when there is none."""
        match self.message:
            case "":
                return MSG_UNKNOWN_ERROR
            case message:
                return MSG_ERROR_PREFIX + message


TranscriptionResult = Transcript | TranscriptionFailure
