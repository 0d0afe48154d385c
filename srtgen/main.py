"""Entry point — wires Config → SubtitleGenerator and prints the SRT."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from srtgen.config import Config
from srtgen.constants import DEFAULT_LANGUAGE, MSG_WROTE_OUTPUT
from srtgen.encoding import AudioFile
from srtgen.errors import ErrorKind
from srtgen.generator import SubtitleGenerator
from srtgen.result import Transcript, TranscriptionFailure


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="srtgen",
        description="Generate SRT subtitles from an audio file with a hosted model.",
    )
    parser.add_argument("audio", type=Path, help="audio file to transcribe")
    parser.add_argument(
        "-l", "--language", default=DEFAULT_LANGUAGE, help="subtitle language (default: %(default)s)"
    )
    parser.add_argument("-o", "--output", type=Path, help="write the SRT here instead of stdout")
    parser.add_argument("--mime-type", help="override the media type guessed from the file name")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    generator = SubtitleGenerator(config)

    try:
        audio = AudioFile.open(args.audio, mime_type=args.mime_type)
    except OSError as exc:
        result = TranscriptionFailure(kind=ErrorKind.READ, message=str(exc))
    else:
        with audio:
            result = asyncio.run(generator.transcribe(audio, args.language))

    match (result, args.output):
        case (Transcript(text=text), None):
            sys.stdout.write(text + "\n")
            return 0
        case (Transcript(text=text), Path() as output):
            try:
                output.write_text(text + "\n", encoding="utf-8")
            except OSError as exc:
                # Keep the transcript on stdout when the output file is unwritable.
                sys.stdout.write(text + "\n")
                failure = TranscriptionFailure(kind=ErrorKind.WRITE, message=str(exc))
                sys.stderr.write(failure.render() + "\n")
                return 1
            logger.info(MSG_WROTE_OUTPUT, output)
            return 0
        case (TranscriptionFailure() as failure, _):
            sys.stderr.write(failure.render() + "\n")
            return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
