"""TDD: CLI entry point tests written FIRST"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from srtgen import main as cli
from srtgen.errors import ErrorKind
from srtgen.result import Transcript, TranscriptionFailure

SRT = "1\n00:00:00,000 --> 00:00:03,000\nhello world"


@pytest.fixture(autouse=True)
def env(monkeypatch):
    monkeypatch.setattr("srtgen.config.load_dotenv", lambda **_: None)
    monkeypatch.setattr("srtgen.main._setup_logging", lambda level: None)
    monkeypatch.setenv("API_KEY", "test-key")
    monkeypatch.delenv("SRT_BACKEND", raising=False)


@pytest.fixture
def audio_path(tmp_path):
    path = tmp_path / "clip.mp3"
    path.write_bytes(b"fake-audio")
    return path


def install_generator(monkeypatch, result) -> MagicMock:
    generator = MagicMock()
    generator.transcribe = AsyncMock(return_value=result)
    monkeypatch.setattr("srtgen.main.SubtitleGenerator", MagicMock(return_value=generator))
    return generator


def test_main_prints_srt_to_stdout(monkeypatch, audio_path, capsys):
    generator = install_generator(monkeypatch, Transcript(text=SRT))

    code = cli.main([str(audio_path), "--language", "Spanish"])

    assert code == 0
    assert capsys.readouterr().out == SRT + "\n"
    audio, language = generator.transcribe.call_args.args
    assert language == "Spanish"
    assert audio.mime_type == "audio/mpeg"


def test_main_defaults_to_english(monkeypatch, audio_path):
    generator = install_generator(monkeypatch, Transcript(text=SRT))

    cli.main([str(audio_path)])

    assert generator.transcribe.call_args.args[1] == "English"


def test_main_mime_type_override(monkeypatch, audio_path):
    generator = install_generator(monkeypatch, Transcript(text=SRT))

    cli.main([str(audio_path), "--mime-type", "audio/webm"])

    assert generator.transcribe.call_args.args[0].mime_type == "audio/webm"


def test_main_writes_output_file(monkeypatch, audio_path, tmp_path, capsys):
    install_generator(monkeypatch, Transcript(text=SRT))
    output = tmp_path / "out.srt"

    code = cli.main([str(audio_path), "-o", str(output)])

    assert code == 0
    assert output.read_text(encoding="utf-8") == SRT + "\n"
    assert capsys.readouterr().out == ""


def test_main_reports_failure_on_stderr(monkeypatch, audio_path, capsys):
    install_generator(
        monkeypatch, TranscriptionFailure(kind=ErrorKind.REMOTE, message="quota exceeded")
    )

    code = cli.main([str(audio_path)])

    assert code == 1
    assert capsys.readouterr().err == "An error occurred: quota exceeded\n"


def test_main_missing_audio_file(monkeypatch, tmp_path, capsys):
    generator = install_generator(monkeypatch, Transcript(text=SRT))

    code = cli.main([str(tmp_path / "missing.mp3")])

    assert code == 1
    assert capsys.readouterr().err.startswith("An error occurred:")
    generator.transcribe.assert_not_called()


def test_main_closes_audio_file(monkeypatch, audio_path):
    generator = install_generator(monkeypatch, Transcript(text=SRT))

    cli.main([str(audio_path)])

    assert generator.transcribe.call_args.args[0].stream.closed


def test_main_unwritable_output_reports_failure(monkeypatch, audio_path, tmp_path, capsys):
    install_generator(monkeypatch, Transcript(text=SRT))
    output = tmp_path / "nodir" / "out.srt"

    code = cli.main([str(audio_path), "-o", str(output)])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.err.startswith("An error occurred:")
    assert "out.srt" in captured.err
    assert captured.out == SRT + "\n"
    assert not output.exists()
