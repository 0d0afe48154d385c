"""Error taxonomy for subtitle generation."""
from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    READ = "read"
    FORMAT = "format"
    REMOTE = "remote"
    WRITE = "write"
    UNKNOWN = "unknown"


class SubtitleError(Exception):
    kind: ErrorKind = ErrorKind.UNKNOWN


class ConfigurationError(SubtitleError, ValueError):
    """Missing or invalid configuration. Always propagates to the caller."""

    kind = ErrorKind.CONFIGURATION


class ReadError(SubtitleError):
    kind = ErrorKind.READ


class FormatError(SubtitleError):
    kind = ErrorKind.FORMAT


class RemoteCallError(SubtitleError):
    kind = ErrorKind.REMOTE
