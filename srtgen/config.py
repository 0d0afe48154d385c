from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from srtgen.constants import (
    DEFAULT_BACKEND,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODELS,
    ENV_API_KEY,
    ENV_BACKEND,
    ENV_LOG_LEVEL,
    ENV_MODEL,
    MSG_UNKNOWN_BACKEND,
)
from srtgen.errors import ConfigurationError


@dataclass(frozen=True)
class Config:
    api_key: Optional[str]
    backend: str
    model: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv(ENV_API_KEY) or None
        backend = os.getenv(ENV_BACKEND, DEFAULT_BACKEND).strip().lower() or DEFAULT_BACKEND
        model = os.getenv(ENV_MODEL) or None
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

        return cls._validate(
            api_key=api_key,
            backend=backend,
            model=model,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        backend: str,
        model: Optional[str],
        log_level: str,
    ) -> "Config":
        # api_key may be None here; SubtitleGenerator rejects it per call.
        match backend:
            case b if b in DEFAULT_MODELS:
                pass
            case _:
                raise ConfigurationError(
                    MSG_UNKNOWN_BACKEND % (backend, ", ".join(sorted(DEFAULT_MODELS)))
                )

        return Config(
            api_key=api_key,
            backend=backend,
            model=model or DEFAULT_MODELS[backend],
            log_level=log_level,
        )
