"""Backend selection from Config."""
from srtgen.config import Config
from srtgen.constants import BACKEND_GEMINI, BACKEND_OPENAI, MSG_UNKNOWN_BACKEND
from srtgen.errors import ConfigurationError
from srtgen.inference.client import InferenceClient
from srtgen.inference.gemini import GeminiInferenceClient
from srtgen.inference.openai import OpenAIInferenceClient

BACKENDS: dict[str, type[InferenceClient]] = {
    BACKEND_GEMINI: GeminiInferenceClient,
    BACKEND_OPENAI: OpenAIInferenceClient,
}


def build_inference_client(config: Config) -> InferenceClient:
    match BACKENDS.get(config.backend):
        case None:
            raise ConfigurationError(
                MSG_UNKNOWN_BACKEND % (config.backend, ", ".join(sorted(BACKENDS)))
            )
        case backend:
            return backend(config.api_key, config.model)
