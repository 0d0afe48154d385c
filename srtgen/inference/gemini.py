"""GeminiInferenceClient — Google Gemini multimodal backend."""
import base64

from google import genai
from google.genai import types

from srtgen.constants import GEMINI_MODEL, MSG_EMPTY_RESPONSE
from srtgen.encoding import AudioPayload
from srtgen.errors import RemoteCallError
from srtgen.inference.client import InferenceClient


class GeminiInferenceClient(InferenceClient):

    def __init__(self, api_key: str, model: str = GEMINI_MODEL) -> None:
        self._api_key = api_key
        self._model = model
    async def infer(
        self, instruction: str, system_instruction: str, payload: AudioPayload
    ) -> str:
        audio_part = types.Part.from_bytes(
            data=base64.b64decode(payload.data),
            mime_type=payload.mime_type,
        )
        async with genai.Client(api_key=self._api_key).aio as client:
            response = await client.models.generate_content(
                model=self._model,
                contents=[instruction, audio_part],
                config=types.GenerateContentConfig(system_instruction=system_instruction),
            )
        match getattr(response, "text", None):
            case str() as text:
                return text
            case _:
                raise RemoteCallError(MSG_EMPTY_RESPONSE)
