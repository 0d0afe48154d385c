"""OpenAIInferenceClient — OpenAI audio-capable chat completions backend."""
from openai import AsyncOpenAI

from srtgen.constants import (
    MSG_EMPTY_RESPONSE,
    MSG_UNSUPPORTED_AUDIO,
    OPENAI_AUDIO_FORMATS,
    OPENAI_AUDIO_MODEL,
)
from srtgen.encoding import AudioPayload
from srtgen.errors import FormatError, RemoteCallError
from srtgen.inference.client import InferenceClient


class OpenAIInferenceClient(InferenceClient):

    def __init__(self, api_key: str, model: str = OPENAI_AUDIO_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def infer(
        self, instruction: str, system_instruction: str, payload: AudioPayload
    ) -> str:
        audio_format = OPENAI_AUDIO_FORMATS.get(payload.mime_type.lower())
        if audio_format is None:
            raise FormatError(MSG_UNSUPPORTED_AUDIO % (self._model, payload.mime_type))

        async with AsyncOpenAI(api_key=self._api_key) as client:
            response = await client.chat.completions.create(
                model=self._model,
                modalities=["text"],
                messages=[
                    {"role": "system", "content": system_instruction},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {
                                "type": "input_audio",
                                "input_audio": {"data": payload.data, "format": audio_format},
                            },
                        ],
                    },
                ],
            )
        content = response.choices[0].message.content
        if not content:
            raise RemoteCallError(MSG_EMPTY_RESPONSE)
        return content
