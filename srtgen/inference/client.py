"""InferenceClient — abstract base for multimodal generation backends."""
from abc import ABC, abstractmethod

from srtgen.encoding import AudioPayload


class InferenceClient(ABC):
    @abstractmethod
    async def infer(
        self, instruction: str, system_instruction: str, payload: AudioPayload
    ) -> str:
        """Send instruction + audio to the model and return its text. Raises on failure."""
        ...
