## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMClient(ABC):
    """One call contract: prompt string in, free text out."""

    @abstractmethod
    def generate_text(self, *, prompt: str, temperature: float | None = None) -> str:
        raise NotImplementedError
