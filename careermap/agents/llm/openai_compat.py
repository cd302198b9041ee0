from openai import OpenAI

from careermap.agents.llm.base import LLMClient
from careermap.errors import LLMResponseError


class OpenAICompatibleClient(LLMClient):
    def __init__(self, *, api_key: str, base_url: str, model: str, timeout: float = 120.0):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.model = model

    def generate_text(self, *, prompt: str, temperature: float | None = None) -> str:
        extra = {} if temperature is None else {"temperature": temperature}
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "user", "content": prompt},
            ],
            **extra,
        )
        if not resp.choices:
            raise LLMResponseError("No choices in chat completion response")
        content = (resp.choices[0].message.content or "").strip()
        if not content:
            raise LLMResponseError("Empty chat completion content")
        return content
