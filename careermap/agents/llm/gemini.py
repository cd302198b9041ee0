import httpx

from careermap.agents.llm.base import LLMClient
from careermap.errors import LLMResponseError


class GeminiClient(LLMClient):
    def __init__(self, *, api_key: str, base_url: str, model: str,
    timeout: float = 120.0, transport: httpx.BaseTransport | None = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, *, prompt: str, temperature: float | None = None) -> str:
        # Generative Language REST endpoint
        # POST {base_url}/models/{model}:generateContent

        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [
                {"role": "user", "parts": [{"text": prompt}]},
            ],
        }
        if temperature is not None:
            payload["generationConfig"] = {"temperature": temperature}

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            r = client.post(url, json=payload, headers=headers)
            r.raise_for_status()
            data = r.json()

        candidates = data.get("candidates") or []
        if not candidates:
            feedback = data.get("promptFeedback") or {}
            raise LLMResponseError(
                f"No candidates in response (blockReason={feedback.get('blockReason')})"
            )

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts)
        if not text.strip():
            raise LLMResponseError(
                f"Empty response text (finishReason={candidates[0].get('finishReason')})"
            )
        return text
