from careermap.settings import settings
from careermap.agents.llm.base import LLMClient
from careermap.agents.llm.gemini import GeminiClient
from careermap.agents.llm.openai_compat import OpenAICompatibleClient

def get_llm_client(api_key: str) -> LLMClient:
    if settings.llm_provider == "openai":
        return OpenAICompatibleClient(
            api_key=api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            timeout=settings.llm_timeout_seconds,
        )

    return GeminiClient(
        api_key=api_key,
        base_url=settings.gemini_base_url,
        model=settings.gemini_model,
        timeout=settings.llm_timeout_seconds,
    )
