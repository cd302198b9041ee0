## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    session_idle_minutes: int = 60

    # LLM provider: "gemini" or "openai" (any OpenAI-compatible endpoint).
    # The API key is entered by the user at runtime and is never read from here.
    llm_provider: str = "gemini"
    llm_temperature: float | None = None
    llm_timeout_seconds: float = 120.0

    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-1.5-flash"

    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"


settings = Settings()
