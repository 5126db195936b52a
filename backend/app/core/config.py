"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Smart Task Generator API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_v1_prefix: str = "/api/v1"

    # LLM providers
    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    llm_temperature: float = 0.7
    llm_timeout_seconds: float = 120.0
    use_local_llm: bool = False
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama2"

    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "smart-task-generator"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
