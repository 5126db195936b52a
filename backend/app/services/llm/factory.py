"""LLM client factory: one provider per process, chosen from settings."""
from __future__ import annotations

from functools import lru_cache
import logging

from app.core.config import Settings, settings
from app.services.llm.base import LLMClient
from app.services.llm.ollama_client import OllamaClient
from app.services.llm.openai_client import OpenAIClient

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEYS = {"your-api-key-here", "${OPENAI_API_KEY}"}


def build_llm_client(config: Settings) -> LLMClient:
    if config.use_local_llm or not is_openai_configured(config):
        logger.info("Configuring local LLM (Ollama) model=%s url=%s", config.ollama_model, config.ollama_base_url)
        return OllamaClient(
            base_url=config.ollama_base_url,
            model=config.ollama_model,
            temperature=config.llm_temperature,
            timeout=config.llm_timeout_seconds,
        )

    logger.info("Configuring OpenAI model=%s", config.openai_model)
    return OpenAIClient(
        api_key=config.openai_api_key or "",
        model=config.openai_model,
        temperature=config.llm_temperature,
        timeout=config.llm_timeout_seconds,
    )


def is_openai_configured(config: Settings) -> bool:
    key = (config.openai_api_key or "").strip()
    if not key or key in PLACEHOLDER_API_KEYS:
        if not config.use_local_llm:
            logger.warning("OpenAI key not configured; using local LLM instead.")
        return False
    return True


@lru_cache
def get_llm_client() -> LLMClient:
    """Return the process-wide LLM client (FastAPI dependency)."""
    return build_llm_client(settings)
