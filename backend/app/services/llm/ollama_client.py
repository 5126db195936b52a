"""Local Ollama provider using the native generate endpoint."""
from __future__ import annotations

import logging

import requests

from app.services.llm.base import LLMClient, LLMClientError

logger = logging.getLogger(__name__)


class OllamaClient(LLMClient):
    def __init__(self, *, base_url: str, model: str, temperature: float, timeout: float):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.label = f"Ollama ({model}) - {self.base_url}"

    def complete(self, prompt: str) -> str:
        try:
            response = requests.post(
                f"{self.base_url}/api/generate",
                json={
                    "model": self.model,
                    "prompt": prompt,
                    "stream": False,
                    "options": {"temperature": self.temperature},
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            logger.error("Ollama request to %s failed: %s", self.base_url, exc)
            logger.error("Make sure Ollama is running (ollama serve) and the model is pulled (ollama pull %s)", self.model)
            raise LLMClientError("ollama", str(exc)) from exc
        if not isinstance(payload, dict):
            raise LLMClientError("ollama", f"unexpected response body of type {type(payload).__name__}")
        return payload.get("response", "")
