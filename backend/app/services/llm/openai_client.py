"""OpenAI chat completion provider."""
from __future__ import annotations

import logging

import openai

from app.services.llm.base import LLMClient, LLMClientError

logger = logging.getLogger(__name__)


class OpenAIClient(LLMClient):
    def __init__(self, *, api_key: str, model: str, temperature: float, timeout: float):
        self.model = model
        self.temperature = temperature
        self.label = f"OpenAI ({model})"
        self._client = openai.OpenAI(api_key=api_key, timeout=timeout)

    def complete(self, prompt: str) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.OpenAIError as exc:
            logger.error("OpenAI completion failed (model=%s): %s", self.model, exc)
            raise LLMClientError("openai", str(exc)) from exc
        return completion.choices[0].message.content or ""
