"""LLM completion client interface."""
from __future__ import annotations


class LLMClientError(RuntimeError):
    """Raised when the LLM backend cannot produce a completion."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message


class LLMClient:
    """Base interface for LLM providers: send a prompt, get text back."""

    label: str = "unconfigured"

    def complete(self, prompt: str) -> str:
        raise NotImplementedError
