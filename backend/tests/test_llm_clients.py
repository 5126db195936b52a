from __future__ import annotations

from types import SimpleNamespace

import openai
import pytest
import requests

from app.core.config import Settings
from app.services.llm import ollama_client as ollama_module
from app.services.llm.base import LLMClient, LLMClientError
from app.services.llm.factory import build_llm_client, is_openai_configured
from app.services.llm.ollama_client import OllamaClient
from app.services.llm.openai_client import OpenAIClient


def _settings(**overrides) -> Settings:
    values = {
        "openai_api_key": None,
        "openai_model": "gpt-3.5-turbo",
        "use_local_llm": False,
        "ollama_base_url": "http://localhost:11434",
        "ollama_model": "llama2",
    }
    values.update(overrides)
    return Settings(**values)


def test_base_client_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        LLMClient().complete("prompt")


def test_factory_selects_openai_when_key_configured() -> None:
    client = build_llm_client(_settings(openai_api_key="sk-test"))

    assert isinstance(client, OpenAIClient)
    assert client.label == "OpenAI (gpt-3.5-turbo)"


@pytest.mark.parametrize("api_key", [None, "", "   ", "your-api-key-here", "${OPENAI_API_KEY}"])
def test_factory_falls_back_to_ollama_without_usable_key(api_key) -> None:
    config = _settings(openai_api_key=api_key)

    assert is_openai_configured(config) is False
    client = build_llm_client(config)
    assert isinstance(client, OllamaClient)
    assert client.label == "Ollama (llama2) - http://localhost:11434"


def test_factory_prefers_local_llm_when_requested() -> None:
    client = build_llm_client(_settings(openai_api_key="sk-test", use_local_llm=True, ollama_model="mistral"))

    assert isinstance(client, OllamaClient)
    assert client.label == "Ollama (mistral) - http://localhost:11434"


def test_openai_client_returns_message_content() -> None:
    client = OpenAIClient(api_key="sk-test", model="gpt-4o-mini", temperature=0.2, timeout=5)
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        message = SimpleNamespace(content="TASK 1:")
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    client._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

    assert client.complete("Break this down") == "TASK 1:"
    assert calls[0]["model"] == "gpt-4o-mini"
    assert calls[0]["temperature"] == 0.2
    assert calls[0]["messages"] == [{"role": "user", "content": "Break this down"}]


def test_openai_client_wraps_sdk_errors() -> None:
    client = OpenAIClient(api_key="sk-test", model="gpt-4o-mini", temperature=0.2, timeout=5)

    def create(**kwargs):
        raise openai.OpenAIError("quota exceeded")

    client._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

    with pytest.raises(LLMClientError) as excinfo:
        client.complete("Break this down")
    assert excinfo.value.provider == "openai"


class _FakeResponse:
    def __init__(self, payload, status_error: Exception | None = None):
        self._payload = payload
        self._status_error = status_error

    def raise_for_status(self) -> None:
        if self._status_error:
            raise self._status_error

    def json(self):
        return self._payload


def test_ollama_client_posts_generate_request(monkeypatch) -> None:
    captured = {}

    def fake_post(url, json, timeout):
        captured.update(url=url, json=json, timeout=timeout)
        return _FakeResponse({"response": "TASK 1:\nTitle: x"})

    monkeypatch.setattr(ollama_module.requests, "post", fake_post)
    client = OllamaClient(base_url="http://ollama:11434/", model="llama2", temperature=0.7, timeout=30)

    assert client.complete("Break this down") == "TASK 1:\nTitle: x"
    assert captured["url"] == "http://ollama:11434/api/generate"
    assert captured["json"]["model"] == "llama2"
    assert captured["json"]["prompt"] == "Break this down"
    assert captured["json"]["stream"] is False
    assert captured["timeout"] == 30


def test_ollama_client_missing_response_field_returns_empty(monkeypatch) -> None:
    monkeypatch.setattr(ollama_module.requests, "post", lambda url, json, timeout: _FakeResponse({}))
    client = OllamaClient(base_url="http://ollama:11434", model="llama2", temperature=0.7, timeout=30)

    assert client.complete("prompt") == ""


@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("connection refused"), requests.HTTPError("404 model not found")],
)
def test_ollama_client_wraps_transport_errors(monkeypatch, error) -> None:
    def fake_post(url, json, timeout):
        if isinstance(error, requests.HTTPError):
            return _FakeResponse({}, status_error=error)
        raise error

    monkeypatch.setattr(ollama_module.requests, "post", fake_post)
    client = OllamaClient(base_url="http://ollama:11434", model="llama2", temperature=0.7, timeout=30)

    with pytest.raises(LLMClientError) as excinfo:
        client.complete("prompt")
    assert excinfo.value.provider == "ollama"


@pytest.mark.parametrize("payload", [["TASK 1:"], "TASK 1:", 42])
def test_ollama_client_rejects_non_object_body(monkeypatch, payload) -> None:
    monkeypatch.setattr(ollama_module.requests, "post", lambda url, json, timeout: _FakeResponse(payload))
    client = OllamaClient(base_url="http://ollama:11434", model="llama2", temperature=0.7, timeout=30)

    with pytest.raises(LLMClientError) as excinfo:
        client.complete("prompt")
    assert excinfo.value.provider == "ollama"
