import threading
import time

import pytest

import llm_client
from llm_client import OllamaClient, OpenAIClient, check_llm_status, get_llm_client


class FakeOllamaHost:
    """Records the options OllamaClient forwards to the ollama package."""

    last = None

    def __init__(self, host):
        self.host = host
        self.calls = []
        FakeOllamaHost.last = self

    def chat(self, model, messages, options):
        self.calls.append({"model": model, "messages": messages, "options": options})

        class Message:
            content = "ok"

        class Response:
            message = Message()

        return Response()


@pytest.fixture
def fake_ollama(monkeypatch):
    monkeypatch.setattr(llm_client, "OllamaHost", FakeOllamaHost)
    return FakeOllamaHost


def test_unsupported_provider_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported LLM provider"):
        get_llm_client("anthropic")


def test_status_reports_error_for_unusable_provider() -> None:
    assert check_llm_status("anthropic") == "error"


def test_status_connected_when_client_builds(fake_ollama) -> None:
    assert check_llm_status("ollama") == "connected"


def test_openai_client_requires_key(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ValueError, match="API key"):
        OpenAIClient()


def test_ollama_client_maps_generation_params(fake_ollama) -> None:
    client = OllamaClient(host="http://ollama.local:11434")
    response = client.chat("llama3.1:8b", [{"role": "user", "content": "hi"}], temperature=0.1, max_tokens=10)

    assert response.message.content == "ok"
    host = fake_ollama.last
    assert host.host == "http://ollama.local:11434"
    assert host.calls[0]["options"] == {"temperature": 0.1, "num_predict": 10}


@pytest.fixture
def no_cached_clients(monkeypatch):
    monkeypatch.setattr(llm_client, "_clients", {})


def test_global_chat_reuses_client_per_provider(fake_ollama, no_cached_clients) -> None:
    llm_client.chat("llama3.1:8b", [{"role": "user", "content": "hi"}], provider="ollama")
    first = llm_client.client_for("ollama")
    llm_client.chat("llama3.1:8b", [{"role": "user", "content": "again"}], provider="ollama")

    assert llm_client.client_for("ollama") is first
    assert len(fake_ollama.last.calls) == 2


def test_concurrent_sessions_get_their_own_provider(monkeypatch, no_cached_clients) -> None:
    built = []

    def slow_build(provider):
        built.append(provider)
        time.sleep(0.05)
        return f"client:{provider}"

    monkeypatch.setattr(llm_client, "get_llm_client", slow_build)
    results = []
    threads = [
        threading.Thread(target=lambda p=p: results.append((p, llm_client.client_for(p))))
        for p in ["openai", "ollama"] * 4
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(built) == ["ollama", "openai"]
    assert all(client == f"client:{p}" for p, client in results)
