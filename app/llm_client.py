"""
LLM client abstraction layer to support multiple providers.

This module provides a unified interface for the hosted text-generation API
(OpenAI) and a local Ollama server, so the resume generator only ever sees
"prompt in, text out, or an exception".
"""

from __future__ import annotations
import logging
import os
import threading
from typing import List, Dict, Any
from abc import ABC, abstractmethod

try:
    from ollama import Client as OllamaHost
except ImportError:
    OllamaHost = None

try:
    from openai import OpenAI
except ImportError:
    OpenAI = None

logger = logging.getLogger(__name__)


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(self, model: str, messages: List[Dict[str, str]], **params: Any) -> LLMResponse:
        """Send a chat request to the LLM provider."""
        pass


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None):
        if OllamaHost is None:
            raise ImportError("ollama package is required for OllamaClient")

        try:
            from config import OLLAMA_BASE_URL
            host = host or OLLAMA_BASE_URL
        except ImportError:
            host = host or os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

        self.client = OllamaHost(host=host)

    def chat(self, model: str, messages: List[Dict[str, str]], **params: Any) -> LLMResponse:
        """Send a chat request to Ollama."""
        options = {}
        if "temperature" in params:
            options["temperature"] = params["temperature"]
        if "max_tokens" in params:
            options["num_predict"] = params["max_tokens"]

        response = self.client.chat(model=model, messages=messages, options=options)
        return LLMResponse(response.message.content)


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None):
        if OpenAI is None:
            raise ImportError("openai package is required for OpenAIClient")

        # Use provided API key or get from environment
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter.")

        self.client = OpenAI(api_key=api_key)

    def chat(self, model: str, messages: List[Dict[str, str]], **params: Any) -> LLMResponse:
        """Send a chat request to OpenAI."""
        try:
            from config import GENERATION_PARAMS
            temperature = params.get("temperature", GENERATION_PARAMS["temperature"])
            max_tokens = params.get("max_tokens", GENERATION_PARAMS["max_tokens"])
        except ImportError:
            temperature = params.get("temperature", 0.7)
            max_tokens = params.get("max_tokens", 2048)

        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens
        )

        content = response.choices[0].message.content
        if content is None:
            raise ValueError("OpenAI returned an empty completion")
        return LLMResponse(content)


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    if provider is None:
        try:
            from config import LLM_PROVIDER
            provider = LLM_PROVIDER
        except ImportError:
            provider = os.getenv("LLM_PROVIDER", "openai")
    provider = provider.lower()

    if provider == "openai":
        return OpenAIClient()
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")


def check_llm_status(provider: str | None = None) -> str:
    """Return "connected" if a client for the provider can be built, else "error"."""
    try:
        get_llm_client(provider)
    except (ImportError, ValueError) as e:
        logger.warning("LLM provider unavailable: %s", e)
        return "error"
    return "connected"


# One shared client per provider; Streamlit sessions run on separate threads
_clients: Dict[str | None, LLMClient] = {}
_clients_lock = threading.Lock()


def client_for(provider: str | None = None) -> LLMClient:
    """Return the cached client for ``provider``, building it on first use."""
    with _clients_lock:
        client = _clients.get(provider)
        if client is None:
            client = _clients[provider] = get_llm_client(provider)
    return client


def chat(model: str, messages: List[Dict[str, str]], provider: str | None = None, **params: Any) -> LLMResponse:
    """
    Unified chat function that works with any configured LLM provider.

    ``provider=None`` uses the configured default.
    """
    return client_for(provider).chat(model, messages, **params)
