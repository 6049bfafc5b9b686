"""
Configuration settings for the RankUp resume builder.

This file contains configuration for the LLM providers, the sampling parameters
used for resume generation and scoring, and the PDF export layout.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os
import threading

# LLM Provider Configuration
# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

# Model Configuration
# For Ollama: use models like "llama3.1:8b", "mistral:7b", etc.
# For OpenAI: use models like "gpt-4o-mini", "gpt-4o", etc.
DEFAULT_MODEL = {
    "ollama": "llama3.1:8b",
    "openai": "gpt-4o-mini"  # Fast and cheap, plenty for a one-page resume
}

# OpenAI Configuration
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
if LLM_PROVIDER == "openai" and not OPENAI_API_KEY:
    raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable.")

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Sampling parameters for the two calls made per resume
GENERATION_PARAMS = {
    "temperature": 0.7,
    "max_tokens": 2048
}
EVALUATION_PARAMS = {
    "temperature": 0.1,  # keep the score close to deterministic
    "max_tokens": 10     # a bare number is expected
}
DEFAULT_LIKELIHOOD = 50

# PDF export layout (margin in inches, US letter)
PDF_OPTIONS = {
    "margin": 0.5,
    "format": "letter",
    "orientation": "portrait",
    "font": "Helvetica",
    "font_size": 10,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")


def configure_logging(level: str = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _log_thread_exception(args: threading.ExceptHookArgs) -> None:
    logging.getLogger("rankup").warning(
        "Uncaught exception in thread %s",
        getattr(args.thread, "name", "?"),
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def install_thread_exception_sink() -> None:
    """
    Log uncaught exceptions from background threads as warnings.

    Only a log sink: it neither retries nor recovers anything.
    """
    threading.excepthook = _log_thread_exception
