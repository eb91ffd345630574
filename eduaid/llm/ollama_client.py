"""Factory for the Ollama chat model used by the local roadmap responder."""

from langchain_ollama import ChatOllama

from eduaid.config import settings


def get_chat_model():
    """Return a ChatOllama instance for roadmap generation.

    Configured by ``OLLAMA_BASE_URL``, ``OLLAMA_MODEL`` and
    ``OLLAMA_TIMEOUT_SECONDS``.
    """
    return ChatOllama(
        base_url=settings.ollama_base_url,
        model=settings.ollama_model,
        request_timeout=settings.ollama_timeout_seconds,
    )
