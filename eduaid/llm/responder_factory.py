"""Prompt responder backend selection."""

from __future__ import annotations

from eduaid.config import settings
from eduaid.llm.responders import GeminiResponder, OllamaResponder, PromptResponder


def get_responder(backend: str | None = None) -> PromptResponder:
    backend = (backend or settings.llm_backend).lower()
    if backend == "gemini":
        return GeminiResponder()
    if backend == "ollama":
        return OllamaResponder()
    raise RuntimeError(f"Unknown LLM backend: {backend}")
