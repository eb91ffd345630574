"""Prompt responders: turn a goal and level into free-form roadmap text."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from eduaid.config import settings
from eduaid.llm.ollama_client import get_chat_model
from eduaid.prompts.roadmap import ROADMAP_USER_PROMPT

logger = logging.getLogger("uvicorn.error")


class RoadmapGenerationError(RuntimeError):
    """Upstream call failed (transport error or non-2xx response)."""

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class PromptResponder(Protocol):
    def generate(self, goal: str, level: str) -> str: ...


def build_prompt(goal: str, level: str) -> str:
    return ROADMAP_USER_PROMPT.format(goal=goal, level=level)


def extract_candidate_text(data: Any) -> str | None:
    """Pull ``candidates[0].content.parts[0].text`` out of a Gemini payload."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None


def _response_detail(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _post_json(url: str, payload: dict, *, timeout: int, params: dict | None = None) -> requests.Response:
    try:
        response = requests.post(
            url,
            params=params,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.error("Roadmap request to %s failed: %s", url, exc)
        raise RoadmapGenerationError("An unexpected error occurred.") from exc
    if not response.ok:
        detail = _response_detail(response)
        logger.error("Roadmap upstream returned %s: %s", response.status_code, detail)
        raise RoadmapGenerationError(
            f"Upstream returned HTTP {response.status_code}",
            status_code=response.status_code,
            detail=detail,
        )
    return response


def _json_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        logger.warning("Roadmap upstream returned a non-JSON body")
        return None


class GeminiResponder:
    """Call the Gemini ``generateContent`` REST endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        fallback_text: str | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.timeout = timeout or settings.gemini_timeout_seconds
        self.fallback_text = fallback_text or settings.roadmap_fallback_text

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, goal: str, level: str) -> str:
        payload = {"contents": [{"parts": [{"text": build_prompt(goal, level)}]}]}
        logger.info("Gemini roadmap call started")
        response = _post_json(self.url, payload, timeout=self.timeout, params={"key": self.api_key})
        logger.info("Gemini roadmap call finished")
        return extract_candidate_text(_json_body(response)) or self.fallback_text


class OllamaResponder:
    """Generate roadmaps with a local Ollama model."""

    def __init__(self, fallback_text: str | None = None) -> None:
        self.fallback_text = fallback_text or settings.roadmap_fallback_text

    def generate(self, goal: str, level: str) -> str:
        llm = get_chat_model()
        logger.info("Ollama roadmap call started")
        try:
            response = llm.invoke(build_prompt(goal, level))
        except Exception as exc:
            logger.error("Ollama roadmap call failed: %s", exc)
            raise RoadmapGenerationError("An unexpected error occurred.") from exc
        logger.info("Ollama roadmap call finished")
        content = getattr(response, "content", None)
        if isinstance(content, str) and content.strip():
            return content
        return self.fallback_text


class RelayResponder:
    """Ask a running ``/generate`` relay for the roadmap."""

    def __init__(
        self,
        url: str | None = None,
        timeout: int | None = None,
        fallback_text: str | None = None,
    ) -> None:
        self.url = url or settings.relay_url
        self.timeout = timeout or settings.relay_timeout_seconds
        self.fallback_text = fallback_text or settings.roadmap_fallback_text

    def generate(self, goal: str, level: str) -> str:
        response = _post_json(self.url, {"goal": goal, "level": level}, timeout=self.timeout)
        data = _json_body(response)
        roadmap = data.get("roadmap") if isinstance(data, dict) else None
        return roadmap if isinstance(roadmap, str) and roadmap else self.fallback_text
