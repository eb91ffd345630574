"""Tests for the FastAPI roadmap endpoints."""

from fastapi.testclient import TestClient

import eduaid.main as main
from eduaid.llm.responders import RoadmapGenerationError
from eduaid.session.controller import RoadmapSession
from eduaid.session.persistence import SessionPersistence
from eduaid.store.memory import MemoryStore

ROADMAP = "Goal: Learn Rust\nTopics: Ownership\nBorrowing\nMilestone: Week 1"


class _FakeResponder:
    def __init__(self, text=ROADMAP, fail=False):
        self.text = text
        self.fail = fail

    def generate(self, goal, level):
        if self.fail:
            raise RoadmapGenerationError("Upstream returned HTTP 500", status_code=500)
        return self.text


def _install(monkeypatch, responder, store=None):
    store = store if store is not None else MemoryStore()
    session = RoadmapSession(responder, SessionPersistence(store))
    monkeypatch.setattr(main, "responder", responder)
    monkeypatch.setattr(main, "session", session)
    return store


def test_generate_returns_roadmap(monkeypatch):
    _install(monkeypatch, _FakeResponder())

    with TestClient(main.app) as client:
        response = client.post("/generate", json={"goal": "learn Rust", "level": "Beginner"})

    assert response.status_code == 200
    assert response.json() == {"roadmap": ROADMAP}


def test_generate_returns_500_with_generic_message(monkeypatch):
    _install(monkeypatch, _FakeResponder(fail=True))

    with TestClient(main.app) as client:
        response = client.post("/generate", json={"goal": "learn Rust"})

    assert response.status_code == 500
    assert response.json()["detail"] == main.settings.generate_error_message


def test_generate_rejects_unknown_level(monkeypatch):
    _install(monkeypatch, _FakeResponder())

    with TestClient(main.app) as client:
        response = client.post("/generate", json={"goal": "learn Rust", "level": "Expert"})

    assert response.status_code == 422


def test_submit_toggle_and_clear_flow(monkeypatch):
    store = _install(monkeypatch, _FakeResponder())

    with TestClient(main.app) as client:
        submitted = client.post("/roadmap", json={"goal": "learn Rust", "level": "Advanced"})
        toggled = client.post("/progress/toggle", json={"label": "Topics", "index": 1})
        cleared = client.delete("/roadmap")

    assert submitted.status_code == 200
    body = submitted.json()
    assert body["level"] == "Advanced"
    assert [s["label"] for s in body["sections"]] == ["Goal", "Topics"]
    assert [s["label"] for s in body["milestones"]] == ["Milestone"]

    topics = toggled.json()["sections"][1]
    assert [item["done"] for item in topics["items"]] == [False, True]

    assert cleared.json()["roadmap"] == ""
    assert store.data == {}


def test_submit_reports_upstream_error_on_view(monkeypatch):
    _install(monkeypatch, _FakeResponder(fail=True))

    with TestClient(main.app) as client:
        response = client.post("/roadmap", json={"goal": "learn Rust"})

    assert response.status_code == 200
    assert response.json()["error"] == main.settings.generate_error_message
    assert response.json()["loading"] is False


def test_submit_rejects_blank_goal(monkeypatch):
    _install(monkeypatch, _FakeResponder())

    with TestClient(main.app) as client:
        response = client.post("/roadmap", json={"goal": "  "})

    assert response.status_code == 422


def test_startup_restores_persisted_session(monkeypatch):
    store = MemoryStore(
        {
            "eduaid_goal": "learn Rust",
            "eduaid_roadmap": ROADMAP,
            "eduaid_progress": '{"Milestone-0": true}',
        }
    )
    _install(monkeypatch, _FakeResponder(), store)

    with TestClient(main.app) as client:
        response = client.get("/roadmap")

    body = response.json()
    assert body["goal"] == "learn Rust"
    assert body["milestones"][0]["items"][0]["done"] is True
