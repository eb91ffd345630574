"""FastAPI application: /generate relay plus roadmap checklist endpoints."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from eduaid.config import settings
from eduaid.llm.responder_factory import get_responder
from eduaid.llm.responders import RoadmapGenerationError
from eduaid.schemas.roadmap import (
    GenerateRequest,
    GenerateResponse,
    RoadmapView,
    ToggleRequest,
)
from eduaid.session.controller import RoadmapSession
from eduaid.session.persistence import SessionPersistence
from eduaid.store.factory import get_store

logger = logging.getLogger("uvicorn.error")

responder = get_responder()
session = RoadmapSession(
    responder,
    SessionPersistence(get_store(), key_prefix=settings.storage_key_prefix),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    session.restore()
    yield


app = FastAPI(title="EduAid Roadmap", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/generate", response_model=GenerateResponse)
def generate(request: GenerateRequest):
    """Relay a goal/level pair to the configured LLM and return raw roadmap text."""
    try:
        roadmap = responder.generate(request.goal, request.level)
    except RoadmapGenerationError as exc:
        logger.error("Error from LLM backend: %s", exc.detail or exc)
        raise HTTPException(status_code=500, detail=settings.generate_error_message) from exc
    return GenerateResponse(roadmap=roadmap)


@app.get("/roadmap", response_model=RoadmapView)
def get_roadmap():
    return session.view()


@app.post("/roadmap", response_model=RoadmapView)
def submit_roadmap(request: GenerateRequest):
    """Generate and store a new roadmap for the session.

    Upstream failures are reported through ``error`` on the returned view,
    leaving any previous roadmap in place.
    """
    if not request.goal.strip():
        raise HTTPException(status_code=422, detail="Goal must not be empty")
    if not session.submit(request.goal, request.level):
        raise HTTPException(status_code=409, detail="Roadmap generation already in progress")
    return session.view()


@app.post("/progress/toggle", response_model=RoadmapView)
def toggle_progress(request: ToggleRequest):
    session.toggle(request.label, request.index)
    return session.view()


@app.delete("/roadmap", response_model=RoadmapView)
def clear_roadmap():
    session.clear()
    return session.view()
