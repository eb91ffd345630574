"""Schemas for roadmap sections, checklist views and /generate payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Level = Literal["Beginner", "Intermediate", "Advanced"]
SectionKind = Literal["text", "checklist", "milestone"]


class Section(BaseModel):
    """One labelled block of a roadmap after merging."""

    label: str
    content: str


class ChecklistItem(BaseModel):
    label: str
    index: int
    text: str
    done: bool = False


class SectionView(BaseModel):
    label: str
    kind: SectionKind
    content: str
    items: list[ChecklistItem] = Field(default_factory=list)


class RoadmapView(BaseModel):
    """Everything a client needs to draw the current roadmap."""

    goal: str = ""
    level: Level = "Beginner"
    roadmap: str = ""
    loading: bool = False
    error: str = ""
    sections: list[SectionView] = Field(default_factory=list)
    milestones: list[SectionView] = Field(default_factory=list)


class GenerateRequest(BaseModel):
    goal: str
    level: Level = "Beginner"


class GenerateResponse(BaseModel):
    roadmap: str


class ToggleRequest(BaseModel):
    label: str
    index: int = Field(ge=0)
