"""Turn merged sections into checklist views bound to progress entries."""

from __future__ import annotations

from eduaid.models.progress import ProgressKey, ProgressStore
from eduaid.roadmap.merger import build_sections
from eduaid.schemas.roadmap import ChecklistItem, RoadmapView, Section, SectionView
from eduaid.utils.constants import GOAL_LABEL, MILESTONE_LABEL


def checklist_items(section: Section, progress: ProgressStore) -> list[ChecklistItem]:
    """One item per non-blank line.

    Indices come from the unfiltered line list, so skipped blank lines leave
    gaps instead of shifting the keys of later lines.
    """
    items = []
    for index, line in enumerate(section.content.splitlines()):
        if not line.strip():
            continue
        items.append(
            ChecklistItem(
                label=section.label,
                index=index,
                text=line,
                done=progress.get(ProgressKey(section.label, index)),
            )
        )
    return items


def render_section(section: Section, progress: ProgressStore) -> SectionView:
    if section.label == GOAL_LABEL:
        return SectionView(label=section.label, kind="text", content=section.content)
    kind = "milestone" if section.label == MILESTONE_LABEL else "checklist"
    return SectionView(
        label=section.label,
        kind=kind,
        content=section.content,
        items=checklist_items(section, progress),
    )


def render_roadmap(roadmap: str, progress: ProgressStore, **state) -> RoadmapView:
    """Render raw roadmap text; milestones are split out for separate display.

    Extra keyword arguments (goal, level, loading, error) are copied onto the
    returned view.
    """
    views = [render_section(section, progress) for section in build_sections(roadmap)]
    return RoadmapView(
        roadmap=roadmap,
        sections=[view for view in views if view.kind != "milestone"],
        milestones=[view for view in views if view.kind == "milestone"],
        **state,
    )
