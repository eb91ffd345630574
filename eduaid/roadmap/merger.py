"""Merge repeated roadmap labels into a single section each."""

from __future__ import annotations

from typing import Iterable

from eduaid.roadmap.parser import parse_sections
from eduaid.schemas.roadmap import Section
from eduaid.utils.constants import ROADMAP_LABELS, SECTION_JOINER


def merge_sections(matches: Iterable[tuple[str, str]]) -> list[Section]:
    """Collapse parser matches into one section per label.

    Sections keep the position of the label's first occurrence and join
    repeated non-empty contents with a blank line. Labels that never carried
    any content are dropped.
    """
    grouped: dict[str, list[str]] = {}
    for label, content in matches:
        contents = grouped.setdefault(label, [])
        if content.strip():
            contents.append(content)
    return [
        Section(label=label, content=SECTION_JOINER.join(contents))
        for label, contents in grouped.items()
        if contents
    ]


def build_sections(text: str, labels: Iterable[str] = ROADMAP_LABELS) -> list[Section]:
    """Parse and merge raw roadmap text."""
    return merge_sections(parse_sections(text, labels))


def format_sections(sections: Iterable[Section]) -> str:
    """Rebuild roadmap text that parses back into ``sections``."""
    return "\n".join(f"{section.label}: {section.content}" for section in sections)
