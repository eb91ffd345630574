"""Split free-form roadmap text into labelled spans."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, NamedTuple

from eduaid.utils.constants import EMPHASIS_RE, LABEL_LEAD, LABEL_QUALIFIERS, ROADMAP_LABELS

_WHITESPACE_RE = re.compile(r"\s*")


class _LabelPatterns(NamedTuple):
    # A label heading starting exactly at the given position.
    heading: re.Pattern[str]
    # A label heading opening a line.
    line_heading: re.Pattern[str]


@lru_cache(maxsize=8)
def _label_patterns(labels: tuple[str, ...]) -> _LabelPatterns:
    # Longest first so a label is never cut short by a shorter one sharing its prefix.
    alternation = "|".join(re.escape(label) for label in sorted(labels, key=len, reverse=True))
    heading = rf"{LABEL_LEAD}{LABEL_QUALIFIERS}(?P<label>{alternation})[ \t]*:"
    return _LabelPatterns(
        heading=re.compile(heading),
        line_heading=re.compile(rf"^[ \t]*{heading}", re.MULTILINE),
    )


def strip_emphasis(text: str) -> str:
    """Drop bold/italic delimiters, including pairs exposed by a removal."""
    while True:
        stripped = EMPHASIS_RE.sub("", text)
        if stripped == text:
            return text
        text = stripped


def clean_content(raw: str) -> str:
    """Trim a captured span and drop bold/italic delimiters."""
    return strip_emphasis(raw).strip()


def parse_sections(
    text: str, labels: Iterable[str] = ROADMAP_LABELS
) -> list[tuple[str, str]]:
    """Return ``(label, content)`` matches in order of appearance.

    Emphasis is removed from the whole text first. A label then counts when
    it is followed by a colon and either opens a line or comes right after
    another label's colon ("Milestone: Goal: ship it"). It may be preceded by
    bullets, list numbers and a few capitalised words ("Online Resources:").
    Its content runs up to the next such label or the end of the text. Empty
    spans are kept here and dropped by the merger.

    Parameters
    ----------
    text : str
        Raw roadmap text returned by the prompt responder.
    labels : Iterable[str]
        Recognised section labels, matched case-sensitively.

    Returns
    -------
    list[tuple[str, str]]
        One entry per label occurrence; empty when nothing matched.
    """
    label_set = tuple(dict.fromkeys(labels))
    if not text or not label_set:
        return []
    patterns = _label_patterns(label_set)
    text = strip_emphasis(text)

    matches: list[tuple[str, str]] = []
    heading = patterns.line_heading.search(text)
    while heading is not None:
        label, content_start = heading.group("label"), heading.end()
        after_colon = _WHITESPACE_RE.match(text, content_start).end()
        chained = patterns.heading.match(text, after_colon)
        if chained is not None:
            matches.append((label, ""))
            heading = chained
            continue
        heading = patterns.line_heading.search(text, content_start)
        content_end = heading.start() if heading is not None else len(text)
        matches.append((label, clean_content(text[content_start:content_end])))
    return matches
