"""Shared label vocabulary and regex fragments used by the roadmap parser."""

import re

# Section labels recognised in generated roadmaps. Order is irrelevant for matching.
ROADMAP_LABELS: tuple[str, ...] = (
    "Assumptions",
    "Roadmap Structure",
    "Goal",
    "Topics",
    "Exercises",
    "Online",
    "Resources",
    "Books",
    "Important Notes",
    "Contribute to Open Source Projects",
    "Activities",
    "Milestone",
)

# Rendered as plain text instead of a checklist.
GOAL_LABEL = "Goal"

# Rendered as a checklist with its own visual treatment.
MILESTONE_LABEL = "Milestone"

LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced")

# Bold/italic delimiters stripped from roadmap text before it is split.
EMPHASIS_RE = re.compile(r"\*\*|__")

# What may precede a label: bullets, heading/quote markers and list numbers
# ("- Topics:", "## Goal:", "2. Books:").
LABEL_LEAD = r"(?:(?:[-*+•#>]|\d+[.)])[ \t]*)*"

# Up to three capitalised words qualifying a label ("Online Resources:",
# "Recommended Books:").
LABEL_QUALIFIERS = r"(?:[A-Z][A-Za-z0-9'&/-]*[ \t]+){0,3}"

# Separator used when merging repeated sections.
SECTION_JOINER = "\n\n"
