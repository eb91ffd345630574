"""Interactive CLI for generating a roadmap and ticking off its checklist."""

from __future__ import annotations

import argparse
import shlex

from eduaid.config import settings
from eduaid.llm.responder_factory import get_responder
from eduaid.llm.responders import RelayResponder
from eduaid.schemas.roadmap import RoadmapView, SectionView
from eduaid.session.controller import RoadmapSession
from eduaid.session.persistence import SessionPersistence
from eduaid.store.factory import get_store
from eduaid.utils.constants import LEVELS

HELP = """\
Type a learning goal to generate a roadmap. Commands:
  :level <Beginner|Intermediate|Advanced>
  :toggle <Label> <index>
  :show
  :clear
  exit | quit"""


def format_section(section: SectionView) -> str:
    title = f"== {section.label} ==" if section.kind != "milestone" else f"** {section.label} **"
    lines = [title]
    if section.kind == "text":
        lines.append(section.content)
    for item in section.items:
        mark = "x" if item.done else " "
        lines.append(f"[{mark}] {item.index:>2}  {item.text}")
    return "\n".join(lines)


def format_view(view: RoadmapView) -> str:
    lines = []
    if view.goal:
        lines.append(f"Goal: {view.goal} ({view.level})")
    if view.error:
        lines.append(view.error)
    sections = view.sections + view.milestones
    if sections:
        lines.extend(format_section(section) for section in sections)
    elif view.roadmap:
        # Nothing recognisable in the text; show it as-is.
        lines.append(view.roadmap)
    return "\n\n".join(lines) if lines else "No roadmap yet."


def handle_command(session: RoadmapSession, line: str) -> str:
    """Run one ``:command`` line and return the text to print."""
    try:
        parts = shlex.split(line[1:])
    except ValueError as exc:
        return f"Could not read command: {exc}\n\n{HELP}"
    if not parts:
        return HELP
    command, args = parts[0].lower(), parts[1:]
    if command == "show":
        return format_view(session.view())
    if command == "clear":
        session.clear()
        return "Cleared goal, roadmap and progress."
    if command == "level":
        if len(args) != 1 or args[0].capitalize() not in LEVELS:
            return f"Level must be one of: {', '.join(LEVELS)}"
        session.set_level(args[0].capitalize())
        return f"Level set to {session.level}."
    if command == "toggle":
        if len(args) < 2 or not args[-1].isdigit():
            return "Usage: :toggle <Label> <index>"
        label, index = " ".join(args[:-1]), int(args[-1])
        done = session.toggle(label, index)
        return f"{label} #{index} {'done' if done else 'not done'}."
    return HELP


def main() -> int:
    parser = argparse.ArgumentParser(description="Study roadmap checklist CLI")
    parser.add_argument(
        "--level",
        choices=LEVELS,
        default="Beginner",
        help="Current level sent with the goal",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Use a running /generate relay instead of calling the LLM directly",
    )
    parser.add_argument(
        "--store",
        default=settings.store_path,
        help="Path of the JSON file holding goal, roadmap and progress",
    )
    args = parser.parse_args()

    responder = RelayResponder(url=args.url) if args.url else get_responder()
    store = get_store("file", args.store)
    session = RoadmapSession(
        responder,
        SessionPersistence(store, key_prefix=settings.storage_key_prefix),
    )
    session.restore()
    session.set_level(args.level)

    print(HELP)
    if session.roadmap:
        print(format_view(session.view()))

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            print()
            break

        if not user_input:
            continue
        if user_input.lower() in {"exit", "quit"}:
            break
        if user_input.startswith(":"):
            print(handle_command(session, user_input))
            continue

        print("Generating...")
        session.submit(user_input)
        print(format_view(session.view()))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
