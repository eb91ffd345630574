"""Tests for the interactive CLI helpers."""

from eduaid.cli import roadmap_cli
from eduaid.session.controller import RoadmapSession
from eduaid.session.persistence import SessionPersistence
from eduaid.store.memory import MemoryStore


class _FakeResponder:
    def generate(self, goal, level):
        return "Goal: Learn Rust\nImportant Notes: Rest\n\nPace yourself\nMilestone: Week 1"


def _session():
    session = RoadmapSession(_FakeResponder(), SessionPersistence(MemoryStore()))
    session.submit("learn Rust")
    return session


def test_toggle_command_accepts_multi_word_labels():
    session = _session()

    output = roadmap_cli.handle_command(session, ":toggle Important Notes 2")

    assert output == "Important Notes #2 done."
    assert "[x]  2  Pace yourself" in roadmap_cli.format_view(session.view())


def test_level_command_validates_input():
    session = _session()

    assert roadmap_cli.handle_command(session, ":level expert").startswith("Level must be one of")
    assert roadmap_cli.handle_command(session, ":level advanced") == "Level set to Advanced."
    assert session.level == "Advanced"


def test_clear_command_resets_session():
    session = _session()

    roadmap_cli.handle_command(session, ":clear")

    assert roadmap_cli.format_view(session.view()) == "No roadmap yet."


def test_format_view_lists_milestones_last():
    text = roadmap_cli.format_view(_session().view())

    assert text.index("== Goal ==") < text.index("== Important Notes ==") < text.index("** Milestone **")


def test_format_view_shows_raw_text_when_nothing_parsed():
    session = RoadmapSession(_FakeResponder(), SessionPersistence(MemoryStore()))
    session.roadmap = "Just practise."

    assert "Just practise." in roadmap_cli.format_view(session.view())


def test_unknown_command_prints_help():
    assert roadmap_cli.handle_command(_session(), ":bogus") == roadmap_cli.HELP


def test_unbalanced_quote_returns_help_instead_of_raising():
    session = _session()

    output = roadmap_cli.handle_command(session, ":level it's")

    assert output.startswith("Could not read command: No closing quotation")
    assert output.endswith(roadmap_cli.HELP)
    assert session.level == "Beginner"
