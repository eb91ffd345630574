"""Explicit roadmap session state: goal, roadmap text, progress, loading/error."""

from __future__ import annotations

import logging
import threading

from eduaid.config import settings
from eduaid.llm.responders import PromptResponder, RoadmapGenerationError
from eduaid.models.progress import ProgressKey, ProgressStore
from eduaid.roadmap.checklist import render_roadmap
from eduaid.schemas.roadmap import Level, RoadmapView
from eduaid.session.persistence import SessionPersistence
from eduaid.utils.events import Observable

logger = logging.getLogger("uvicorn.error")


class RoadmapSession(Observable):
    """Single-user roadmap state shadowed into persistence on every change.

    Observers registered with :meth:`subscribe` are called with the session
    after each state change so a front end can redraw.
    """

    def __init__(
        self,
        responder: PromptResponder,
        persistence: SessionPersistence,
        *,
        error_message: str | None = None,
        reset_progress_on_generate: bool | None = None,
    ) -> None:
        super().__init__()
        self.responder = responder
        self.persistence = persistence
        self.error_message = error_message or settings.generate_error_message
        self.reset_progress_on_generate = (
            settings.reset_progress_on_generate
            if reset_progress_on_generate is None
            else reset_progress_on_generate
        )
        self.goal = ""
        self.level: Level = "Beginner"
        self.roadmap = ""
        self.loading = False
        self.error = ""
        self.progress = ProgressStore()
        self.progress.subscribe(self._on_progress_change)
        self._restoring = False
        self._submit_lock = threading.Lock()

    def _on_progress_change(self, progress: ProgressStore) -> None:
        if not self._restoring:
            self.persistence.save_progress(progress)
        self._notify()

    def restore(self) -> None:
        """Load the last goal, roadmap and progress from persistence."""
        snapshot = self.persistence.load()
        self.goal = snapshot.goal
        self.roadmap = snapshot.roadmap
        self._restoring = True
        try:
            self.progress.replace(snapshot.progress)
        finally:
            self._restoring = False
        logger.info(
            "Session restored (goal=%s, roadmap=%s chars, progress=%s entries)",
            bool(self.goal),
            len(self.roadmap),
            len(self.progress),
        )

    def set_goal(self, goal: str) -> None:
        self.goal = goal
        self.persistence.save_goal(goal)
        self._notify()

    def set_level(self, level: Level) -> None:
        self.level = level
        self._notify()

    def submit(self, goal: str, level: Level | None = None) -> bool:
        """Generate a roadmap for ``goal``.

        Returns False without doing anything for a blank goal or while a
        previous generation is still running. On upstream failure the
        previous roadmap is kept and :attr:`error` holds a retry message.
        """
        if not goal.strip():
            return False
        with self._submit_lock:
            if self.loading:
                logger.info("Roadmap generation already in progress; ignoring submit")
                return False
            self.loading = True

        try:
            self.set_goal(goal)
            if level is not None:
                self.level = level
            self.error = ""
            self._notify()
            try:
                roadmap = self.responder.generate(goal, self.level)
            except RoadmapGenerationError as exc:
                logger.error("Roadmap generation failed: %s", exc)
                self.error = self.error_message
                return True
            self.roadmap = roadmap
            self.persistence.save_roadmap(roadmap)
            if self.reset_progress_on_generate:
                self.progress.clear()
            return True
        finally:
            self.loading = False
            self._notify()

    def toggle(self, label: str, index: int) -> bool:
        """Flip one checklist line and return its new state."""
        return self.progress.toggle(ProgressKey(label, index))

    def clear(self) -> None:
        """Forget goal, roadmap and progress in memory and in the store."""
        self.goal = ""
        self.roadmap = ""
        self.error = ""
        self._restoring = True
        try:
            self.progress.clear()
        finally:
            self._restoring = False
        self.persistence.reset()
        self._notify()

    def view(self) -> RoadmapView:
        return render_roadmap(
            self.roadmap,
            self.progress,
            goal=self.goal,
            level=self.level,
            loading=self.loading,
            error=self.error,
        )
