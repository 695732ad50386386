"""Phase scheduler: the focus/break countdown state machine."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Literal

from .cues import AudioCueEmitter, CueKind, emit_cue
from .planner import SessionPlan
from .ticker import Ticker

logger = logging.getLogger(__name__)

Phase = Literal["ready", "focus", "break", "done"]


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the countdown. Only PhaseScheduler creates these."""

    phase: Phase = "ready"
    current_sprint: int = 1
    remaining_seconds: int = 0
    running: bool = False

    @property
    def is_active(self) -> bool:
        """True while a focus or break phase is in progress (running or paused)."""
        return self.phase in ("focus", "break")

    def phase_label(self) -> str:
        if self.phase == "focus":
            return f"Sprint {self.current_sprint} focus"
        if self.phase == "break":
            return "Rhythm break"
        if self.phase == "done":
            return "Complete"
        return "Ready"


class PhaseScheduler:
    """Drives a SessionPlan through focus and break phases to completion.

    The scheduler owns its ticker. Every operation that changes whether time
    should flow stops the ticker before arming it again, so a stale tick can
    never touch ``remaining_seconds``.
    """

    def __init__(
        self,
        plan: SessionPlan,
        ticker: Ticker | None = None,
        cues: AudioCueEmitter | None = None,
        on_complete: Callable[[], None] | None = None,
    ):
        self._plan = plan
        self._ticker = ticker or Ticker("session")
        self._cues = cues
        self._on_complete = on_complete
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def plan(self) -> SessionPlan:
        return self._plan

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    def start(self) -> None:
        """Begin sprint 1. Valid from ready or done; ignored mid-session."""
        if self._state.is_active:
            logger.debug("start() ignored in phase %s", self._state.phase)
            return
        self._ticker.stop_ticking()
        self._state = SessionState(
            phase="focus",
            current_sprint=1,
            remaining_seconds=self._plan.sprint_minutes * 60,
            running=True,
        )
        self._ticker.start_ticking(self.tick)
        logger.info(
            "Session started: %d x %d min", self._plan.sprints, self._plan.sprint_minutes
        )
        emit_cue(self._cues, CueKind.FOCUS_STARTED)

    def pause(self) -> None:
        if not self._state.running:
            return
        self._ticker.stop_ticking()
        self._state = replace(self._state, running=False)
        logger.debug("Paused at %ds", self._state.remaining_seconds)

    def resume(self) -> None:
        """Continue a paused phase; from ready or done this starts afresh."""
        if not self._state.is_active:
            self.start()
            return
        if self._state.running:
            return
        self._ticker.stop_ticking()
        self._state = replace(self._state, running=True)
        self._ticker.start_ticking(self.tick)
        logger.debug("Resumed at %ds", self._state.remaining_seconds)

    def reset(self) -> None:
        self._ticker.stop_ticking()
        if self._state != SessionState():
            logger.info("Session reset from %s", self._state.phase)
        self._state = SessionState()

    def set_plan(self, plan: SessionPlan, force_reset: bool = False) -> bool:
        """Replace the plan. Returns True when the session was reset.

        A session is reset when the sprint length, break length or sprint
        count differ from the current plan, or when *force_reset* is set.
        """
        changed = (
            plan.sprint_minutes != self._plan.sprint_minutes
            or plan.break_minutes != self._plan.break_minutes
            or plan.sprints != self._plan.sprints
        )
        self._plan = plan
        if (changed or force_reset) and self._state != SessionState():
            self.reset()
            return True
        return False

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self._state.running or self._state.remaining_seconds <= 0:
            return
        remaining = self._state.remaining_seconds - 1
        self._state = replace(self._state, remaining_seconds=remaining)
        if remaining == 0:
            self._on_zero()

    def _on_zero(self) -> None:
        state = self._state
        if state.phase == "focus" and state.current_sprint < self._plan.sprints:
            self._state = replace(
                state, phase="break", remaining_seconds=self._plan.break_minutes * 60
            )
            logger.info("Sprint %d finished, break started", state.current_sprint)
            emit_cue(self._cues, CueKind.BREAK_STARTED)
        elif state.phase == "focus":
            self._ticker.stop_ticking()
            self._state = SessionState(
                phase="done",
                current_sprint=state.current_sprint,
                remaining_seconds=0,
                running=False,
            )
            logger.info("Session complete after %d sprints", state.current_sprint)
            if self._on_complete:
                self._on_complete()
        elif state.phase == "break":
            self._state = replace(
                state,
                phase="focus",
                current_sprint=state.current_sprint + 1,
                remaining_seconds=self._plan.sprint_minutes * 60,
            )
            logger.info("Break finished, sprint %d started", state.current_sprint + 1)
            emit_cue(self._cues, CueKind.FOCUS_STARTED)
