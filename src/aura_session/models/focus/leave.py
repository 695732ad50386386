"""Leave-event monitoring while a session is locked in."""

import logging
from dataclasses import dataclass

from .cues import AudioCueEmitter, CueKind, emit_cue
from .host import UnloadGuard, VisibilityObserver, best_effort
from .scheduler import PhaseScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaveStats:
    count: int = 0


class LeaveMonitor:
    """Counts attention losses and guards against leaving during lock-in.

    Lock-in begins at commit (or a direct start) and ends at reset. Leave
    events only count once the scheduler has left ``ready``.
    """

    def __init__(
        self,
        scheduler: PhaseScheduler,
        visibility: VisibilityObserver | None = None,
        unload_guard: UnloadGuard | None = None,
        cues: AudioCueEmitter | None = None,
    ):
        self._scheduler = scheduler
        self._visibility = visibility
        self._unload_guard = unload_guard
        self._cues = cues
        self._locked_in = False
        self._stats = LeaveStats()

    @property
    def stats(self) -> LeaveStats:
        return self._stats

    @property
    def locked_in(self) -> bool:
        return self._locked_in

    def lock_in(self) -> None:
        if self._locked_in:
            return
        self._locked_in = True
        self._stats = LeaveStats()
        if self._visibility is not None:
            best_effort(
                lambda: self._visibility.subscribe(self.on_visibility_change),
                "Subscribing to visibility",
            )
        if self._unload_guard is not None:
            best_effort(
                lambda: self._unload_guard.register(self.should_confirm_exit),
                "Registering exit guard",
            )
        logger.debug("Lock-in started")

    def release(self) -> None:
        if not self._locked_in:
            return
        self._locked_in = False
        if self._visibility is not None:
            best_effort(
                lambda: self._visibility.unsubscribe(self.on_visibility_change),
                "Unsubscribing from visibility",
            )
        if self._unload_guard is not None:
            best_effort(self._unload_guard.clear, "Clearing exit guard")
        logger.info("Lock-in released after %d leave(s)", self._stats.count)
        self._stats = LeaveStats()

    def on_visibility_change(self, visible: bool) -> None:
        if visible or not self._is_watching():
            return
        self._stats = LeaveStats(count=self._stats.count + 1)
        logger.info("Leave event #%d", self._stats.count)
        emit_cue(self._cues, CueKind.LEAVE_WARNING)

    def should_confirm_exit(self) -> bool:
        """Guard predicate: leaving now should ask the user first."""
        return self._is_watching()

    def _is_watching(self) -> bool:
        return self._locked_in and self._scheduler.state.phase != "ready"
