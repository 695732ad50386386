"""The pre-session commit countdown."""

import logging
from dataclasses import dataclass

from .host import FullscreenController, best_effort
from .scheduler import PhaseScheduler
from .ticker import Ticker

logger = logging.getLogger(__name__)

COMMIT_SECONDS = 10


@dataclass(frozen=True)
class CommitState:
    countdown_seconds: int = 0
    armed: bool = False

    @property
    def is_counting(self) -> bool:
        return self.countdown_seconds > 0


class CommitFlow:
    """A short cooling-off countdown that gates entry into a session.

    The zero crossing of this countdown is the only automatic caller of
    ``PhaseScheduler.start()``, and it fires at most once per ``commit()``.
    """

    def __init__(
        self,
        scheduler: PhaseScheduler,
        ticker: Ticker | None = None,
        fullscreen: FullscreenController | None = None,
    ):
        self._scheduler = scheduler
        self._ticker = ticker or Ticker("commit")
        self._fullscreen = fullscreen
        self._state = CommitState()

    @property
    def state(self) -> CommitState:
        return self._state

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    def commit(self) -> None:
        """Arm the countdown and ask for the immersive display."""
        self._ticker.stop_ticking()
        self._state = CommitState(countdown_seconds=COMMIT_SECONDS, armed=True)
        logger.info("Commit countdown armed (%ds)", COMMIT_SECONDS)
        if self._fullscreen is not None:
            best_effort(self._fullscreen.enter, "Entering fullscreen")
        self._ticker.start_ticking(self.tick)

    def tick(self) -> None:
        if not self._state.is_counting:
            return
        remaining = self._state.countdown_seconds - 1
        if remaining > 0:
            self._state = CommitState(countdown_seconds=remaining, armed=self._state.armed)
            return

        self._ticker.stop_ticking()
        armed = self._state.armed
        self._state = CommitState()
        if armed:
            logger.info("Commit countdown finished, starting session")
            self._scheduler.start()

    def supersede(self) -> None:
        """Drop a running countdown because the session is starting anyway.

        Unlike :meth:`cancel`, the scheduler and the immersive display are
        left alone.
        """
        if not self._state.is_counting:
            return
        self._ticker.stop_ticking()
        self._state = CommitState()
        logger.info("Commit countdown superseded by a direct start")

    def cancel(self) -> None:
        """Abort a running countdown and reset the scheduler without starting it."""
        if not self._state.is_counting:
            return
        self._ticker.stop_ticking()
        self._state = CommitState()
        logger.info("Commit countdown cancelled")
        if self._fullscreen is not None:
            best_effort(self._fullscreen.exit, "Leaving fullscreen")
        self._scheduler.reset()
