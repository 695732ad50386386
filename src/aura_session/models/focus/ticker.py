"""One-second tick sources driven by a cooperative loop.

A ``Ticker`` never runs on its own thread. The owning loop calls
:meth:`Ticker.poll` and the ticker fires its callback once for every interval
that has elapsed since it was armed.
"""

import time
from collections.abc import Callable


class Ticker:
    """A single, restartable periodic tick source.

    Arming replaces any previous arming, so at most one callback is ever live.
    Every start/stop bumps a generation counter; a poll that began under an
    older generation stops firing as soon as it notices the change.
    """

    def __init__(
        self,
        name: str = "tick",
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.name = name
        self.interval = interval
        self._clock = clock
        self._callback: Callable[[], None] | None = None
        self._next_due: float | None = None
        self._generation = 0

    @property
    def is_ticking(self) -> bool:
        return self._callback is not None

    @property
    def generation(self) -> int:
        return self._generation

    def start_ticking(self, callback: Callable[[], None]) -> None:
        """Arm the ticker, cancelling any previous arming first."""
        self.stop_ticking()
        self._callback = callback
        self._next_due = self._clock() + self.interval

    def stop_ticking(self) -> None:
        """Cancel the current arming. Safe to call when idle."""
        self._callback = None
        self._next_due = None
        self._generation += 1

    def poll(self) -> int:
        """Fire every tick that is due. Returns how many fired."""
        generation = self._generation
        fired = 0
        while (
            self._callback is not None
            and self._generation == generation
            and self._clock() >= self._next_due
        ):
            self._next_due += self.interval
            self._callback()
            fired += 1
        return fired
