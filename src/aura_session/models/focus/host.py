"""Host-environment capabilities used during lock-in.

The terminal stands in for the host: the alternate screen is the immersive
display, xterm focus reporting tells us when the window loses attention and
SIGINT is the "close the surface" attempt.
"""

import logging
import signal
from collections.abc import Callable
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)

FOCUS_REPORTING_ON = "\x1b[?1004h"
FOCUS_REPORTING_OFF = "\x1b[?1004l"


class FullscreenController(Protocol):
    def enter(self) -> None: ...

    def exit(self) -> None: ...


class VisibilityObserver(Protocol):
    def subscribe(self, callback: Callable[[bool], None]) -> None: ...

    def unsubscribe(self, callback: Callable[[bool], None]) -> None: ...


class UnloadGuard(Protocol):
    def register(self, predicate: Callable[[], bool]) -> None: ...

    def clear(self) -> None: ...


def best_effort(action: Callable[[], None], what: str) -> None:
    """Run *action*; log and swallow any failure."""
    try:
        action()
    except Exception as e:
        logger.warning("%s failed: %s", what, e)


class AltScreenController:
    """Switches the console to and from the alternate screen."""

    def __init__(self, console: Console):
        self.console = console
        self.active = False

    def enter(self) -> None:
        if not self.active:
            self.active = self.console.set_alt_screen(True)

    def exit(self) -> None:
        if self.active:
            self.console.set_alt_screen(False)
            self.active = False


class NullFullscreenController:
    def enter(self) -> None:
        pass

    def exit(self) -> None:
        pass


class TerminalFocusObserver:
    """Visibility signal from xterm focus reporting.

    Focus reporting is switched on while anyone is subscribed. The keyboard
    handler decodes the ``ESC [ I`` / ``ESC [ O`` reports and the run loop
    forwards them through :meth:`notify`.
    """

    def __init__(self, console: Console):
        self.console = console
        self._callbacks: list[Callable[[bool], None]] = []

    def subscribe(self, callback: Callable[[bool], None]) -> None:
        if callback in self._callbacks:
            return
        self._callbacks.append(callback)
        if len(self._callbacks) == 1:
            self._write(FOCUS_REPORTING_ON)

    def unsubscribe(self, callback: Callable[[bool], None]) -> None:
        if callback not in self._callbacks:
            return
        self._callbacks.remove(callback)
        if not self._callbacks:
            self._write(FOCUS_REPORTING_OFF)

    def notify(self, visible: bool) -> None:
        for callback in list(self._callbacks):
            callback(visible)

    def _write(self, sequence: str) -> None:
        if self.console.is_terminal:
            self.console.file.write(sequence)
            self.console.file.flush()


class SigintGuard:
    """Turns Ctrl-C into an exit request while the predicate holds.

    With no predicate, or when it returns False, Ctrl-C raises
    ``KeyboardInterrupt`` as usual. Otherwise the interrupt is recorded and
    the run loop asks the user to confirm via :meth:`consume_request`.
    """

    def __init__(self):
        self._predicate: Callable[[], bool] | None = None
        self._previous = None
        self._requested = False

    def register(self, predicate: Callable[[], bool]) -> None:
        self._predicate = predicate
        if self._previous is None:
            self._previous = signal.signal(signal.SIGINT, self._handle)

    def clear(self) -> None:
        self._predicate = None
        self._requested = False
        if self._previous is not None:
            signal.signal(signal.SIGINT, self._previous)
            self._previous = None

    def should_confirm(self) -> bool:
        return self._predicate is not None and self._predicate()

    def consume_request(self) -> bool:
        requested, self._requested = self._requested, False
        return requested

    def _handle(self, signum, frame):
        if self.should_confirm():
            self._requested = True
            return
        raise KeyboardInterrupt
