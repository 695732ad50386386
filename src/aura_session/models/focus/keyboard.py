"""Non-blocking keyboard input for the session screen.

Besides single keys, the handler decodes the xterm focus reports
(``ESC [ I`` and ``ESC [ O``) into the FOCUS_IN / FOCUS_OUT tokens.

Input is read as raw bytes straight from the file descriptor. Reading
through ``sys.stdin`` would let Python's buffer swallow the tail of an
escape sequence where ``select`` can no longer see it.
"""

import codecs
import os
import select
import sys
import termios
import tty

FOCUS_IN = "<focus-in>"
FOCUS_OUT = "<focus-out>"

_FOCUS_REPORTS = {"I": FOCUS_IN, "O": FOCUS_OUT}
_CSI = "\x1b["
_READ_SIZE = 32


class KeyboardHandler:
    """Non-blocking keyboard input handler."""

    def __init__(self, fd: int | None = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError):
            # Not a TTY (piped input, CI)
            pass

    def _fill(self) -> None:
        """Append whatever bytes are waiting on the fd to the pending buffer."""
        try:
            if select.select([self.fd], [], [], 0)[0]:
                self._pending += self._decoder.decode(os.read(self.fd, _READ_SIZE))
        except (OSError, ValueError):
            pass

    def get_key(self) -> str | None:
        """
        Get a single keypress without blocking.

        Returns the lower-cased key, a focus token, ``"\\x1b"`` for any other
        escape sequence, or None if nothing is pending.
        """
        if not self._pending:
            self._fill()
        if not self._pending:
            return None

        if self._pending.startswith("\x1b") and len(self._pending) < 3:
            self._fill()

        if self._pending.startswith(_CSI) and len(self._pending) >= 3:
            report = self._pending[2]
            self._pending = self._pending[3:]
            return _FOCUS_REPORTS.get(report, "\x1b")

        key, self._pending = self._pending[0], self._pending[1:]
        return key if key == "\x1b" else key.lower()

    def resume(self):
        """Put the terminal back into cbreak mode after :meth:`stop`."""
        self._setup()

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except (termios.error, OSError):
                pass
