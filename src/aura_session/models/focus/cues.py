"""Audio cues for phase changes and leave warnings."""

import logging
from enum import Enum
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)


class CueKind(str, Enum):
    FOCUS_STARTED = "focusStarted"
    BREAK_STARTED = "breakStarted"
    LEAVE_WARNING = "leaveWarning"


class AudioCueEmitter(Protocol):
    def play(self, kind: CueKind) -> None: ...


class NullCueEmitter:
    """Emitter used when sound is disabled."""

    def play(self, kind: CueKind) -> None:
        pass


class BellCueEmitter:
    """Rings the terminal bell; a leave warning rings twice."""

    def __init__(self, console: Console):
        self.console = console

    def play(self, kind: CueKind) -> None:
        self.console.bell()
        if kind is CueKind.LEAVE_WARNING:
            self.console.bell()


def emit_cue(emitter: AudioCueEmitter | None, kind: CueKind) -> None:
    """Play *kind* on *emitter*, ignoring any failure."""
    if emitter is None:
        return
    try:
        emitter.play(kind)
    except Exception as e:
        logger.warning("Cue %s failed: %s", kind.value, e)
