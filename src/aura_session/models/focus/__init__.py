"""Focus session core: planning, palettes, the phase scheduler and lock-in."""

from .commit import COMMIT_SECONDS, CommitFlow, CommitState
from .cues import CueKind
from .leave import LeaveMonitor, LeaveStats
from .palette import MOODS, Palette, build_palette
from .planner import SessionPlan, build_plan
from .scheduler import PhaseScheduler, SessionState
from .store import (
    CancelCommit,
    Commit,
    ParameterError,
    Pause,
    Reset,
    Resume,
    SessionParams,
    SessionStore,
    SetParam,
    Start,
    StoreSnapshot,
)
from .ticker import Ticker

__all__ = [
    "COMMIT_SECONDS",
    "CommitFlow",
    "CommitState",
    "CueKind",
    "LeaveMonitor",
    "LeaveStats",
    "MOODS",
    "Palette",
    "build_palette",
    "SessionPlan",
    "build_plan",
    "PhaseScheduler",
    "SessionState",
    "CancelCommit",
    "Commit",
    "ParameterError",
    "Pause",
    "Reset",
    "Resume",
    "SessionParams",
    "SessionStore",
    "SetParam",
    "Start",
    "StoreSnapshot",
    "Ticker",
]
