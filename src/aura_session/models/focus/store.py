"""SessionStore: the single owner of all session-local state.

The renderer never mutates components directly. It sends typed commands to
:meth:`SessionStore.dispatch`, reads :class:`StoreSnapshot` objects and
subscribes to change notifications.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, fields, replace

from aura_session.models.config_models import (
    DEFAULT_SEED,
    DURATION_RANGE,
    LEVEL_RANGE,
    SPRINT_RANGE,
    SessionDefaults,
)

from .commit import CommitFlow, CommitState
from .cues import AudioCueEmitter
from .host import FullscreenController, UnloadGuard, VisibilityObserver, best_effort
from .leave import LeaveMonitor, LeaveStats
from .palette import Palette, build_palette, resolve_seed
from .planner import SessionPlan, build_plan
from .scheduler import PhaseScheduler, SessionState
from .ticker import Ticker

logger = logging.getLogger(__name__)

_INT_BOUNDS = {
    "duration": DURATION_RANGE,
    "sprints": SPRINT_RANGE,
    "energy": LEVEL_RANGE,
    "ambience": LEVEL_RANGE,
}
_TEXT_PARAMS = ("intention", "outcome", "constraint")
_PLAN_PARAMS = ("duration", "sprints")


class ParameterError(ValueError):
    """A SetParam command named an unknown parameter or an invalid value."""


@dataclass(frozen=True)
class SessionParams:
    """User-adjustable inputs. Energy and ambience are cosmetic."""

    seed: str = DEFAULT_SEED
    duration: int = 70
    sprints: int = 3
    energy: int = 3
    ambience: int = 4
    intention: str = ""
    outcome: str = ""
    constraint: str = ""

    @classmethod
    def from_defaults(cls, defaults: SessionDefaults) -> SessionParams:
        return cls(
            seed=resolve_seed(defaults.seed),
            duration=defaults.duration,
            sprints=defaults.sprints,
            energy=defaults.energy,
            ambience=defaults.ambience,
        )


# Commands


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Resume:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class CancelCommit:
    pass


@dataclass(frozen=True)
class SetParam:
    name: str
    value: object


Command = Start | Pause | Resume | Reset | Commit | CancelCommit | SetParam


@dataclass(frozen=True)
class StoreSnapshot:
    """Everything the renderer may read, frozen at one instant."""

    params: SessionParams
    plan: SessionPlan
    palette: Palette
    session: SessionState
    commit: CommitState
    leave: LeaveStats
    locked_in: bool


def validate_param(name: str, value: object) -> object:
    """Return the normalised value for *name* or raise ParameterError."""
    if name in _INT_BOUNDS:
        low, high = _INT_BOUNDS[name]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParameterError(f"{name} must be an integer, got {value!r}")
        if not low <= value <= high:
            raise ParameterError(f"{name} must be between {low} and {high}, got {value}")
        return value
    if name == "seed":
        if not isinstance(value, str) or not value.strip():
            raise ParameterError("seed must be a color or mood name")
        return resolve_seed(value.strip())
    if name in _TEXT_PARAMS:
        if not isinstance(value, str):
            raise ParameterError(f"{name} must be text")
        return value.strip()
    raise ParameterError(f"Unknown parameter '{name}'")


class SessionStore:
    """Owns the planner inputs, the scheduler, the commit flow and the leave monitor."""

    def __init__(
        self,
        params: SessionParams | None = None,
        *,
        cues: AudioCueEmitter | None = None,
        fullscreen: FullscreenController | None = None,
        visibility: VisibilityObserver | None = None,
        unload_guard: UnloadGuard | None = None,
        clock: Callable[[], float] = time.monotonic,
        on_complete: Callable[[], None] | None = None,
    ):
        params = params or SessionParams()
        params = replace(
            params,
            **{
                field.name: validate_param(field.name, getattr(params, field.name))
                for field in fields(SessionParams)
            },
        )

        self._params = params
        self._plan = build_plan(params.duration, params.sprints)
        self._palette = build_palette(params.seed)
        self._fullscreen = fullscreen
        self._listeners: list[Callable[[StoreSnapshot], None]] = []

        self.scheduler = PhaseScheduler(
            self._plan,
            ticker=Ticker("session", clock=clock),
            cues=cues,
            on_complete=on_complete,
        )
        self.commit_flow = CommitFlow(
            self.scheduler,
            ticker=Ticker("commit", clock=clock),
            fullscreen=fullscreen,
        )
        self.leave_monitor = LeaveMonitor(
            self.scheduler,
            visibility=visibility,
            unload_guard=unload_guard,
            cues=cues,
        )

        self._handlers = {
            Start: self._start,
            Pause: self._pause,
            Resume: self._resume,
            Reset: self._reset,
            Commit: self._commit,
            CancelCommit: self._cancel_commit,
            SetParam: self._set_param,
        }

    @property
    def params(self) -> SessionParams:
        return self._params

    @property
    def plan(self) -> SessionPlan:
        return self._plan

    @property
    def palette(self) -> Palette:
        return self._palette

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            params=self._params,
            plan=self._plan,
            palette=self._palette,
            session=self.scheduler.state,
            commit=self.commit_flow.state,
            leave=self.leave_monitor.stats,
            locked_in=self.leave_monitor.locked_in,
        )

    def subscribe(self, listener: Callable[[StoreSnapshot], None]) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[StoreSnapshot], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, command: Command) -> StoreSnapshot:
        """Apply one command and notify subscribers.

        Raises:
            ParameterError: If a SetParam command is invalid.
            TypeError: If *command* is not a known command type.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unknown command: {command!r}")
        logger.debug("Dispatch %s", command)
        handler(command)
        return self._notify()

    def poll(self) -> int:
        """Fire any due ticks on both tick sources."""
        fired = self.commit_flow.ticker.poll() + self.scheduler.ticker.poll()
        if fired:
            self._notify()
        return fired

    def _notify(self) -> StoreSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def _start(self, command: Start) -> None:
        if self.scheduler.state.is_active:
            logger.debug("Start ignored while a session is running")
            return
        self._begin()

    def _pause(self, command: Pause) -> None:
        self.scheduler.pause()

    def _resume(self, command: Resume) -> None:
        if not self.scheduler.state.is_active:
            self._begin()
            return
        self.scheduler.resume()

    def _begin(self) -> None:
        # A direct start takes over a pending countdown and its fullscreen.
        self.commit_flow.supersede()
        self.leave_monitor.release()
        self.leave_monitor.lock_in()
        self.scheduler.start()

    def _reset(self, command: Reset) -> None:
        self.commit_flow.cancel()
        self.scheduler.reset()
        self._release()

    def _commit(self, command: Commit) -> None:
        if self.scheduler.state.is_active:
            logger.debug("Commit ignored while a session is running")
            return
        self.scheduler.reset()
        self.leave_monitor.release()
        self.leave_monitor.lock_in()
        self.commit_flow.commit()

    def _cancel_commit(self, command: CancelCommit) -> None:
        if not self.commit_flow.state.is_counting:
            return
        self.commit_flow.cancel()
        self.leave_monitor.release()

    def _set_param(self, command: SetParam) -> None:
        value = validate_param(command.name, command.value)
        if getattr(self._params, command.name) == value:
            return
        self._params = replace(self._params, **{command.name: value})

        if self.commit_flow.state.is_counting:
            logger.info("%s changed during commit countdown, countdown cancelled", command.name)
            self.commit_flow.cancel()
            self._release()

        if command.name == "seed":
            self._palette = build_palette(value)
        elif command.name in _PLAN_PARAMS:
            self._replan()

    def _replan(self) -> None:
        self._plan = build_plan(self._params.duration, self._params.sprints)
        if self.scheduler.set_plan(self._plan, force_reset=True):
            logger.info("Plan changed mid-session, session invalidated")
            self._release()

    def _release(self) -> None:
        self.leave_monitor.release()
        if self._fullscreen is not None:
            best_effort(self._fullscreen.exit, "Leaving fullscreen")
