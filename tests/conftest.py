"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem and
terminal, plus fakes for the host-environment collaborators.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from aura_session.models.focus.cues import CueKind


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config and log directories at *tmp_path* for every test.

    Also clears the cached ConfigService, the logger singleton and the
    session tag.
    """
    import aura_session.utils.logger as logger_mod
    from aura_session.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    app_logger = logging.getLogger("aura_session")
    get_config_service.cache_clear()
    logger_mod._logger = None
    logger_mod.set_session_tag(None)
    _drop_handlers(app_logger)
    with patch("aura_session.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("aura_session.utils.logger.user_log_dir", return_value=tmpdir):
            yield tmp_path
    get_config_service.cache_clear()
    logger_mod._logger = None
    logger_mod.set_session_tag(None)
    _drop_handlers(app_logger)


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingCueEmitter:
    """Keeps every cue it was asked to play, in order."""

    def __init__(self):
        self.played: list[CueKind] = []

    def play(self, kind: CueKind) -> None:
        self.played.append(kind)


class FailingCueEmitter:
    def play(self, kind: CueKind) -> None:
        raise RuntimeError("audio blocked")


class FakeFullscreen:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.entered = 0
        self.exited = 0

    def enter(self) -> None:
        self.entered += 1
        if self.fail:
            raise PermissionError("fullscreen denied")

    def exit(self) -> None:
        self.exited += 1
        if self.fail:
            raise PermissionError("fullscreen denied")


class FakeVisibility:
    def __init__(self):
        self.callbacks = []

    def subscribe(self, callback) -> None:
        self.callbacks.append(callback)

    def unsubscribe(self, callback) -> None:
        self.callbacks.remove(callback)

    def fire(self, visible: bool) -> None:
        for callback in list(self.callbacks):
            callback(visible)


class FakeUnloadGuard:
    def __init__(self):
        self.predicate = None

    def register(self, predicate) -> None:
        self.predicate = predicate

    def clear(self) -> None:
        self.predicate = None


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cues() -> RecordingCueEmitter:
    return RecordingCueEmitter()


@pytest.fixture()
def fullscreen() -> FakeFullscreen:
    return FakeFullscreen()


@pytest.fixture()
def visibility() -> FakeVisibility:
    return FakeVisibility()


@pytest.fixture()
def unload_guard() -> FakeUnloadGuard:
    return FakeUnloadGuard()


@pytest.fixture()
def failing_cues() -> FailingCueEmitter:
    return FailingCueEmitter()


@pytest.fixture()
def failing_fullscreen() -> FakeFullscreen:
    return FakeFullscreen(fail=True)
