"""Unit tests for the 'session' command.

The interactive loop is replaced by a stub so the tests can check how the
command builds the store, applies overrides and maps outcomes to exit codes.
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import aura_session.utils.logger as logger_mod
from aura_session.main import app
from aura_session.models.focus.cues import BellCueEmitter, NullCueEmitter
from aura_session.models.focus.host import AltScreenController, NullFullscreenController
from aura_session.models.focus.scheduler import SessionState
from aura_session.models.focus.store import Start
from aura_session.services.config_service import get_config_service
from aura_session.utils.exit_codes import SESSION_ABANDONED

runner = CliRunner()

RUN_SESSION = "aura_session.commands.session_command.SessionDisplay.run_session"


class _Capture:
    """Stands in for SessionDisplay.run_session and keeps the store it was given."""

    def __init__(self, result="quit", before_return=None):
        self.result = result
        self.before_return = before_return
        self.store = None
        self.snapshot = None

    def __call__(self, display, store, **kwargs):
        self.store = store
        self.kwargs = kwargs
        if self.before_return:
            self.before_return(store)
        self.snapshot = store.snapshot()
        return self.result


def _invoke(capture, *args):
    with patch(RUN_SESSION, new=lambda display, store, **kw: capture(display, store, **kw)):
        return runner.invoke(app, ["session", *args])


class TestSessionCommand:
    def test_help(self):
        result = runner.invoke(app, ["session", "--help"])
        assert result.exit_code == 0
        assert "--intention" in result.output

    def test_uses_config_defaults(self):
        capture = _Capture()

        result = _invoke(capture)

        assert result.exit_code == 0
        params = capture.snapshot.params
        assert params.duration == 70
        assert params.sprints == 3
        assert params.seed == "#8AA3FF"

    def test_options_override_defaults(self):
        capture = _Capture()

        _invoke(
            capture,
            "-d", "90",
            "-n", "4",
            "--seed", "warm",
            "--energy", "5",
            "--intention", "  Finish the draft ",
            "--constraint", "Phone in the other room",
        )

        params = capture.snapshot.params
        assert params.duration == 90
        assert params.sprints == 4
        assert params.seed == "#F49C6B"
        assert params.energy == 5
        assert params.intention == "Finish the draft"
        assert params.constraint == "Phone in the other room"
        assert capture.snapshot.plan.sprint_minutes == 18

    def test_invalid_option_exits_2(self):
        capture = _Capture()

        result = _invoke(capture, "--sprints", "7")

        assert result.exit_code == 2
        assert capture.store is None

    def test_completed_session(self):
        capture = _Capture(result="completed")

        result = _invoke(capture, "--intention", "Ship it")

        assert result.exit_code == 0
        assert "Session complete!" in result.output
        assert "Ship it" in result.output

    @pytest.mark.parametrize("outcome", ["abandoned", "interrupted"])
    def test_abandoned_session_exit_code(self, outcome):
        capture = _Capture(result=outcome, before_return=lambda store: store.dispatch(Start()))

        result = _invoke(capture)

        assert result.exit_code == SESSION_ABANDONED
        assert f"Session ended ({outcome})" in result.output

    def test_store_reset_after_run(self):
        capture = _Capture(result="abandoned", before_return=lambda store: store.dispatch(Start()))

        _invoke(capture)

        assert capture.snapshot.session.running
        assert capture.store.snapshot().session == SessionState()
        assert not capture.store.snapshot().locked_in

    def test_collaborators_follow_flags(self):
        capture = _Capture()

        _invoke(capture, "--no-fullscreen", "--quiet")

        assert isinstance(capture.store.commit_flow._fullscreen, NullFullscreenController)
        assert isinstance(capture.store.scheduler._cues, NullCueEmitter)

    def test_collaborators_from_config(self):
        capture = _Capture()

        _invoke(capture)

        assert isinstance(capture.store.commit_flow._fullscreen, AltScreenController)
        assert isinstance(capture.store.scheduler._cues, BellCueEmitter)

    def test_sound_disabled_in_config(self):
        get_config_service().set("behavior.sound", False)
        capture = _Capture()

        _invoke(capture)

        assert isinstance(capture.store.scheduler._cues, NullCueEmitter)

    def test_observer_and_guard_passed_to_loop(self):
        capture = _Capture()

        _invoke(capture)

        assert capture.kwargs["focus_observer"] is not None
        assert capture.kwargs["exit_guard"] is not None

    def test_abandoned_session_names_exit_code(self):
        capture = _Capture(result="abandoned", before_return=lambda store: store.dispatch(Start()))

        result = _invoke(capture)

        assert "SESSION_ABANDONED" in result.output
        assert "Session was left before all sprints finished" in result.output

    def test_quit_from_ready_exits_0(self):
        capture = _Capture(result="quit")

        result = _invoke(capture)

        assert result.exit_code == 0
        assert "SESSION_ABANDONED" not in result.output

    def test_log_records_tagged_during_run(self):
        tags = []
        capture = _Capture(before_return=lambda store: tags.append(logger_mod._session_tag))

        _invoke(capture)

        assert len(tags) == 1
        assert tags[0] != "-"
        assert logger_mod._session_tag == "-"
