"""Command 'session' of aura-session: the interactive lock-in screen."""

import typer

from aura_session.commands.decorators import command_wrapper
from aura_session.models.focus.cues import BellCueEmitter, NullCueEmitter
from aura_session.models.focus.host import (
    AltScreenController,
    NullFullscreenController,
    SigintGuard,
    TerminalFocusObserver,
)
from aura_session.models.focus.store import Reset, SessionParams, SessionStore, SetParam
from aura_session.models.focus.ui import SessionDisplay, show_summary
from aura_session.services.config_service import get_config_service
from aura_session.utils.exit_codes import (
    SESSION_ABANDONED,
    get_exit_code_description,
    get_exit_code_name,
)
from aura_session.utils.logger import new_session_tag, set_session_tag
from aura_session.utils.ui.console import get_console

console = get_console()


@command_wrapper
def session(
    duration: int | None = typer.Option(
        None, "--duration", "-d", help="Total session length in minutes (45-120)"
    ),
    sprints: int | None = typer.Option(
        None, "--sprints", "-n", help="Number of focus sprints (2-5)"
    ),
    seed: str | None = typer.Option(None, "--seed", help="Seed color or mood id"),
    energy: int | None = typer.Option(None, "--energy", help="Energy level (1-5)"),
    ambience: int | None = typer.Option(None, "--ambience", help="Ambience level (1-5)"),
    intention: str = typer.Option("", "--intention", "-i", help="The one thing that matters"),
    outcome: str = typer.Option("", "--outcome", help="What you want when it ends"),
    constraint: str = typer.Option("", "--constraint", help="The distraction to shut out"),
    fullscreen: bool | None = typer.Option(
        None, "--fullscreen/--no-fullscreen", help="Use the alternate screen"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No terminal bells"),
) -> None:
    """Plan, commit to and run a focus session."""
    config = get_config_service().config
    use_fullscreen = config.behavior.fullscreen if fullscreen is None else fullscreen
    focus_observer = TerminalFocusObserver(console)
    exit_guard = SigintGuard()

    store = SessionStore(
        SessionParams.from_defaults(config.defaults),
        cues=NullCueEmitter() if quiet or not config.behavior.sound else BellCueEmitter(console),
        fullscreen=(
            AltScreenController(console) if use_fullscreen else NullFullscreenController()
        ),
        visibility=focus_observer,
        unload_guard=exit_guard,
    )

    overrides = {
        "duration": duration,
        "sprints": sprints,
        "seed": seed,
        "energy": energy,
        "ambience": ambience,
        "intention": intention or None,
        "outcome": outcome or None,
        "constraint": constraint or None,
    }
    for name, value in overrides.items():
        if value is not None:
            store.dispatch(SetParam(name, value))

    display = SessionDisplay(console)
    set_session_tag(new_session_tag())
    try:
        result = display.run_session(
            store, focus_observer=focus_observer, exit_guard=exit_guard
        )
        snapshot = store.snapshot()
    finally:
        store.dispatch(Reset())
        set_session_tag(None)

    show_summary(snapshot, result, console)

    if result in ("abandoned", "interrupted"):
        console.print(
            f"[aura.muted]exit {SESSION_ABANDONED} "
            f"({get_exit_code_name(SESSION_ABANDONED)}): "
            f"{get_exit_code_description(SESSION_ABANDONED)}[/aura.muted]"
        )
        raise typer.Exit(code=SESSION_ABANDONED)
