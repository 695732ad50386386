"""Main entry point for the Aura Session CLI."""

import typer

from aura_session import __version__
from aura_session.commands import config
from aura_session.commands.palette_command import moods, palette
from aura_session.commands.plan_command import plan
from aura_session.commands.session_command import session
from aura_session.utils.logger import get_logger
from aura_session.utils.typer_helpers import SuggestingGroup
from aura_session.utils.ui.console import get_console

app = typer.Typer(
    name="aura",
    cls=SuggestingGroup,
    help="Plan a focus session, pick its mood and lock in until it is done",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main() -> None:
    """Aura Session: sprint planning, mood palettes and lock-in mode."""
    get_logger()


app.add_typer(config.app, name="config", help="Configuration management")

app.command("session")(session)
app.command("plan")(plan)
app.command("palette")(palette)
app.command("moods")(moods)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Aura Session[/bold] version [aura.accent]{__version__}[/aura.accent]")


if __name__ == "__main__":
    app()
