"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from aura_session.models.focus.palette import get_mood
from aura_session.utils.exit_codes import ERROR_INVALID_ARGS
from aura_session.utils.ui.console import get_console

# Words people reach for when they mean one of our commands.
COMMAND_ALIASES = {
    "start": "session",
    "focus": "session",
    "timer": "session",
    "pomodoro": "session",
    "run": "session",
    "schedule": "plan",
    "colors": "palette",
    "colours": "palette",
    "theme": "palette",
    "mood": "moods",
    "settings": "config",
    "prefs": "config",
}


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Suggest what *attempted* was meant to be.

    Known aliases win, a bare mood id points at ``palette <mood>``, and
    anything else falls back to close spelling matches (at most 3).
    """
    word = attempted.lower()
    alias = COMMAND_ALIASES.get(word)
    if alias in available:
        return [alias]
    mood = get_mood(word)
    if mood is not None and "palette" in available:
        return [f"palette {mood.id}"]
    return get_close_matches(word, available, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Custom Typer group that suggests commands on typos.

    ``aura palete`` answers with "Did you mean this? aura palette", and
    ``aura start`` points at ``aura session``.
    """

    def resolve_command(self, ctx, args):
        """Override to provide command suggestions on errors."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, list(self.commands.keys()))
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[aura.error]Error:[/aura.error] unknown command "{attempted}" '
                f'for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[aura.warning]Did you mean this?[/aura.warning]")
            else:
                console.print("[aura.warning]Did you mean one of these?[/aura.warning]")
            for suggestion in suggestions:
                console.print(f"        {ctx.info_name} {suggestion}")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
