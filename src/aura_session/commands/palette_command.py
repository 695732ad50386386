"""Commands 'palette' and 'moods' of aura-session"""

import typer
from rich.table import Table
from rich.text import Text

from aura_session.commands.decorators import command_wrapper
from aura_session.models.focus.palette import MOODS, build_palette, resolve_seed
from aura_session.services.config_service import get_config_service
from aura_session.utils.ui.console import get_console
from aura_session.utils.ui.formatters import format_output

console = get_console(highlight=False)


def _swatch(color: str) -> Text:
    text = Text("      ", style=f"on {color}")
    text.append(f"  {color.upper()}")
    return text


@command_wrapper
def palette(
    seed: str | None = typer.Argument(None, help="Seed color (any CSS color) or mood id"),
    output: str = typer.Option("pretty", "--output", "-o", help="pretty, json or yaml"),
) -> None:
    """Derive the five tones, accent and ink from a seed color."""
    if seed is None:
        seed = get_config_service().config.defaults.seed
    result = build_palette(resolve_seed(seed))

    if output in ("json", "yaml"):
        format_output(result.to_dict(), output)
        return

    table = Table(title=f"Palette for {seed}", show_header=True)
    table.add_column("Role", style="dim")
    table.add_column("Color")
    for index, tone in enumerate(result.tones, start=1):
        table.add_row(f"tone {index}", _swatch(tone))
    table.add_row("accent", _swatch(result.accent))
    table.add_row("ink", _swatch(result.ink))
    console.print(table)


@command_wrapper
def moods() -> None:
    """List mood presets usable as seeds."""
    table = Table(title="Moods", show_header=True)
    table.add_column("Id", style="aura.accent")
    table.add_column("Mood", style="bold")
    table.add_column("Feel")
    table.add_column("Seed")
    for mood in MOODS:
        table.add_row(mood.id, mood.label, mood.hint, _swatch(mood.seed))
    console.print(table)
