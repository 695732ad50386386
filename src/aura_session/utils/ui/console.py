"""Console utilities for Aura Session.

The shared console carries an ``aura.*`` theme. Message styles are fixed;
the accent and tone styles follow a mood palette, so command output is
tinted the same way as the session screen.
"""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

from aura_session.models.config_models import DEFAULT_SEED
from aura_session.models.focus.palette import Palette, build_palette

MESSAGE_STYLES = {
    "aura.error": "bold red",
    "aura.success": "bold green",
    "aura.warning": "bold yellow",
    "aura.muted": "dim",
}


def session_theme(palette: Palette | None = None) -> Theme:
    """Build the ``aura.*`` theme for *palette* (the default mood if None)."""
    palette = palette or build_palette(DEFAULT_SEED)
    styles = dict(MESSAGE_STYLES)
    styles["aura.accent"] = f"bold {palette.accent}"
    styles["aura.tone"] = palette.tones[2]
    styles["aura.heading"] = f"bold {palette.tones[1]}"
    return Theme(styles)


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console with the default ``aura.*`` theme."""
    return Console(highlight=highlight, theme=session_theme())
