"""Mood palettes derived from a single seed color.

Colors are handled in OkLCh so the five tones step evenly in perceived
lightness while keeping the seed's hue.
"""

import logging
import math
from dataclasses import dataclass

from coloraide import Color

from aura_session.models.config_models import DEFAULT_SEED

logger = logging.getLogger(__name__)

TONE_LIGHTNESS = (0.92, 0.82, 0.72, 0.60, 0.48)
ACCENT_HUE_SHIFT = 22
ACCENT_LIGHTNESS = 0.62
INK_LIGHTNESS = 0.22
FALLBACK_HUE = 270.0
FIT_METHOD = "oklch-chroma"


@dataclass(frozen=True)
class Palette:
    """Five tones (light to dark) plus an accent and an ink color."""

    tones: tuple[str, str, str, str, str]
    accent: str
    ink: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"tones": list(self.tones), "accent": self.accent, "ink": self.ink}


@dataclass(frozen=True)
class Mood:
    """A named seed color preset."""

    id: str
    label: str
    hint: str
    seed: str


MOODS = (
    Mood("clarity", "Clarity", "Clear and calm flow", "#8AA3FF"),
    Mood("depth", "Depth", "Slow, weighty focus", "#5166B3"),
    Mood("warm", "Warmth", "Soft energy", "#F49C6B"),
    Mood("fresh", "Fresh", "Light, cool rhythm", "#7FC8A9"),
)


def get_mood(mood_id: str) -> Mood | None:
    """Get a mood preset by id (case-insensitive)."""
    for mood in MOODS:
        if mood.id == mood_id.lower():
            return mood
    return None


def resolve_seed(value: str) -> str:
    """Map a mood id to its seed color; anything else is returned as-is."""
    mood = get_mood(value)
    return mood.seed if mood else value


def _parse_seed(seed: str) -> Color:
    try:
        return Color(seed).convert("oklch")
    except (ValueError, TypeError):
        logger.debug("Unparseable seed %r, using %s", seed, DEFAULT_SEED)
        return Color(DEFAULT_SEED).convert("oklch")


def _to_hex(lightness: float, chroma: float, hue: float) -> str:
    color = Color("oklch", [lightness, chroma, hue])
    return color.fit("srgb", method=FIT_METHOD).convert("srgb").to_string(hex=True)


def build_palette(seed: str) -> Palette:
    """Derive a palette from *seed*.

    Unparseable seeds fall back to ``DEFAULT_SEED``; this never raises.
    """
    base = _parse_seed(seed)
    chroma = base["chroma"]
    hue = base["hue"]
    if math.isnan(chroma):
        chroma = 0.0
    if math.isnan(hue):
        hue = FALLBACK_HUE

    tones = tuple(
        _to_hex(lightness, chroma * (0.9 + index * 0.12), hue)
        for index, lightness in enumerate(TONE_LIGHTNESS)
    )
    accent = _to_hex(ACCENT_LIGHTNESS, chroma * 1.4, (hue + ACCENT_HUE_SHIFT) % 360)
    ink = _to_hex(INK_LIGHTNESS, chroma * 0.5, hue)

    return Palette(tones=tones, accent=accent, ink=ink)
