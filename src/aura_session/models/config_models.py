"""Configuration models for Aura Session.

Stored defaults are user preferences only. No session state is ever written
through these models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DURATION_RANGE = (45, 120)
SPRINT_RANGE = (2, 5)
LEVEL_RANGE = (1, 5)

DEFAULT_SEED = "#8AA3FF"


class SessionDefaults(BaseModel):
    """Default session parameters used when the CLI is given no options."""

    duration: int = Field(
        default=70,
        ge=DURATION_RANGE[0],
        le=DURATION_RANGE[1],
        description="Total session length in minutes",
    )
    sprints: int = Field(
        default=3,
        ge=SPRINT_RANGE[0],
        le=SPRINT_RANGE[1],
        description="Number of focus sprints",
    )
    energy: int = Field(default=3, ge=LEVEL_RANGE[0], le=LEVEL_RANGE[1])
    ambience: int = Field(default=4, ge=LEVEL_RANGE[0], le=LEVEL_RANGE[1])
    seed: str = Field(default=DEFAULT_SEED, description="Seed color or mood id")

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: str) -> str:
        """Seed may be any string, but never blank."""
        if not v or not v.strip():
            raise ValueError("seed cannot be empty")
        return v.strip()


class BehaviorConfig(BaseModel):
    """Lock-in behaviour toggles."""

    fullscreen: bool = Field(default=True, description="Use the alternate screen")
    sound: bool = Field(default=True, description="Ring the terminal bell on cues")


class AppConfig(BaseModel):
    """Main Aura Session configuration"""

    defaults: SessionDefaults = Field(default_factory=SessionDefaults)
    behavior: BehaviorConfig = Field(default_factory=BehaviorConfig)

    def get(self, key: str):
        """Look up a dotted key such as ``defaults.duration``."""
        section, _, field = key.partition(".")
        target = getattr(self, section, None)
        if not isinstance(target, BaseModel) or field not in type(target).model_fields:
            raise KeyError(key)
        return getattr(target, field)

    def set(self, key: str, value) -> AppConfig:
        """Return a new config with the dotted *key* replaced by *value*.

        The section model is re-validated, so out-of-range values raise
        ``pydantic.ValidationError``.
        """
        section, _, field = key.partition(".")
        target = getattr(self, section, None)
        if not isinstance(target, BaseModel) or field not in type(target).model_fields:
            raise KeyError(key)
        updated = type(target).model_validate({**target.model_dump(), field: value})
        return self.model_copy(update={section: updated})
