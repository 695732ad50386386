"""Aura Session models.

Pydantic configuration models live in :mod:`config_models`; the session
core lives in :mod:`aura_session.models.focus`.
"""

from .config_models import AppConfig, BehaviorConfig, SessionDefaults

__all__ = ["AppConfig", "BehaviorConfig", "SessionDefaults"]
