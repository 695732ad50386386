"""Aura Session - terminal focus-session companion."""

__version__ = "0.3.0"
