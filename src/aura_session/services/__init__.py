"""Service layer for Aura Session."""
