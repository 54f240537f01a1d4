from __future__ import annotations


class ConfigError(ValueError):
    """Invalid grid dimensions, palette or engine constants."""


class NoSuchSlot(KeyError):
    """A slot key that was never created by the grid was accessed."""


class NoLandingSlot(RuntimeError):
    """A bullet collided with a bubble that has no empty neighbor left."""
