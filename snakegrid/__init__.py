"""Immutable snake game logic for one or many players, with a text renderer and terminal helpers."""

__version__ = "0.0.1"
__all__ = ["model", "single", "multi", "render", "terminal"]