"""Gameplay logic for a co-operative heist shooter: state, health, HUD and world objects."""

__version__ = "0.1.0"