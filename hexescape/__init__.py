"""Hexagonal-grid puzzle game: reach the goal past conveyors and growing walls."""

__version__ = "0.1.0"