"""Atomic chess rule engine: board, move validation, explosions, outcome."""

__version__ = "0.1.0"
