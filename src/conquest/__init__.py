"""Conquest: a turn-based territory conquest console game."""

__version__ = "0.1.0"
