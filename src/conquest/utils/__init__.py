"""Utility functions for the Conquest game system."""

from conquest.utils.rng import (
    create_rng,
    random_choice,
    roll,
)

__all__ = [
    "create_rng",
    "random_choice",
    "roll",
]
