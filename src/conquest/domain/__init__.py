"""Conquest game rules.

This package hosts every rule of the game and operates purely in memory:

* Dataclasses for territories and missions (see :mod:`models`).
* Enumerations shared across the rules layer (see :mod:`enums`).
* Rule constants (see :mod:`rules_config`).
* Pure rule functions: registry setup, mission drawing, attack resolution
  and victory checks.
"""

from . import (
    battle,
    enums,
    errors,
    missions,
    models,
    registry,
    rules_config,
    seed_data,
    victory,
)

__all__ = [
    "battle",
    "enums",
    "errors",
    "missions",
    "models",
    "registry",
    "rules_config",
    "seed_data",
    "victory",
]
