"""Dataclasses describing the Conquest game entities.

Factions are plain strings (the army color, e.g. ``"Verde"``) and every
relationship between entities is by value: a territory names its owner, a
mission names its target.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import MissionKind

# Target recorded for conquer-count missions, which have no faction target.
CONQUER_TARGET_SENTINEL = "3Territorios"


@dataclass(slots=True)
class Territory:
    """A map territory, its owning army and the troops stationed there."""

    name: str
    faction: str
    troops: int


@dataclass(frozen=True, slots=True)
class Mission:
    """Secret objective dealt to the player at game start."""

    kind: MissionKind
    target: str
    description: str

    @property
    def is_destroy(self) -> bool:
        return self.kind is MissionKind.DESTROY_FACTION
