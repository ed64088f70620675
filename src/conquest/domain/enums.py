"""Enumerations used across the Conquest rules layer."""

from __future__ import annotations

from enum import StrEnum


class MissionKind(StrEnum):
    """Secret mission types a player can be dealt."""

    DESTROY_FACTION = "destroy_faction"
    CONQUER_COUNT = "conquer_count"


class AttackOutcome(StrEnum):
    """What a single attack exchange did to the board."""

    NO_OP = "no_op"
    EXCHANGE_LOST = "exchange_lost"
    EXCHANGE_WON = "exchange_won"
    CONQUEST = "conquest"


class EmptyReason(StrEnum):
    """Why an attack was refused before any dice were rolled."""

    ATTACKER_EMPTY = "attacker_empty"
    DEFENDER_EMPTY = "defender_empty"
