"""Declarative rule configuration for the Conquest domain layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Dice used for a single attack exchange."""

    die_sides: int = 6


@dataclass(frozen=True, slots=True)
class MissionRules:
    """Mission drawing and completion constants."""

    target_retries: int = 10
    conquer_count: int = 3


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    battle: BattleRules = BattleRules()
    missions: MissionRules = MissionRules()


DEFAULT_RULES = RulesConfig()
