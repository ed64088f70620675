"""Attack resolution rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from conquest.domain.enums import AttackOutcome, EmptyReason
from conquest.domain.models import Territory
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.interfaces.rng import IRandomSource
from conquest.utils.rng import roll

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleOptions:
    """Configuration for resolving an attack.

    A fixed roll replaces the corresponding die draw entirely.
    """

    attack_roll: int | None = None
    defense_roll: int | None = None


@dataclass(slots=True)
class AttackResult:
    """Summary of one resolved attack exchange."""

    outcome: AttackOutcome
    attacker_name: str
    defender_name: str
    attacker_faction: str
    defender_faction: str
    attacker_troops: int
    defender_troops: int
    attacker_troops_before: int
    defender_troops_before: int
    attack_roll: int | None = None
    defense_roll: int | None = None
    reason: EmptyReason | None = None
    troop_moved: bool = False

    @property
    def conquered(self) -> bool:
        return self.outcome is AttackOutcome.CONQUEST


def resolve_attack(
    attacker: Territory,
    defender: Territory,
    player_faction: str,
    rng: IRandomSource,
    *,
    options: BattleOptions | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> AttackResult:
    """Resolve a single exchange between two territories.

    One attack die and one defense die are rolled; ties go to the attacker.
    A winning attacker removes one defending troop, and a defender left with
    no troops changes hands. ``defender_faction`` on the result is the owner
    before the exchange, and the ``*_troops_before`` fields hold the counts
    going into it.
    """

    options = options or BattleOptions()
    previous_owner = defender.faction
    troops_before = {
        "attacker_troops_before": attacker.troops,
        "defender_troops_before": defender.troops,
    }

    reason = _empty_reason(attacker, defender)
    if reason is not None:
        logger.debug("attack %s -> %s refused: %s", attacker.name, defender.name, reason)
        return _result(
            AttackOutcome.NO_OP, attacker, defender, previous_owner, reason=reason, **troops_before
        )

    attack_roll = _roll(rng, options.attack_roll, rules)
    defense_roll = _roll(rng, options.defense_roll, rules)

    troop_moved = False
    if attack_roll >= defense_roll:
        defender.troops -= 1
        if defender.troops <= 0:
            troop_moved = _conquer(attacker, defender)
            outcome = AttackOutcome.CONQUEST
        else:
            outcome = AttackOutcome.EXCHANGE_WON
    else:
        outcome = AttackOutcome.EXCHANGE_LOST

    logger.debug(
        "%s (%s) attacked %s (%s): %d vs %d -> %s%s",
        attacker.name,
        attacker.faction,
        defender.name,
        previous_owner,
        attack_roll,
        defense_roll,
        outcome,
        " [player]" if player_faction in (attacker.faction, previous_owner) else "",
    )
    return _result(
        outcome,
        attacker,
        defender,
        previous_owner,
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        troop_moved=troop_moved,
        **troops_before,
    )


def _empty_reason(attacker: Territory, defender: Territory) -> EmptyReason | None:
    if attacker.troops <= 0:
        return EmptyReason.ATTACKER_EMPTY
    if defender.troops <= 0:
        return EmptyReason.DEFENDER_EMPTY
    return None


def _roll(rng: IRandomSource, fixed: int | None, rules: RulesConfig) -> int:
    if fixed is not None:
        return fixed
    return roll(rng, 1, rules.battle.die_sides)[0]


def _conquer(attacker: Territory, defender: Territory) -> bool:
    """Hand the defender to the attacker and occupy it with one troop.

    Returns whether a troop left the attacking territory. A lone attacking
    troop still occupies the conquest, leaving its origin at zero.
    """

    defender.faction = attacker.faction
    defender.troops = 1
    if attacker.troops > 1:
        attacker.troops -= 1
        return True
    attacker.troops = 0
    return False


def _result(
    outcome: AttackOutcome,
    attacker: Territory,
    defender: Territory,
    previous_owner: str,
    **details: object,
) -> AttackResult:
    return AttackResult(
        outcome=outcome,
        attacker_name=attacker.name,
        defender_name=defender.name,
        attacker_faction=attacker.faction,
        defender_faction=previous_owner,
        attacker_troops=attacker.troops,
        defender_troops=defender.troops,
        **details,
    )
