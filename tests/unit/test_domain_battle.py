"""Unit tests for attack resolution."""

from __future__ import annotations

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conquest.domain import battle
from conquest.domain import models as dm
from conquest.domain.enums import AttackOutcome, EmptyReason
from conquest.domain.rules_config import BattleRules, RulesConfig


def _pair(attacker_troops: int, defender_troops: int) -> tuple[dm.Territory, dm.Territory]:
    return (
        dm.Territory("Cerrado", "Azul", attacker_troops),
        dm.Territory("Pantanal", "Vermelho", defender_troops),
    )


def _fixed(attack: int, defense: int) -> battle.BattleOptions:
    return battle.BattleOptions(attack_roll=attack, defense_roll=defense)


def test_lone_attacker_conquers_and_leaves_origin_empty():
    attacker, defender = _pair(1, 1)
    result = battle.resolve_attack(
        attacker, defender, "Azul", random.Random(0), options=_fixed(6, 1)
    )
    assert result.outcome is AttackOutcome.CONQUEST
    assert result.conquered
    assert defender.faction == "Azul"
    assert defender.troops == 1
    assert attacker.troops == 0
    assert result.troop_moved is False
    assert result.defender_faction == "Vermelho"


def test_conquest_moves_one_troop():
    attacker, defender = _pair(4, 1)
    result = battle.resolve_attack(
        attacker, defender, "Azul", random.Random(0), options=_fixed(5, 2)
    )
    assert result.outcome is AttackOutcome.CONQUEST
    assert attacker.troops == 3
    assert defender.troops == 1
    assert defender.faction == "Azul"
    assert result.troop_moved is True
    assert (result.attacker_troops, result.defender_troops) == (3, 1)


def test_tie_goes_to_attacker():
    attacker, defender = _pair(3, 3)
    result = battle.resolve_attack(
        attacker, defender, "Azul", random.Random(0), options=_fixed(4, 4)
    )
    assert result.outcome is AttackOutcome.EXCHANGE_WON
    assert defender.troops == 2
    assert attacker.troops == 3
    assert defender.faction == "Vermelho"


def test_defender_holds_on_higher_roll():
    attacker, defender = _pair(3, 3)
    result = battle.resolve_attack(
        attacker, defender, "Azul", random.Random(0), options=_fixed(2, 5)
    )
    assert result.outcome is AttackOutcome.EXCHANGE_LOST
    assert (attacker.troops, defender.troops) == (3, 3)
    assert (result.attack_roll, result.defense_roll) == (2, 5)


@pytest.mark.parametrize(
    ("attacker_troops", "defender_troops", "reason"),
    [
        (0, 3, EmptyReason.ATTACKER_EMPTY),
        (0, 0, EmptyReason.ATTACKER_EMPTY),
        (2, 0, EmptyReason.DEFENDER_EMPTY),
    ],
)
def test_empty_territory_is_a_no_op(scripted_rng, attacker_troops, defender_troops, reason):
    attacker, defender = _pair(attacker_troops, defender_troops)
    rng = scripted_rng([])
    result = battle.resolve_attack(attacker, defender, "Azul", rng)
    assert result.outcome is AttackOutcome.NO_OP
    assert result.reason is reason
    assert result.attack_roll is None
    assert rng.calls == []
    assert (attacker.troops, defender.troops) == (attacker_troops, defender_troops)


def test_rolls_attack_then_defense(scripted_rng):
    attacker, defender = _pair(2, 2)
    rng = scripted_rng([3, 5])
    result = battle.resolve_attack(attacker, defender, "Azul", rng)
    assert rng.calls == [(1, 6), (1, 6)]
    assert (result.attack_roll, result.defense_roll) == (3, 5)
    assert result.outcome is AttackOutcome.EXCHANGE_LOST


def test_die_size_follows_rules(scripted_rng):
    attacker, defender = _pair(2, 2)
    rng = scripted_rng([20, 1])
    rules = RulesConfig(battle=BattleRules(die_sides=20))
    battle.resolve_attack(attacker, defender, "Azul", rng, rules=rules)
    assert rng.calls == [(1, 20), (1, 20)]


def test_fixed_roll_skips_draw(scripted_rng):
    attacker, defender = _pair(2, 2)
    rng = scripted_rng([1])
    result = battle.resolve_attack(
        attacker, defender, "Azul", rng, options=battle.BattleOptions(attack_roll=6)
    )
    assert len(rng.calls) == 1
    assert result.outcome is AttackOutcome.EXCHANGE_WON


@given(
    attacker_troops=st.integers(min_value=0, max_value=10),
    defender_troops=st.integers(min_value=0, max_value=10),
    attack_roll=st.integers(min_value=1, max_value=6),
    defense_roll=st.integers(min_value=1, max_value=6),
)
def test_troops_never_negative(attacker_troops, defender_troops, attack_roll, defense_roll):
    attacker, defender = _pair(attacker_troops, defender_troops)
    result = battle.resolve_attack(
        attacker,
        defender,
        "Azul",
        random.Random(0),
        options=_fixed(attack_roll, defense_roll),
    )
    assert attacker.troops >= 0
    assert defender.troops >= 0
    if result.conquered:
        assert defender.faction == "Azul"
        assert defender.troops == 1
        assert attacker.troops == max(0, attacker_troops - 1)


@given(seed=st.integers(min_value=0, max_value=2**32))
def test_repeated_attacks_keep_invariants(seed):
    rng = random.Random(seed)
    attacker, defender = _pair(6, 3)
    for _ in range(20):
        battle.resolve_attack(attacker, defender, "Azul", rng)
        assert attacker.troops >= 0
        assert defender.troops >= 0


def test_result_records_troops_going_into_the_exchange():
    attacker, defender = _pair(1, 1)
    result = battle.resolve_attack(
        attacker, defender, "Azul", random.Random(0), options=_fixed(6, 1)
    )
    assert (result.attacker_troops_before, result.defender_troops_before) == (1, 1)
    assert (result.attacker_troops, result.defender_troops) == (0, 1)


def test_no_op_before_counts_match_board(scripted_rng):
    attacker, defender = _pair(0, 4)
    result = battle.resolve_attack(attacker, defender, "Azul", scripted_rng([]))
    assert (result.attacker_troops_before, result.defender_troops_before) == (0, 4)
