"""Secret mission drawing."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from conquest.domain.enums import MissionKind
from conquest.domain.errors import MissionError
from conquest.domain.models import CONQUER_TARGET_SENTINEL, Mission
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.domain.seed_data import DEFAULT_FACTIONS
from conquest.interfaces.rng import IRandomSource
from conquest.utils.rng import random_choice

logger = logging.getLogger(__name__)

MISSION_KINDS = [MissionKind.DESTROY_FACTION, MissionKind.CONQUER_COUNT]


def generate_mission(
    player_faction: str,
    rng: IRandomSource,
    *,
    factions: Sequence[str] = DEFAULT_FACTIONS,
    rules: RulesConfig = DEFAULT_RULES,
) -> Mission:
    """Deal the player's mission.

    The kind is drawn uniformly. Destroy missions target a faction other than
    ``player_faction``: up to ``rules.missions.target_retries`` uniform draws
    are made, then the first non-player faction in ``factions`` is taken.

    Raises:
        MissionError: If a destroy mission is drawn and every faction is the
            player's own
    """

    kind = random_choice(rng, MISSION_KINDS)["choice"]
    if kind is MissionKind.CONQUER_COUNT:
        count = rules.missions.conquer_count
        mission = Mission(
            kind=kind,
            target=CONQUER_TARGET_SENTINEL,
            description=f"Conquer {count} territories",
        )
    else:
        target = _draw_target(player_faction, rng, factions, rules)
        mission = Mission(kind=kind, target=target, description=f"Destroy the {target} army")

    logger.debug("mission drawn for %s: %s (%s)", player_faction, mission.kind, mission.target)
    return mission


def _draw_target(
    player_faction: str,
    rng: IRandomSource,
    factions: Sequence[str],
    rules: RulesConfig,
) -> str:
    options = list(factions)
    if not options:
        raise MissionError("no factions to draw a mission target from")

    for _ in range(rules.missions.target_retries):
        candidate = random_choice(rng, options)["choice"]
        if candidate != player_faction:
            return candidate

    logger.warning(
        "target draw hit %s %d times in a row; falling back to the first other faction",
        player_faction,
        rules.missions.target_retries,
    )
    for candidate in options:
        if candidate != player_faction:
            return candidate
    raise MissionError(f"every faction is {player_faction}; no army left to destroy")
