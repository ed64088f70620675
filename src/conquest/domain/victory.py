"""Mission completion checks."""

from __future__ import annotations

from collections.abc import Iterable

from conquest.domain.enums import MissionKind
from conquest.domain.models import Mission, Territory
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig


def check_victory(
    territories: Iterable[Territory],
    mission: Mission,
    player_faction: str,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    """Return whether ``player_faction`` has accomplished ``mission``.

    Reads the board only; calling it repeatedly on an unchanged board gives
    the same answer.
    """

    if mission.kind is MissionKind.DESTROY_FACTION:
        return faction_destroyed(territories, mission.target)
    if mission.kind is MissionKind.CONQUER_COUNT:
        return territories_owned(territories, player_faction) >= rules.missions.conquer_count
    return False


def faction_destroyed(territories: Iterable[Territory], faction: str) -> bool:
    """A faction is destroyed once none of its territories holds troops."""

    return not any(
        territory.faction == faction and territory.troops > 0 for territory in territories
    )


def territories_owned(territories: Iterable[Territory], faction: str) -> int:
    return sum(1 for territory in territories if territory.faction == faction)
