"""Text rendering for the console game.

Every function returns a string; the session decides where it is written.
"""

from __future__ import annotations

from collections.abc import Iterable

from conquest.domain.battle import AttackResult
from conquest.domain.enums import AttackOutcome, EmptyReason
from conquest.domain.models import Mission, Territory

ANSI_RESET = "\033[0m"

FACTION_COLORS = {
    "Verde": "\033[32m",
    "Azul": "\033[34m",
    "Vermelho": "\033[31m",
    "Amarelo": "\033[33m",
    "Roxo": "\033[35m",
}

MENU_LINES = (
    "Menu:",
    "  1 - Attack",
    "  2 - Check mission",
    "  0 - Quit",
)


def faction_color(faction: str) -> str | None:
    """ANSI color code for a known army color, ``None`` otherwise."""

    return FACTION_COLORS.get(faction)


def render_map(territories: Iterable[Territory], *, use_color: bool = True) -> str:
    lines = [
        "",
        "=== Current Map ===",
        "Idx | Territory                 | Army        | Troops",
        "----+---------------------------+-------------+--------",
    ]
    for position, territory in enumerate(territories, start=1):
        army = f"{territory.faction:<11}"
        color = faction_color(territory.faction) if use_color else None
        if color:
            army = f"{color}{army}{ANSI_RESET}"
        lines.append(f"{position:>3} | {territory.name:<25} | {army} | {territory.troops:>6}")
    lines.append("")
    return "\n".join(lines)


def render_mission(mission: Mission) -> str:
    return f"=== Current Mission ===\n  Objective: {mission.description}\n"


def render_menu() -> str:
    return "\n".join(MENU_LINES)


def render_attack(result: AttackResult) -> str:
    """Narrate one attack exchange."""

    if result.outcome is AttackOutcome.NO_OP:
        if result.reason is EmptyReason.ATTACKER_EMPTY:
            return f"Attacking territory '{result.attacker_name}' does not have enough troops."
        return f"Defending territory '{result.defender_name}' is already empty."

    lines = [
        f"{result.attacker_name} (troops: {result.attacker_troops_before}, "
        f"army: {result.attacker_faction}) attacks {result.defender_name} "
        f"(troops: {result.defender_troops_before}, army: {result.defender_faction})",
        f"Roll: attacker {result.attack_roll} vs defender {result.defense_roll}",
    ]
    if result.outcome is AttackOutcome.EXCHANGE_LOST:
        lines.append("Result: successful defense. The defender loses no troops.")
    elif result.outcome is AttackOutcome.EXCHANGE_WON:
        lines.append(
            f"Result: {result.defender_name} loses 1 troop (now {result.defender_troops})."
        )
    else:
        lines.append(f"Result: {result.defender_name} loses its last troop.")
        lines.append(f"{result.defender_name} was conquered by {result.attacker_faction}!")
        if result.troop_moved:
            lines.append(f"One troop moved from {result.attacker_name} to {result.defender_name}.")
    return "\n".join(lines) + "\n"


def render_victory(mission: Mission, won: bool) -> str:
    if won:
        return f"\nCongratulations! You accomplished the mission: {mission.description}"
    return f"\nMission NOT accomplished yet: {mission.description}"
