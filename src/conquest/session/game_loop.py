"""Console game loop.

Each iteration:
1. Render the board and the player's mission
2. Read a menu option
3. Run the attack phase, check the mission, or quit
4. Pause until the player presses Enter

Errors from a single action are reported and the loop returns to the menu.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING

from conquest.domain.battle import AttackResult, resolve_attack
from conquest.domain.errors import InvalidSelectionError, MalformedInputError
from conquest.domain.missions import generate_mission
from conquest.domain.models import Mission, Territory
from conquest.domain.registry import TerritoryRegistry, initialize_registry
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.domain.seed_data import factions_in
from conquest.domain.victory import check_victory
from conquest.interfaces.rng import IRandomSource
from conquest.presentation.console import (
    render_attack,
    render_map,
    render_menu,
    render_mission,
    render_victory,
)
from conquest.utils.rng import create_rng

if TYPE_CHECKING:
    from conquest.config import Settings

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class MenuOption(IntEnum):
    """Main menu entries."""

    QUIT = 0
    ATTACK = 1
    CHECK_MISSION = 2


def parse_int(text: str) -> int:
    """Parse a typed number or raise ``MalformedInputError``."""
    try:
        return int(text.strip())
    except ValueError as exc:
        raise MalformedInputError(f"expected a number, got {text!r}") from exc


def select_territories(
    registry: TerritoryRegistry, attacker_position: int, defender_position: int
) -> tuple[Territory, Territory]:
    """Resolve 1-based display positions to an attacker and a distinct defender."""
    if attacker_position == defender_position:
        raise InvalidSelectionError("a territory cannot attack itself")
    return registry.get(attacker_position - 1), registry.get(defender_position - 1)


class GameSession:
    """One game of Conquest against the console."""

    def __init__(
        self,
        registry: TerritoryRegistry,
        mission: Mission,
        player_faction: str,
        rng: IRandomSource,
        *,
        rules: RulesConfig = DEFAULT_RULES,
        use_color: bool = True,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.registry = registry
        self.mission = mission
        self.player_faction = player_faction
        self.rng = rng
        self.rules = rules
        self.use_color = use_color
        self.won = False
        self._read = input_fn
        self._write = output_fn

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        rng: IRandomSource | None = None,
        rules: RulesConfig = DEFAULT_RULES,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> GameSession:
        """Set up the board and deal the mission.

        Raises:
            RegistryInitError: If the configured board cannot be built
            MissionError: If no faction can be targeted
        """
        rng = rng if rng is not None else create_rng(settings.seed)
        registry = initialize_registry(settings.territory_count, seed_table=settings.territories)
        mission = generate_mission(
            settings.player_faction,
            rng,
            factions=factions_in(settings.territories),
            rules=rules,
        )
        return cls(
            registry,
            mission,
            settings.player_faction,
            rng,
            rules=rules,
            use_color=settings.use_color,
            input_fn=input_fn,
            output_fn=output_fn,
        )

    def run(self) -> int:
        """Play until the mission is accomplished or the player quits.

        Returns the process exit code.
        """
        while True:
            try:
                option = self.play_turn()
            except EOFError:
                option = MenuOption.QUIT
                self._write("\nExiting the game...")
            if option is MenuOption.QUIT or self.won:
                logger.info("session finished (won=%s)", self.won)
                return 0

    def play_turn(self) -> MenuOption | None:
        """Render the board, read one menu option and carry it out.

        Returns the option played, or ``None`` for an unrecognized one.
        """
        self._write(render_map(self.registry, use_color=self.use_color))
        self._write(render_mission(self.mission))
        self._write(render_menu())

        try:
            option: MenuOption | None = MenuOption(parse_int(self._read("Choose an option: ")))
        except (MalformedInputError, ValueError):
            option = None

        if option is MenuOption.ATTACK:
            self.attack_phase()
        elif option is MenuOption.CHECK_MISSION:
            self.check_mission()
        elif option is MenuOption.QUIT:
            self._write("\nExiting the game...")
            return option
        else:
            self._write("\nInvalid option. Try again.")

        if not self.won:
            self._read("\nPress Enter to continue...")
        return option

    def attack_phase(self) -> list[AttackResult]:
        """Ask for a number of attacks and resolve each requested pair."""
        try:
            attacks = parse_int(self._read("How many attacks this turn? "))
        except MalformedInputError as exc:
            logger.info("attack phase cancelled: %s", exc)
            self._write("Invalid input. Back to the menu.")
            return []

        total = len(self.registry)
        results: list[AttackResult] = []
        for number in range(1, attacks + 1):
            self._write(f"\n>>> Attack {number} of {attacks} <<<")
            try:
                attacker_position = parse_int(
                    self._read(f"Choose the attacking territory (1 - {total}): ")
                )
                defender_position = parse_int(
                    self._read(f"Choose the defending territory (1 - {total}): ")
                )
                attacker, defender = select_territories(
                    self.registry, attacker_position, defender_position
                )
            except MalformedInputError as exc:
                logger.info("attack %d skipped: %s", number, exc)
                self._write("Invalid input. Skipping attack.")
                continue
            except InvalidSelectionError as exc:
                logger.info("attack %d cancelled: %s", number, exc)
                self._write(
                    "Invalid option (index out of range or same territory). Attack cancelled."
                )
                continue

            result = resolve_attack(
                attacker, defender, self.player_faction, self.rng, rules=self.rules
            )
            self._write(render_attack(result))
            results.append(result)
        return results

    def check_mission(self) -> bool:
        self.won = check_victory(
            self.registry, self.mission, self.player_faction, rules=self.rules
        )
        self._write(render_victory(self.mission, self.won))
        return self.won
