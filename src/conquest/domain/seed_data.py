"""Starting map data.

The default table is the classic five-territory board. Index order is display
order, so the first entry is shown as territory 1.
"""

from __future__ import annotations

from collections.abc import Iterable

from conquest.schemas.territory import TerritorySeed

DEFAULT_SEED_TABLE: tuple[TerritorySeed, ...] = (
    TerritorySeed(name="Amazonas", faction="Verde", troops=5),
    TerritorySeed(name="Cerrado", faction="Azul", troops=4),
    TerritorySeed(name="Pantanal", faction="Vermelho", troops=6),
    TerritorySeed(name="Caatinga", faction="Amarelo", troops=3),
    TerritorySeed(name="Mata Atlantica", faction="Roxo", troops=5),
)

DEFAULT_PLAYER_FACTION = "Azul"


def factions_in(seed_table: Iterable[TerritorySeed]) -> tuple[str, ...]:
    """Distinct factions of a seed table, in first-seen order."""

    return tuple(dict.fromkeys(entry.faction for entry in seed_table))


DEFAULT_FACTIONS = factions_in(DEFAULT_SEED_TABLE)
