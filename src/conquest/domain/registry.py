"""Territory registry: the ordered board every other rule reads."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from conquest.domain.errors import InvalidSelectionError, RegistryInitError
from conquest.domain.models import Territory
from conquest.domain.seed_data import DEFAULT_SEED_TABLE
from conquest.schemas.territory import TerritorySeed

logger = logging.getLogger(__name__)


class TerritoryRegistry:
    """Ordered collection of territories indexed ``0..N-1``.

    Index order is display order. Entries are handed out by reference; only
    the battle rules mutate them.
    """

    __slots__ = ("_territories",)

    def __init__(self, territories: Iterable[Territory]) -> None:
        self._territories = list(territories)

    def __len__(self) -> int:
        return len(self._territories)

    def __iter__(self) -> Iterator[Territory]:
        return iter(self._territories)

    def __getitem__(self, index: int) -> Territory:
        return self._territories[index]

    def get(self, index: int) -> Territory:
        """Return the territory at ``index`` or raise ``InvalidSelectionError``."""
        if not 0 <= index < len(self._territories):
            raise InvalidSelectionError(
                f"territory index {index} out of range 0..{len(self._territories) - 1}"
            )
        return self._territories[index]

    def factions(self) -> list[str]:
        """Factions currently holding at least one territory, in board order."""
        return list(dict.fromkeys(territory.faction for territory in self._territories))

    def owned_by(self, faction: str) -> list[Territory]:
        return [territory for territory in self._territories if territory.faction == faction]


def initialize_registry(
    count: int,
    *,
    seed_table: Sequence[TerritorySeed] = DEFAULT_SEED_TABLE,
) -> TerritoryRegistry:
    """Build ``count`` territories from the first entries of ``seed_table``.

    Raises:
        RegistryInitError: If ``count`` is not positive or exceeds the table
    """

    if count <= 0:
        raise RegistryInitError(f"territory count must be positive, got {count}")
    if count > len(seed_table):
        raise RegistryInitError(
            f"requested {count} territories but the seed table only has {len(seed_table)}"
        )

    territories = [
        Territory(name=entry.name, faction=entry.faction, troops=entry.troops)
        for entry in seed_table[:count]
    ]
    logger.debug("initialized registry with %d territories", len(territories))
    return TerritoryRegistry(territories)
