"""Random number helpers for Conquest.

Every draw goes through a generator object owned by the game session
(see :class:`conquest.interfaces.IRandomSource`). Nothing here touches the
module-level ``random`` state, so:
- Tests can seed or script the generator
- A session replays identically from the same seed
- Results carry enough detail to log what was rolled

Examples:
    >>> rng = create_rng(42)
    >>> len(roll(rng, 2, 6))
    2

    >>> result = random_choice(rng, ["Verde", "Roxo"])
    >>> result["choice"] in ("Verde", "Roxo")
    True
"""

import random
import time
from typing import Any

from conquest.interfaces.rng import IRandomSource


def create_rng(seed: int | None = None) -> random.Random:
    """Create the generator for one game session.

    Args:
        seed: Fixed seed for reproducible sessions. When omitted the generator
            is seeded from the wall clock.

    Returns:
        A fresh ``random.Random`` instance
    """
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed)


def roll(rng: IRandomSource, num_dice: int, num_sides: int) -> list[int]:
    """Draw ``num_dice`` faces of a ``num_sides``-sided die, in draw order.

    Raises:
        ValueError: If either count is below one
    """
    if num_dice < 1 or num_sides < 1:
        raise ValueError(f"need at least one die with one side, got {num_dice}d{num_sides}")
    return [rng.randint(1, num_sides) for _ in range(num_dice)]


def random_choice(rng: IRandomSource, options: list[Any]) -> dict[str, Any]:
    """Choose uniformly from options.

    Args:
        rng: Generator the index is drawn from
        options: List of options to choose from (must be non-empty)

    Returns:
        Dictionary containing:
            - choice: The selected option
            - index: Index of the selected option

    Raises:
        ValueError: If options list is empty
    """
    if not options:
        raise ValueError("options list cannot be empty")

    index = rng.randint(0, len(options) - 1)

    return {
        "choice": options[index],
        "index": index,
    }
