"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`conquest` package (e.g., `from conquest.domain import battle`) without
requiring an editable install in CI. It also provides a scripted random
source for tests that need exact dice.
"""

import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class ScriptedRng:
    """Random source returning queued values; fails loudly when exhausted."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError("scripted rng exhausted")
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng
