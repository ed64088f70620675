"""Random Source Protocol Interface."""

from typing import Protocol


class IRandomSource(Protocol):
    """Protocol for the generator every random draw in a session goes through.

    :class:`random.Random` satisfies it, so production code passes a seeded
    ``random.Random`` and tests pass either one with a fixed seed or a
    scripted fake.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer N with ``a <= N <= b``.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            The drawn integer
        """
        ...
