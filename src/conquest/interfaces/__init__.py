"""Protocol-based interfaces for Conquest collaborators.

Game rules depend on these contracts rather than on concrete implementations,
which lets tests inject seeded or scripted stand-ins.
"""

from conquest.interfaces.rng import IRandomSource

__all__ = ["IRandomSource"]
