from .territory import TerritorySeed

__all__ = [
    "TerritorySeed",
]
