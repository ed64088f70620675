"""Lightweight configuration for the Conquest game."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from conquest.domain.seed_data import DEFAULT_PLAYER_FACTION, DEFAULT_SEED_TABLE
from conquest.schemas.territory import MAX_FACTION_LENGTH, TerritorySeed


class Settings(BaseSettings):
    """Game settings, read from ``CONQUEST_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CONQUEST_", env_file=".env", env_file_encoding="utf-8"
    )

    player_faction: str = Field(
        default=DEFAULT_PLAYER_FACTION,
        min_length=1,
        max_length=MAX_FACTION_LENGTH,
        description="Army color controlled by the human player",
    )
    territory_count: int = Field(
        default=len(DEFAULT_SEED_TABLE),
        gt=0,
        description="How many entries of the seed table are put on the board",
    )
    seed: int | None = Field(
        default=None, description="Fixed RNG seed; wall-clock seeded when unset"
    )
    use_color: bool = Field(default=True, description="Color army names with ANSI codes")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root logging level"
    )
    territories: list[TerritorySeed] = Field(
        default_factory=lambda: list(DEFAULT_SEED_TABLE),
        description="Starting board; a JSON list of {name, faction, troops} objects",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
