from pydantic import BaseModel, ConfigDict, Field

MAX_NAME_LENGTH = 49
MAX_FACTION_LENGTH = 19


class TerritorySeed(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ..., min_length=1, max_length=MAX_NAME_LENGTH, description="Territory display name"
    )
    faction: str = Field(
        ...,
        min_length=1,
        max_length=MAX_FACTION_LENGTH,
        description="Army color that holds the territory at game start",
    )
    troops: int = Field(..., ge=0, description="Troops stationed at game start")
