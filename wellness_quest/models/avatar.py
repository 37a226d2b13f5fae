"""Avatar models"""
from pydantic import BaseModel, ConfigDict, Field


class AvatarDefinition(BaseModel):
    """Avatar that unlocks at a given level"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    min_level: int = Field(default=1, ge=1)  # inclusive
    emoji: str
