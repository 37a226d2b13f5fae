"""Quest models"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class QuestDefinition(BaseModel):
    """A single completable wellness activity"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    xp: Optional[int] = Field(default=None, gt=0)  # None resolves to the default award on completion
    tag: str = ""
    description: Optional[str] = None
