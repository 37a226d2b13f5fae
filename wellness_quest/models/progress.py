"""Progress state: the single per-user aggregate that gets persisted"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wellness_quest.models.mood import MoodEntry, NEUTRAL_MOOD, MIN_MOOD, MAX_MOOD

DEFAULT_AVATAR_ID = "sprout"
DEFAULT_DISPLAY_NAME = "You"
WEEKLY_PROGRESS_MAX = 100


def normalize_display_name(name) -> str:
    """Blank or missing names fall back to the default placeholder"""
    if name is None or (isinstance(name, str) and not name.strip()):
        return DEFAULT_DISPLAY_NAME
    return name


class ProgressState(BaseModel):
    """
    Aggregate progress record for one user

    Serialized with the legacy v2 storage keys
    (``completed``, ``moodLog``, ``selectedAvatar``, ...) so existing saved
    blobs keep loading. ``mood_today`` is session-only and never written.
    """
    model_config = ConfigDict(populate_by_name=True)

    xp: int = Field(default=0, ge=0)
    completed_by_date: Dict[str, List[str]] = Field(default_factory=dict, alias="completed")
    mood_log: List[MoodEntry] = Field(default_factory=list, alias="moodLog")
    selected_avatar_id: str = Field(default=DEFAULT_AVATAR_ID, alias="selectedAvatar")
    badges: List[str] = Field(default_factory=list)
    weekly_progress: int = Field(default=0, alias="weeklyProgress")
    display_name: str = Field(default=DEFAULT_DISPLAY_NAME, alias="displayName")
    mood_today: int = Field(default=NEUTRAL_MOOD, ge=MIN_MOOD, le=MAX_MOOD, exclude=True)

    @field_validator('completed_by_date')
    @classmethod
    def unique_ids_per_day(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """A quest id appears at most once per day"""
        return {day: list(dict.fromkeys(ids)) for day, ids in v.items()}

    @field_validator('badges')
    @classmethod
    def unique_badges(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))

    @field_validator('weekly_progress')
    @classmethod
    def clamp_weekly_progress(cls, v: int) -> int:
        return max(0, min(WEEKLY_PROGRESS_MAX, v))

    @field_validator('display_name', mode='before')
    @classmethod
    def default_display_name(cls, v):
        return normalize_display_name(v)

    def completed_on(self, day: str) -> List[str]:
        """Quest ids completed on ``day``, in completion order (a copy)"""
        return list(self.completed_by_date.get(day, []))

    def is_completed(self, quest_id: str, day: str) -> bool:
        return quest_id in self.completed_by_date.get(day, [])
