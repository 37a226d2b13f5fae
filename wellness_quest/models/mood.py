"""Mood ledger models"""
from datetime import date

from pydantic import BaseModel, Field, field_validator

MIN_MOOD = 1
MAX_MOOD = 5
NEUTRAL_MOOD = 3


class MoodEntry(BaseModel):
    """One day's mood rating"""
    date: str  # YYYY-MM-DD
    mood: int = Field(..., ge=MIN_MOOD, le=MAX_MOOD)
    notes: str = ""

    @field_validator('date')
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Ensure YYYY-MM-DD format"""
        try:
            return date.fromisoformat(v).isoformat()
        except ValueError:
            raise ValueError(
                f"Invalid date format: '{v}'. Must be YYYY-MM-DD"
            )

    @field_validator('notes', mode='before')
    @classmethod
    def none_notes_to_empty(cls, v):
        return v or ""
