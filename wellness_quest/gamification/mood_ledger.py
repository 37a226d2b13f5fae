"""
Mood Ledger

Daily mood log, at most one entry per calendar day (the latest write for a
day replaces the earlier one). Provides the rolling average that drives
quest suggestions.
"""

from typing import List, Optional, Sequence
import logging

from pydantic import ValidationError as PydanticValidationError

from wellness_quest.exceptions import ValidationError
from wellness_quest.models.mood import MoodEntry, NEUTRAL_MOOD, MIN_MOOD, MAX_MOOD

logger = logging.getLogger(__name__)

MOOD_WINDOW_ENTRIES = 7


def validate_mood(mood: int) -> int:
    """
    Check a mood rating is an integer in [1, 5]

    Out-of-range input is rejected rather than clamped.

    Raises:
        ValidationError: If mood is not an int in range
    """
    if isinstance(mood, bool) or not isinstance(mood, int) or not MIN_MOOD <= mood <= MAX_MOOD:
        raise ValidationError(
            message=f"Mood must be an integer between {MIN_MOOD} and {MAX_MOOD}",
            field="mood",
            value=mood,
            operation="record_mood"
        )
    return mood


def record_mood(
    log: Sequence[MoodEntry],
    date: str,
    mood: int,
    notes: Optional[str] = ""
) -> List[MoodEntry]:
    """
    Record a mood for a day, replacing any existing entry for that day

    Args:
        log: Current mood log (not modified)
        date: Day being logged (YYYY-MM-DD)
        mood: Rating 1-5
        notes: Optional free text

    Returns:
        New log with the entry appended at the end

    Raises:
        ValidationError: If mood or date are invalid
    """
    validate_mood(mood)
    try:
        entry = MoodEntry(date=date, mood=mood, notes=notes)
    except PydanticValidationError as e:
        raise ValidationError(
            message=f"Invalid mood entry date: {date}",
            field="date",
            value=date,
            operation="record_mood",
            cause=e
        )

    new_log = [m for m in log if m.date != entry.date]
    if len(new_log) != len(log):
        logger.info(f"Replacing mood entry for {entry.date}")
    new_log.append(entry)

    logger.info(f"Logged mood {mood} for {entry.date}")
    return new_log


def recent_average(
    log: Sequence[MoodEntry],
    as_of_date: Optional[str] = None,
    window_size: int = MOOD_WINDOW_ENTRIES
) -> float:
    """
    Average mood over the last ``window_size`` recorded entries

    The window counts entries, not calendar days, so days without an entry
    are skipped. Entries dated after ``as_of_date`` are ignored when given.

    Returns:
        Mean mood, or 3.0 when there are no entries
    """
    entries = [m for m in log if as_of_date is None or m.date <= as_of_date]
    recent = entries[-window_size:] if window_size > 0 else []
    if not recent:
        return float(NEUTRAL_MOOD)
    return sum(m.mood for m in recent) / len(recent)


def mood_for_date(log: Sequence[MoodEntry], date: str) -> Optional[int]:
    """Mood recorded for a given day, if any"""
    for entry in log:
        if entry.date == date:
            return entry.mood
    return None
