"""
Quest Suggestion Engine

Picks up to three bonus quests from a hand-authored pool chosen by the
user's recent mood average:

- avg < 3.0          -> LOW pool (uplifting, movement, the breathing game)
- 3.0 <= avg < 3.5   -> STEADY pool (breathing, hydration, gratitude)
- avg >= 3.5         -> HIGH pool (momentum, focus)

Same mood log and completions always give the same suggestions.
"""

from enum import Enum
from typing import Collection, Dict, List, Optional, Sequence, Tuple
import logging

from wellness_quest.gamification.mood_ledger import recent_average
from wellness_quest.models.mood import MoodEntry
from wellness_quest.models.quest import QuestDefinition

logger = logging.getLogger(__name__)

LOW_MOOD_THRESHOLD = 3.0
HIGH_MOOD_THRESHOLD = 3.5
MAX_SUGGESTIONS = 3

BREATHING_GAME_QUEST_ID = "mini-arcade"
BREATHING_GAME_TAG = "mini-game"


class MoodBand(str, Enum):
    """Recent-mood band that selects a suggestion pool"""
    LOW = "low"
    STEADY = "steady"
    HIGH = "high"


SUGGESTION_POOLS: Dict[MoodBand, Tuple[QuestDefinition, ...]] = {
    MoodBand.LOW: (
        QuestDefinition(id="dance", title="2-song dance break",
                        description="Pick two upbeat songs and move!", tag="movement", xp=15),
        QuestDefinition(id=BREATHING_GAME_QUEST_ID, title="Play the bubble-breath mini-game",
                        description="Tap to pace your breath with bubbles.", tag=BREATHING_GAME_TAG, xp=20),
        QuestDefinition(id="grat3", title="3 tiny wins list",
                        description="Write three small wins from today.", tag="gratitude", xp=18),
    ),
    MoodBand.HIGH: (
        QuestDefinition(id="focus10", title="10-minute pomodoro",
                        description="Push a focused mini sprint.", tag="focus", xp=12),
        QuestDefinition(id="walk-view", title="Scenery walk pic",
                        description="Walk 10 minutes and snap a sky/plant pic.", tag="movement", xp=15),
        QuestDefinition(id="kindness", title="Send a kind text",
                        description="Cheer someone on today.", tag="connection", xp=10),
    ),
    MoodBand.STEADY: (
        QuestDefinition(id="box-breath", title="Box breathing 4x4",
                        description="Inhale-hold-exhale-hold, 4 counts each.", tag="breathing", xp=15),
        QuestDefinition(id="hydrate2", title="Two glasses of water",
                        description="Hydrate and log it.", tag="hydration", xp=10),
        QuestDefinition(id="grat-snap", title="Photo gratitude",
                        description="Capture one thing you appreciate.", tag="gratitude", xp=12),
    ),
}


def mood_band(average: float) -> MoodBand:
    """Map a mood average to its band"""
    if average < LOW_MOOD_THRESHOLD:
        return MoodBand.LOW
    if average >= HIGH_MOOD_THRESHOLD:
        return MoodBand.HIGH
    return MoodBand.STEADY


def suggest_quests(
    mood_log: Sequence[MoodEntry],
    completed_today: Collection[str],
    today: Optional[str] = None
) -> List[QuestDefinition]:
    """
    Suggest bonus quests for today

    Args:
        mood_log: Mood history, oldest first
        completed_today: Quest ids already completed today
        today: Day the suggestions are for (entries after it are ignored)

    Returns:
        Up to 3 quests from the band's pool, pool order preserved,
        minus anything already completed today
    """
    avg = recent_average(mood_log, today, 7)
    band = mood_band(avg)
    done = set(completed_today)

    remaining = [q for q in SUGGESTION_POOLS[band] if q.id not in done]
    logger.debug(f"Mood average {avg:.2f} -> {band.value} pool, {len(remaining)} quests left")
    return remaining[:MAX_SUGGESTIONS]
