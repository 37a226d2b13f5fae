"""
Gamification engine for Wellness Quest

This module implements the progression rules:
- XP and leveling
- Daily mood ledger
- Mood-driven quest suggestions
- Quest completion with badges and weekly progress
- Avatars, leaderboard and the breathing mini-game
"""

from wellness_quest.gamification.xp_system import level_from_xp, xp_to_next_level, calculate_level_from_xp
from wellness_quest.gamification.mood_ledger import record_mood, recent_average
from wellness_quest.gamification.suggestions import suggest_quests
from wellness_quest.gamification.quest_completion import complete_quest

__all__ = [
    "level_from_xp",
    "xp_to_next_level",
    "calculate_level_from_xp",
    "record_mood",
    "recent_average",
    "suggest_quests",
    "complete_quest",
]
