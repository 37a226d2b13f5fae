"""
Badge System

Badges are one-way grants: once awarded they are never removed. They are
evaluated after every quest completion.

Badges:
- Level 3 Achiever: reach level 3
- Daily Trio: complete 3 quests in one day (counting the quest just completed)
- Hydration Hero: complete any hydration quest
"""

from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)

LEVEL_3_ACHIEVER = "Level 3 Achiever"
DAILY_TRIO = "Daily Trio"
HYDRATION_HERO = "Hydration Hero"

BADGES: List[Dict[str, Any]] = [
    {
        "name": LEVEL_3_ACHIEVER,
        "description": "Reach level 3",
        "criteria": {"type": "level", "min_level": 3},
    },
    {
        "name": DAILY_TRIO,
        "description": "Complete 3 quests in one day",
        "criteria": {"type": "daily_count", "min_count": 3},
    },
    {
        "name": HYDRATION_HERO,
        "description": "Complete a hydration quest",
        "criteria": {"type": "quest_tag", "tag": "hydration"},
    },
]


def _criteria_met(criteria: Dict[str, Any], context: Dict[str, Any]) -> bool:
    if criteria["type"] == "level":
        return context.get("level", 1) >= criteria["min_level"]

    elif criteria["type"] == "daily_count":
        return context.get("completed_today_count", 0) >= criteria["min_count"]

    elif criteria["type"] == "quest_tag":
        return context.get("quest_tag") == criteria["tag"]

    logger.warning(f"Unknown badge criteria type: {criteria['type']}")
    return False


def evaluate_badges(
    existing_badges: List[str],
    level: int,
    completed_today_count: int,
    quest_tag: str
) -> List[str]:
    """
    Find badges newly earned by a completion

    Args:
        existing_badges: Badges the user already has
        level: Level after the XP award
        completed_today_count: Today's completions including the new one
        quest_tag: Tag of the quest just completed

    Returns:
        Names of badges to grant, in definition order (already-held ones excluded)
    """
    context = {
        "level": level,
        "completed_today_count": completed_today_count,
        "quest_tag": quest_tag,
    }
    held = set(existing_badges)

    newly_earned = []
    for badge in BADGES:
        if badge["name"] in held:
            continue
        if _criteria_met(badge["criteria"], context):
            newly_earned.append(badge["name"])

    return newly_earned
