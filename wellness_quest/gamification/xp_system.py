"""
XP and Leveling System

Maps cumulative XP to a level. The curve is flat: every 100 XP is one
level, level 1 starts at 0 XP, and there is no cap.

XP Award Rules:
- Each quest carries its own award (8-20 XP in the catalog)
- Quests without an XP value award DEFAULT_QUEST_XP
"""

from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)

XP_PER_LEVEL = 100
DEFAULT_QUEST_XP = 12


def level_from_xp(xp: int) -> int:
    """Level for a cumulative XP total (level 1 at 0 XP)"""
    return xp // XP_PER_LEVEL + 1


def xp_to_next_level(xp: int) -> int:
    """XP still needed to reach the next level, always in [1, 100]"""
    return XP_PER_LEVEL - (xp % XP_PER_LEVEL)


def calculate_level_from_xp(total_xp: int) -> Dict[str, int]:
    """
    Calculate level details from total XP

    Negative totals are treated as 0.

    Returns:
        {
            'current_level': int,
            'xp_in_current_level': int,
            'xp_to_next_level': int,
            'level_progress_percent': int (0-99, width of the level bar)
        }
    """
    total_xp = max(0, total_xp)
    xp_in_level = total_xp % XP_PER_LEVEL

    return {
        "current_level": level_from_xp(total_xp),
        "xp_in_current_level": xp_in_level,
        "xp_to_next_level": xp_to_next_level(total_xp),
        "level_progress_percent": xp_in_level * 100 // XP_PER_LEVEL,
    }


def resolve_quest_xp(xp: Optional[int]) -> int:
    """XP award for a quest, defaulting when the quest does not specify one"""
    if xp is None:
        logger.debug(f"Quest has no XP value, awarding default {DEFAULT_QUEST_XP}")
        return DEFAULT_QUEST_XP
    return xp
