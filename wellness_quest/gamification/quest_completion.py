"""
Quest Completion Workflow

Applies a completed quest to a ProgressState:

1. At most once per quest per day (repeat completions are a no-op)
2. Record the quest id under today's date
3. Award XP (DEFAULT_QUEST_XP when the quest has none)
4. Grant any newly earned badges
5. Bump the weekly progress meter by 5, capped at 100

Saving and user feedback are left to the caller; the toast text is returned.
"""

from typing import List, TypedDict
import logging

from wellness_quest.gamification.achievement_system import evaluate_badges
from wellness_quest.gamification.xp_system import level_from_xp, resolve_quest_xp
from wellness_quest.models.progress import ProgressState, WEEKLY_PROGRESS_MAX
from wellness_quest.models.quest import QuestDefinition

logger = logging.getLogger(__name__)

WEEKLY_PROGRESS_STEP = 5


class QuestCompletionResult(TypedDict):
    """Result of applying one quest completion"""
    completed: bool  # False when the quest was already done today
    quest_id: str
    xp_gained: int
    new_total_xp: int
    old_level: int
    new_level: int
    leveled_up: bool
    badges_unlocked: List[str]
    weekly_progress: int
    message: str  # User-facing toast text, empty on a no-op


def clamp(n: int, low: int, high: int) -> int:
    return max(low, min(high, n))


def complete_quest(state: ProgressState, quest: QuestDefinition, today: str) -> QuestCompletionResult:
    """
    Complete a quest for ``today``, mutating ``state`` in place

    Args:
        state: User's progress state
        quest: Catalog or suggested quest
        today: Day of completion (YYYY-MM-DD)

    Returns:
        QuestCompletionResult describing what changed
    """
    old_level = level_from_xp(state.xp)

    if state.is_completed(quest.id, today):
        logger.debug(f"Quest {quest.id} already completed on {today}, ignoring")
        return {
            "completed": False,
            "quest_id": quest.id,
            "xp_gained": 0,
            "new_total_xp": state.xp,
            "old_level": old_level,
            "new_level": old_level,
            "leveled_up": False,
            "badges_unlocked": [],
            "weekly_progress": state.weekly_progress,
            "message": "",
        }

    completed = {day: list(ids) for day, ids in state.completed_by_date.items()}
    completed[today] = completed.get(today, []) + [quest.id]

    gained = resolve_quest_xp(quest.xp)
    new_xp = state.xp + gained
    new_level = level_from_xp(new_xp)

    new_badges = evaluate_badges(
        existing_badges=state.badges,
        level=new_level,
        completed_today_count=len(completed[today]),
        quest_tag=quest.tag,
    )

    state.completed_by_date = completed
    state.xp = new_xp
    state.badges = state.badges + new_badges
    state.weekly_progress = clamp(state.weekly_progress + WEEKLY_PROGRESS_STEP, 0, WEEKLY_PROGRESS_MAX)

    logger.info(
        f"Completed quest {quest.id} on {today}: +{gained} XP. "
        f"Total: {new_xp} XP, Level: {new_level}"
    )
    if new_level > old_level:
        logger.info(f"Leveled up from {old_level} to {new_level}!")
    for badge in new_badges:
        logger.info(f"Badge unlocked: {badge}")

    return {
        "completed": True,
        "quest_id": quest.id,
        "xp_gained": gained,
        "new_total_xp": new_xp,
        "old_level": old_level,
        "new_level": new_level,
        "leveled_up": new_level > old_level,
        "badges_unlocked": new_badges,
        "weekly_progress": state.weekly_progress,
        "message": f"+{gained} XP! Quest completed: {quest.title}",
    }
