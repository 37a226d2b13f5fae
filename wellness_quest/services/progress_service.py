"""
Progress session service

Owns the user's ProgressState for one session. Every user event goes
through one method here, which applies the matching core rule and saves.
The display layer pulls ``dashboard()`` after each event to redraw.
"""
import logging
from typing import Any, Dict, Optional, Union

from wellness_quest.config import USER_TIMEZONE
from wellness_quest.exceptions import RecordNotFoundError
from wellness_quest.gamification.avatars import current_avatar, select_avatar, unlocked_avatars
from wellness_quest.gamification.breathing import BREATHING_GAME_QUEST, BreathingSession
from wellness_quest.gamification.catalog import BASE_ACTIVITIES, get_base_activity
from wellness_quest.gamification.leaderboard import build_leaderboard
from wellness_quest.gamification.mood_ledger import mood_for_date, record_mood, recent_average, validate_mood
from wellness_quest.gamification.quest_completion import QuestCompletionResult, complete_quest
from wellness_quest.gamification.suggestions import (
    BREATHING_GAME_TAG,
    mood_band,
    suggest_quests,
)
from wellness_quest.gamification.xp_system import calculate_level_from_xp
from wellness_quest.models.avatar import AvatarDefinition
from wellness_quest.models.mood import NEUTRAL_MOOD
from wellness_quest.models.progress import ProgressState, normalize_display_name
from wellness_quest.models.quest import QuestDefinition
from wellness_quest.storage.state_store import StateRepository
from wellness_quest.utils.datetime_helpers import today_iso, to_iso_day

logger = logging.getLogger(__name__)


class ProgressService:
    """Single entry point for every event that changes progress"""

    def __init__(self, repository: StateRepository, timezone: str = USER_TIMEZONE):
        self.repository = repository
        self.timezone = timezone
        self.state: ProgressState = ProgressState()
        self.breathing_session: Optional[BreathingSession] = None
        self.last_save_ok = True

    def _today(self, today: Optional[str]) -> str:
        if today is None:
            return today_iso(self.timezone)
        return to_iso_day(today)

    def _save(self) -> bool:
        self.last_save_ok = self.repository.save_state(self.state)
        return self.last_save_ok

    def start(self, today: Optional[str] = None) -> ProgressState:
        """Load saved progress and seed today's mood selector"""
        day = self._today(today)
        self.state = self.repository.load_state()
        self.state.mood_today = mood_for_date(self.state.mood_log, day) or NEUTRAL_MOOD
        logger.info(f"Session started for {self.state.display_name}: {self.state.xp} XP")
        return self.state

    # ------------------------------------------------------------------
    # Quests
    # ------------------------------------------------------------------

    def resolve_quest(self, quest_id: str, day: str) -> QuestDefinition:
        """
        Find a quest the user can complete on ``day``

        Catalog activities are always available. Bonus quests only resolve
        while they are in the current suggestions for the user's mood band.

        Raises:
            RecordNotFoundError: If no available quest has this id
        """
        quest = get_base_activity(quest_id)
        if quest is not None:
            return quest

        offered = suggest_quests(self.state.mood_log, self.state.completed_on(day), day)
        for suggestion in offered:
            if suggestion.id == quest_id:
                return suggestion

        raise RecordNotFoundError(
            message=f"Quest not available on {day}: {quest_id}",
            record_type="Quest",
            record_id=quest_id,
            operation="complete_quest"
        )

    def complete_quest(
        self,
        quest: Union[QuestDefinition, str],
        today: Optional[str] = None
    ) -> QuestCompletionResult:
        """Complete a quest (object or id) and save if anything changed"""
        day = self._today(today)
        if isinstance(quest, str):
            quest = self.resolve_quest(quest, day)

        result = complete_quest(self.state, quest, day)
        if result["completed"]:
            self._save()
        return result

    # ------------------------------------------------------------------
    # Mood
    # ------------------------------------------------------------------

    def set_mood_today(self, mood: int) -> int:
        """Pick today's mood in the selector (session only, not saved)"""
        self.state.mood_today = validate_mood(mood)
        return self.state.mood_today

    def log_mood(self, notes: str = "", today: Optional[str] = None) -> str:
        """
        Record the selected mood for today, replacing any earlier entry

        Returns:
            User-facing confirmation text
        """
        day = self._today(today)
        mood = self.state.mood_today or NEUTRAL_MOOD
        self.state.mood_log = record_mood(self.state.mood_log, day, mood, notes)
        self._save()
        return f"Logged mood as {mood}."

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def select_avatar(self, avatar_id: str) -> AvatarDefinition:
        avatar = select_avatar(self.state, avatar_id)
        self._save()
        return avatar

    def set_display_name(self, name: Optional[str]) -> str:
        """Rename the user; a blank name falls back to the default"""
        self.state.display_name = normalize_display_name(name)
        self._save()
        return self.state.display_name

    # ------------------------------------------------------------------
    # Breathing mini-game
    # ------------------------------------------------------------------

    def start_breathing_game(self) -> BreathingSession:
        self.breathing_session = BreathingSession()
        logger.info("Breathing game started")
        return self.breathing_session

    def stop_breathing_game(self, today: Optional[str] = None) -> QuestCompletionResult:
        """Close the game and award the mini-game quest"""
        if self.breathing_session is not None:
            self.breathing_session.stop()
            self.breathing_session = None
        return self.complete_quest(BREATHING_GAME_QUEST, today)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def dashboard(self, today: Optional[str] = None) -> Dict[str, Any]:
        """
        Everything the display layer needs to redraw

        Returns:
            {
                'display_name', 'total_xp', 'current_level', 'xp_to_next_level',
                'level_progress_percent', 'weekly_progress', 'daily_quests',
                'suggested_quests', 'mood_band', 'mood_today', 'badges',
                'avatar', 'unlocked_avatars', 'leaderboard'
            }
        """
        day = self._today(today)
        state = self.state
        level_info = calculate_level_from_xp(state.xp)
        done_today = set(state.completed_on(day))
        suggestions = suggest_quests(state.mood_log, done_today, day)

        def quest_row(quest: QuestDefinition, suggested: bool) -> Dict[str, Any]:
            return {
                "quest": quest,
                "suggested": suggested,
                "completed": quest.id in done_today,
                "opens_mini_game": quest.tag == BREATHING_GAME_TAG,
            }

        return {
            "display_name": state.display_name,
            "total_xp": state.xp,
            "current_level": level_info["current_level"],
            "xp_to_next_level": level_info["xp_to_next_level"],
            "level_progress_percent": level_info["level_progress_percent"],
            "weekly_progress": state.weekly_progress,
            "daily_quests": [quest_row(q, False) for q in BASE_ACTIVITIES],
            "suggested_quests": [quest_row(q, True) for q in suggestions],
            "mood_band": mood_band(recent_average(state.mood_log, day)).value,
            "mood_today": state.mood_today,
            "badges": list(state.badges),
            "avatar": current_avatar(state),
            "unlocked_avatars": unlocked_avatars(level_info["current_level"]),
            "leaderboard": build_leaderboard(state.display_name, state.xp),
        }
