"""Unit tests for the Quest Completion Workflow (wellness_quest/gamification/quest_completion.py)"""
from wellness_quest.gamification.achievement_system import DAILY_TRIO, HYDRATION_HERO, LEVEL_3_ACHIEVER
from wellness_quest.gamification.quest_completion import complete_quest
from wellness_quest.models.progress import ProgressState
from wellness_quest.models.quest import QuestDefinition


# ============================================================================
# Basic Completion Tests
# ============================================================================

def test_first_completion_on_fresh_state(fresh_state, quest_factory, today):
    """Test completing walk10 on a fresh state"""
    result = complete_quest(fresh_state, quest_factory("walk10", xp=15), today)

    assert result["completed"] is True
    assert result["xp_gained"] == 15
    assert fresh_state.xp == 15
    assert fresh_state.completed_by_date[today] == ["walk10"]
    assert fresh_state.badges == []
    assert fresh_state.weekly_progress == 5
    assert result["message"] == "+15 XP! Quest completed: Quest walk10"


def test_missing_xp_defaults_to_12(fresh_state, today):
    quest = QuestDefinition(id="custom", title="Stretch")

    result = complete_quest(fresh_state, quest, today)

    assert result["xp_gained"] == 12
    assert fresh_state.xp == 12


def test_level_3_badge_without_level_up(quest_factory, today):
    """Test xp 285 -> 295 stays level 3 and grants Level 3 Achiever"""
    state = ProgressState(xp=285)

    result = complete_quest(state, quest_factory("grat1", xp=10, tag="gratitude"), today)

    assert state.xp == 295
    assert result["new_level"] == 3
    assert result["leveled_up"] is False
    assert LEVEL_3_ACHIEVER in state.badges


def test_level_up_reported(quest_factory, today):
    state = ProgressState(xp=95)

    result = complete_quest(state, quest_factory(xp=10), today)

    assert result["old_level"] == 1
    assert result["new_level"] == 2
    assert result["leveled_up"] is True


# ============================================================================
# Badge Tests
# ============================================================================

def test_daily_trio_on_third_completion(fresh_state, quest_factory, today):
    """Test Daily Trio arrives with the third completion, not the second"""
    complete_quest(fresh_state, quest_factory("walk10"), today)
    complete_quest(fresh_state, quest_factory("grat1"), today)
    assert DAILY_TRIO not in fresh_state.badges

    result = complete_quest(fresh_state, quest_factory("text"), today)

    assert DAILY_TRIO in fresh_state.badges
    assert result["badges_unlocked"] == [DAILY_TRIO]


def test_daily_trio_counts_only_today(fresh_state, quest_factory, today, tomorrow):
    complete_quest(fresh_state, quest_factory("walk10"), today)
    complete_quest(fresh_state, quest_factory("grat1"), today)
    complete_quest(fresh_state, quest_factory("text"), tomorrow)

    assert DAILY_TRIO not in fresh_state.badges


def test_hydration_hero_regardless_of_xp(fresh_state, quest_factory, today):
    complete_quest(fresh_state, quest_factory("water", xp=1, tag="hydration"), today)

    assert HYDRATION_HERO in fresh_state.badges


def test_badges_granted_once(fresh_state, quest_factory, today):
    complete_quest(fresh_state, quest_factory("water", tag="hydration"), today)
    result = complete_quest(fresh_state, quest_factory("hydrate2", tag="hydration"), today)

    assert fresh_state.badges.count(HYDRATION_HERO) == 1
    assert result["badges_unlocked"] == []


# ============================================================================
# Idempotency & Monotonicity Tests
# ============================================================================

def test_duplicate_completion_is_noop(fresh_state, quest_factory, today):
    """Test completing the same quest twice in a day changes nothing the second time"""
    quest = quest_factory("water", xp=8, tag="hydration")
    complete_quest(fresh_state, quest, today)
    snapshot = fresh_state.model_dump()

    result = complete_quest(fresh_state, quest, today)

    assert result["completed"] is False
    assert result["xp_gained"] == 0
    assert result["message"] == ""
    assert fresh_state.model_dump() == snapshot


def test_same_quest_again_next_day(fresh_state, quest_factory, today, tomorrow):
    """Test a new day resets the per-quest state to pending"""
    quest = quest_factory("walk10", xp=15)
    complete_quest(fresh_state, quest, today)

    result = complete_quest(fresh_state, quest, tomorrow)

    assert result["completed"] is True
    assert fresh_state.xp == 30
    assert fresh_state.completed_by_date == {today: ["walk10"], tomorrow: ["walk10"]}


def test_weekly_progress_saturates_at_100(quest_factory, today):
    state = ProgressState(weekly_progress=98)

    complete_quest(state, quest_factory("walk10"), today)
    complete_quest(state, quest_factory("grat1"), today)

    assert state.weekly_progress == 100


def test_monotonic_across_sequence(fresh_state, quest_factory, today, tomorrow):
    """Test xp, weekly progress and badges never go down"""
    quests = [
        (quest_factory("walk10", xp=15), today),
        (quest_factory("water", xp=8, tag="hydration"), today),
        (quest_factory("walk10", xp=15), today),
        (quest_factory("sleep", xp=20), today),
        (quest_factory("focus5", xp=10), tomorrow),
    ]
    prev_xp, prev_weekly, prev_badges = 0, 0, set()

    for quest, day in quests:
        complete_quest(fresh_state, quest, day)
        assert fresh_state.xp >= prev_xp
        assert fresh_state.weekly_progress >= prev_weekly
        assert prev_badges <= set(fresh_state.badges)
        prev_xp, prev_weekly, prev_badges = (
            fresh_state.xp, fresh_state.weekly_progress, set(fresh_state.badges)
        )

    assert fresh_state.xp == 53
