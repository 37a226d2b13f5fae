"""Unit tests for the Badge System (wellness_quest/gamification/achievement_system.py)"""
from wellness_quest.gamification.achievement_system import (
    DAILY_TRIO,
    HYDRATION_HERO,
    LEVEL_3_ACHIEVER,
    _criteria_met,
    evaluate_badges,
)


def test_no_badges_for_ordinary_completion():
    """Test a first level-1 completion earns nothing"""
    assert evaluate_badges([], level=1, completed_today_count=1, quest_tag="movement") == []


def test_level_3_achiever():
    assert evaluate_badges([], level=3, completed_today_count=1, quest_tag="focus") == [LEVEL_3_ACHIEVER]


def test_daily_trio_threshold():
    """Test Daily Trio needs three completions today"""
    assert evaluate_badges([], level=1, completed_today_count=2, quest_tag="focus") == []
    assert evaluate_badges([], level=1, completed_today_count=3, quest_tag="focus") == [DAILY_TRIO]


def test_hydration_hero():
    assert evaluate_badges([], level=1, completed_today_count=1, quest_tag="hydration") == [HYDRATION_HERO]


def test_multiple_badges_in_definition_order():
    result = evaluate_badges([], level=4, completed_today_count=3, quest_tag="hydration")

    assert result == [LEVEL_3_ACHIEVER, DAILY_TRIO, HYDRATION_HERO]


def test_held_badges_are_not_regranted():
    """Test badges already owned are skipped"""
    result = evaluate_badges(
        [LEVEL_3_ACHIEVER, HYDRATION_HERO],
        level=5,
        completed_today_count=1,
        quest_tag="hydration"
    )

    assert result == []


def test_unknown_criteria_type_never_matches():
    assert _criteria_met({"type": "streak", "days": 7}, {"level": 99}) is False
