"""Unit tests for XP and Leveling System (wellness_quest/gamification/xp_system.py)"""
import pytest

from wellness_quest.gamification.xp_system import (
    DEFAULT_QUEST_XP,
    calculate_level_from_xp,
    level_from_xp,
    resolve_quest_xp,
    xp_to_next_level,
)


# ============================================================================
# Level Calculation Tests
# ============================================================================

def test_level_1_at_zero_xp():
    """Test level 1 starts at 0 XP"""
    assert level_from_xp(0) == 1
    assert xp_to_next_level(0) == 100


@pytest.mark.parametrize("xp,level", [
    (99, 1),
    (100, 2),
    (199, 2),
    (285, 3),
    (300, 4),
    (1250, 13),
])
def test_level_boundaries(xp, level):
    """Test every 100 XP is one level"""
    assert level_from_xp(xp) == level


def test_xp_to_next_level_range():
    """Test remaining XP is always in [1, 100] and complements xp mod 100"""
    for xp in range(0, 1001, 7):
        remaining = xp_to_next_level(xp)
        assert 1 <= remaining <= 100
        assert remaining + xp % 100 == 100
        assert level_from_xp(xp) == xp // 100 + 1


def test_no_level_cap():
    """Test levels keep growing with XP"""
    assert level_from_xp(1_000_000) == 10_001


# ============================================================================
# Level Details Tests
# ============================================================================

def test_calculate_level_from_xp_mid_level():
    """Test level details for partial progress"""
    result = calculate_level_from_xp(285)

    assert result["current_level"] == 3
    assert result["xp_in_current_level"] == 85
    assert result["xp_to_next_level"] == 15
    assert result["level_progress_percent"] == 85


def test_calculate_level_from_xp_negative():
    """Test that negative XP is handled (should be level 1)"""
    result = calculate_level_from_xp(-40)

    assert result["current_level"] == 1
    assert result["xp_to_next_level"] == 100
    assert result["level_progress_percent"] == 0


# ============================================================================
# Quest XP Tests
# ============================================================================

def test_resolve_quest_xp_defaults_when_missing():
    """Test quests without XP award the default"""
    assert resolve_quest_xp(None) == DEFAULT_QUEST_XP == 12


def test_resolve_quest_xp_keeps_explicit_value():
    assert resolve_quest_xp(20) == 20
