"""Global test fixtures and utilities for wellness-quest tests"""
import pytest
from datetime import date, timedelta

from wellness_quest.models.mood import MoodEntry
from wellness_quest.models.progress import ProgressState
from wellness_quest.models.quest import QuestDefinition
from wellness_quest.services.progress_service import ProgressService
from wellness_quest.storage.state_store import InMemoryStore, StateRepository


# ============================================================================
# Date Fixtures
# ============================================================================

@pytest.fixture
def today():
    """Fixed day used as 'today' in every test"""
    return "2024-03-15"


@pytest.fixture
def tomorrow():
    return "2024-03-16"


# ============================================================================
# State Fixtures
# ============================================================================

@pytest.fixture
def fresh_state():
    """Default progress state"""
    return ProgressState()


@pytest.fixture
def quest_factory():
    """Factory for ad-hoc quests"""
    def _create(quest_id="walk10", xp=15, tag="movement", title=None):
        return QuestDefinition(id=quest_id, title=title or f"Quest {quest_id}", xp=xp, tag=tag)
    return _create


@pytest.fixture
def mood_log_factory():
    """Factory for mood logs: one entry per consecutive day ending on end_day"""
    def _create(moods, end_day="2024-03-15"):
        end = date.fromisoformat(end_day)
        start = end - timedelta(days=len(moods) - 1)
        return [
            MoodEntry(date=(start + timedelta(days=i)).isoformat(), mood=m)
            for i, m in enumerate(moods)
        ]
    return _create


# ============================================================================
# Storage & Service Fixtures
# ============================================================================

@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def repository(memory_store):
    return StateRepository(memory_store, key="test-state")


@pytest.fixture
def service(repository, today):
    """Started ProgressService over an empty in-memory store"""
    svc = ProgressService(repository, timezone="UTC")
    svc.start(today)
    return svc
