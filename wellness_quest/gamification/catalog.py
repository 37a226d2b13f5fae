"""
Static catalogs

Fixed daily activities, unlockable avatars, and the illustrative peers shown
on the leaderboard. Suggested quests live in the suggestion engine.
"""

from typing import Optional, Tuple

from wellness_quest.models.avatar import AvatarDefinition
from wellness_quest.models.leaderboard import LeaderboardPeer
from wellness_quest.models.quest import QuestDefinition

BASE_ACTIVITIES: Tuple[QuestDefinition, ...] = (
    QuestDefinition(id="walk10", title="Go for a 10-minute walk", xp=15, tag="movement"),
    QuestDefinition(id="grat1", title="Write one good thing", xp=10, tag="gratitude"),
    QuestDefinition(id="breathe", title="Try a 3-minute breathing", xp=15, tag="breathing"),
    QuestDefinition(id="text", title="Text a friend hello", xp=12, tag="connection"),
    QuestDefinition(id="water", title="Drink a tall glass of water", xp=8, tag="hydration"),
    QuestDefinition(id="sleep", title="Lights out 30 min earlier", xp=20, tag="sleep"),
    QuestDefinition(id="focus5", title="5-minute focus sprint", xp=10, tag="focus"),
)

AVATARS: Tuple[AvatarDefinition, ...] = (
    AvatarDefinition(id="sprout", name="Sprout", min_level=1, emoji="🌱"),
    AvatarDefinition(id="spark", name="Spark", min_level=3, emoji="✨"),
    AvatarDefinition(id="ranger", name="Ranger", min_level=5, emoji="🏹"),
    AvatarDefinition(id="guardian", name="Guardian", min_level=8, emoji="🛡️"),
    AvatarDefinition(id="phoenix", name="Phoenix", min_level=12, emoji="🔥"),
)

DEMO_LEADERBOARD: Tuple[LeaderboardPeer, ...] = (
    LeaderboardPeer(name="Aria", xp=620),
    LeaderboardPeer(name="Jay", xp=540),
    LeaderboardPeer(name="Sam", xp=480),
    LeaderboardPeer(name="Mina", xp=430),
)


def get_base_activity(quest_id: str) -> Optional[QuestDefinition]:
    """Catalog quest by id, or None"""
    for quest in BASE_ACTIVITIES:
        if quest.id == quest_id:
            return quest
    return None
