"""
Leaderboard

Illustrative only: the static demo peers merged with the local user's live
XP. Ties keep the input order (peers first, then the user).
"""

from typing import List, Sequence

from wellness_quest.gamification.catalog import DEMO_LEADERBOARD
from wellness_quest.models.leaderboard import LeaderboardPeer, LeaderboardRow

LEADERBOARD_SIZE = 5


def build_leaderboard(
    display_name: str,
    xp: int,
    peers: Sequence[LeaderboardPeer] = DEMO_LEADERBOARD,
    limit: int = LEADERBOARD_SIZE
) -> List[LeaderboardRow]:
    """
    Rank the user against the peers by XP, highest first

    Returns:
        Top ``limit`` rows with 1-based ranks
    """
    entries = [(peer.name, peer.xp, False) for peer in peers]
    entries.append((display_name, xp, True))

    # sorted() is stable, so equal XP keeps the original relative order
    ranked = sorted(entries, key=lambda e: e[1], reverse=True)[:limit]

    return [
        LeaderboardRow(rank=i + 1, name=name, xp=row_xp, is_current_user=is_user)
        for i, (name, row_xp, is_user) in enumerate(ranked)
    ]
