"""Leaderboard models"""
from pydantic import BaseModel


class LeaderboardPeer(BaseModel):
    """Static demo entry shown next to the user"""
    name: str
    xp: int


class LeaderboardRow(BaseModel):
    """Ranked row computed at display time (never persisted)"""
    rank: int
    name: str
    xp: int
    is_current_user: bool = False
