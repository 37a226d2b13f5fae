"""
Bubble-breath mini-game

A pure state machine: inhale -> hold -> exhale -> inhale, four counts per
phase. The caller drives it with ``tick()`` once a second and calls
``stop()`` when the user closes the game; finishing the game completes the
``mini-arcade`` quest through the normal completion workflow.
"""

from enum import Enum
import logging

from wellness_quest.gamification.suggestions import BREATHING_GAME_QUEST_ID, BREATHING_GAME_TAG
from wellness_quest.models.quest import QuestDefinition

logger = logging.getLogger(__name__)

COUNTS_PER_PHASE = 4

# Awarded when the game is closed
BREATHING_GAME_QUEST = QuestDefinition(
    id=BREATHING_GAME_QUEST_ID,
    title="Bubble-Breath",
    xp=20,
    tag=BREATHING_GAME_TAG,
)


class BreathPhase(str, Enum):
    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"


_NEXT_PHASE = {
    BreathPhase.INHALE: BreathPhase.HOLD,
    BreathPhase.HOLD: BreathPhase.EXHALE,
    BreathPhase.EXHALE: BreathPhase.INHALE,
}

# Bubble scale per phase
_BUBBLE_SCALE = {
    BreathPhase.INHALE: 1.2,
    BreathPhase.HOLD: 1.0,
    BreathPhase.EXHALE: 0.8,
}


class BreathingSession:
    """One run of the breathing game"""

    def __init__(self):
        self.phase = BreathPhase.INHALE
        self.count = COUNTS_PER_PHASE
        self.ticks = 0
        self.finished = False

    @property
    def bubble_scale(self) -> float:
        return _BUBBLE_SCALE[self.phase]

    def tick(self) -> BreathPhase:
        """Advance one second; a finished session does not move"""
        if self.finished:
            return self.phase

        self.ticks += 1
        self.count -= 1
        if self.count < 1:
            self.count = COUNTS_PER_PHASE
            self.phase = _NEXT_PHASE[self.phase]
        return self.phase

    def stop(self) -> bool:
        """
        Finish the session

        Returns:
            True the first time, False if it was already stopped
        """
        if self.finished:
            return False
        self.finished = True
        logger.info(f"Breathing game stopped after {self.ticks}s")
        return True
