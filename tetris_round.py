
"""Menu -> Playing -> GameOver -> Menu cycle"""
import logging
from enum import Enum
from typing import Optional

from tetris_config import CONFIG
from tetris_engine import RoundSettings, RoundState, new_round

log = logging.getLogger(__name__)


class Phase(str, Enum):
    MENU = "MENU"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class RoundMachine:
    """
    One-directional cycle around a single round at a time.

    confirm() leaves the menu with a fresh RoundState, finish() records the
    final score, advance() drops back into the menu. Scores are kept for the
    lifetime of the process only.
    """

    def __init__(self, config: Optional[dict] = None):
        self.config = config if config is not None else CONFIG
        self.phase = Phase.MENU
        self.state: Optional[RoundState] = None
        self.last_score: Optional[int] = None
        self.best_score = 0
        self.rounds = 0

    def _expect(self, phase: Phase):
        if self.phase != phase:
            raise RuntimeError(f"expected {phase.value}, machine is in {self.phase.value}")

    def confirm(self) -> RoundState:
        self._expect(Phase.MENU)
        seed = self.config.get("SEED")
        if seed is not None:
            seed = int(seed) + self.rounds
        self.state = new_round(RoundSettings.from_config(self.config), seed)
        self.rounds += 1
        self.phase = Phase.PLAYING
        return self.state

    def finish(self) -> int:
        self._expect(Phase.PLAYING)
        score = self.state.score
        self.last_score = score
        self.best_score = max(self.best_score, score)
        self.state = None
        self.phase = Phase.GAME_OVER
        log.info("round %d finished with %d points (best %d)", self.rounds, score, self.best_score)
        return score

    def advance(self):
        self._expect(Phase.GAME_OVER)
        self.phase = Phase.MENU
