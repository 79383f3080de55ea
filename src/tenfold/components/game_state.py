"""Round phase resource describing where the round lifecycle stands."""
from dataclasses import dataclass
from enum import Enum, auto


class RoundPhase(Enum):
    """Lifecycle phases; ENDED is terminal until the next start."""
    IDLE = auto()
    RUNNING = auto()
    ENDED = auto()


@dataclass
class GameState:
    """Singleton component storing the current round phase."""
    phase: RoundPhase = RoundPhase.IDLE
