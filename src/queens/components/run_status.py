"""Run lifecycle resource owned by the RunController."""
from dataclasses import dataclass
from enum import Enum, auto

from queens.constants import DEFAULT_BOARD_SIZE, DEFAULT_SPEED_MS


class RunState(Enum):
    """Lifecycle of one search run."""
    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()
    COMPLETED = auto()


@dataclass
class RunStatus:
    """Singleton component storing the current run state and settings."""
    state: RunState = RunState.IDLE
    size: int = DEFAULT_BOARD_SIZE
    delay_ms: int = DEFAULT_SPEED_MS
