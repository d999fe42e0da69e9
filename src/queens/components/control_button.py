"""Components for the run control bar."""
from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    START = auto()
    PAUSE_TOGGLE = auto()
    RESET = auto()
    SIZE_DOWN = auto()
    SIZE_UP = auto()
    SPEED_DOWN = auto()
    SPEED_UP = auto()


@dataclass
class ControlButton:
    """Clickable button in the control bar; ``x``/``y`` is its centre."""
    label: str
    action: ControlAction
    x: float
    y: float
    width: float = 120.0
    height: float = 44.0
    enabled: bool = True

    def contains(self, x: float, y: float) -> bool:
        return (
            abs(x - self.x) <= self.width / 2
            and abs(y - self.y) <= self.height / 2
        )
