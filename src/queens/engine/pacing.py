from __future__ import annotations

from dataclasses import dataclass

from queens.constants import DEFAULT_SPEED_MS, SOLUTION_HOLD_MS
from queens.engine.steps import SafetyEvent, SolutionEvent, StepEvent
from queens.errors import ConfigError


def validate_delay(delay_ms) -> int:
    if isinstance(delay_ms, bool):
        raise ConfigError(f"invalid delay: {delay_ms!r}")
    try:
        value = int(delay_ms)
    except (TypeError, ValueError):
        raise ConfigError(f"invalid delay: {delay_ms!r}") from None
    if value != delay_ms or value < 0:
        raise ConfigError(f"delay must be a non-negative whole number of milliseconds, got {delay_ms!r}")
    return value


@dataclass(slots=True)
class Pacing:
    """Adjustable inter-step delay consulted after every reported event.

    A rejected verdict lingers half as long as the other steps and a found
    solution is held for ``solution_hold_ms``. A zero delay disables all
    waiting, solution hold included.
    """

    delay_ms: int = DEFAULT_SPEED_MS
    solution_hold_ms: int = SOLUTION_HOLD_MS

    def __post_init__(self) -> None:
        self.delay_ms = validate_delay(self.delay_ms)
        self.solution_hold_ms = validate_delay(self.solution_hold_ms)

    def set_delay(self, delay_ms: int) -> None:
        self.delay_ms = validate_delay(delay_ms)

    def delay_for(self, event: StepEvent) -> float:
        """Milliseconds to wait after ``event`` before the next one."""
        if self.delay_ms == 0:
            return 0.0
        if isinstance(event, SafetyEvent):
            return 0.0 if event.safe else self.delay_ms / 2
        if isinstance(event, SolutionEvent):
            return float(max(self.delay_ms, self.solution_hold_ms))
        return float(self.delay_ms)
