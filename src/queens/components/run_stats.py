from dataclasses import dataclass


@dataclass(slots=True)
class RunStats:
    """Aggregate counters derived from the relayed step events only."""
    solutions: int = 0
    current_row: int = 0
    attempts: int = 0

    def clear(self) -> None:
        self.solutions = 0
        self.current_row = 0
        self.attempts = 0
