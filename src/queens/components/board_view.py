from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(slots=True)
class CellHighlight:
    row: int
    col: int
    kind: str  # 'current' | 'safe' | 'unsafe'


@dataclass(slots=True)
class BoardView:
    """Renderer-side picture of the board, rebuilt from step events.

    Never shares state with the engine: queens, highlight and solutions are
    whatever the event stream has reported so far.
    """
    size: int
    queens: List[Optional[int]] = field(default_factory=list)
    highlight: CellHighlight | None = None
    solutions: List[Tuple[int, ...]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.queens:
            self.queens = [None] * self.size

    def clear(self, size: int | None = None) -> None:
        if size is not None:
            self.size = size
        self.queens = [None] * self.size
        self.highlight = None
        self.solutions = []

    def has_queen(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.queens) and self.queens[row] == col
