"""Row-by-row backtracking search for N non-attacking queens.

The search is a generator: every action it takes (testing a cell, deciding
whether it is safe, placing or removing a queen, recording a solution) is
yielded as one step event, in the order it happens. Whoever iterates the
generator decides how fast the search advances; pausing and cancelling go
through the :class:`ControlSignals` token checked before each column.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Tuple

from loguru import logger

from queens.constants import DEFAULT_BOARD_SIZE
from queens.engine.signals import ControlSignals
from queens.engine.steps import (
    AttemptEvent,
    PlaceEvent,
    RemoveEvent,
    SafetyEvent,
    Solution,
    SolutionEvent,
    StepEvent,
)
from queens.errors import ConfigError

EventCallback = Callable[[StepEvent], None]


def validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigError(f"board size must be an integer, got {size!r}")
    if size < 1:
        raise ConfigError(f"board size must be at least 1, got {size}")
    return size


class SearchEngine:
    """Owns the board and enumerates every solution by backtracking."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        self._size = validate_size(size)
        self._board: List[Optional[int]] = [None] * self._size
        self._solutions: List[Solution] = []
        self.attempt_count = 0
        self.current_row = 0
        self.deepest_row = 0
        self._active = False
        self._cancelled = False

    @property
    def size(self) -> int:
        return self._size

    @property
    def board(self) -> Tuple[Optional[int], ...]:
        return tuple(self._board)

    @property
    def solutions(self) -> Tuple[Solution, ...]:
        return tuple(self._solutions)

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def was_cancelled(self) -> bool:
        """True when the most recent run unwound because of a cancel."""
        return self._cancelled

    def configure(self, size: int) -> None:
        """Reset to ``size`` unassigned rows, dropping solutions and counters."""
        size = validate_size(size)
        if self._active:
            raise ConfigError("cannot reconfigure while a run is active")
        self._size = size
        self._reset_state()
        self._cancelled = False

    def _reset_state(self) -> None:
        self._board = [None] * self._size
        self._solutions = []
        self.attempt_count = 0
        self.current_row = 0
        self.deepest_row = 0

    def is_safe(self, row: int, col: int) -> bool:
        for i in range(row):
            placed = self._board[i]
            if placed is None:
                continue
            if placed == col or abs(placed - col) == abs(i - row):
                return False
        return True

    def run(
        self,
        signals: ControlSignals | None = None,
        on_event: EventCallback | None = None,
    ) -> Iterator[StepEvent]:
        """Start a fresh search and return the lazy stream of its step events.

        ``on_event`` (if given) sees every event just before it is yielded.
        """
        if self._active:
            raise ConfigError("a run is already active")
        return self._search(signals or ControlSignals(), on_event)

    def _search(self, signals: ControlSignals, on_event: EventCallback | None) -> Iterator[StepEvent]:
        if self._active:
            raise ConfigError("a run is already active")
        self._active = True
        self._cancelled = False
        self._reset_state()
        logger.debug("search started on a {n}x{n} board", n=self._size)
        try:
            finished = yield from self._explore(0, signals, on_event)
        except GeneratorExit:
            # Consumer abandoned the stream; treat it like a cancel.
            self._cancelled = True
            raise
        finally:
            self._active = False
        self._cancelled = not finished
        if finished:
            logger.debug(
                "search finished: {solutions} solutions after {attempts} attempts",
                solutions=len(self._solutions),
                attempts=self.attempt_count,
            )
        else:
            logger.debug("search cancelled after {attempts} attempts", attempts=self.attempt_count)

    def _explore(self, row: int, signals: ControlSignals, on_event: EventCallback | None):
        """Fill ``row`` and everything below it; return False if cancelled."""
        if row == self._size:
            snapshot: Solution = tuple(self._board)  # type: ignore[arg-type]
            self._solutions.append(snapshot)
            yield self._report(SolutionEvent(index=len(self._solutions) - 1, snapshot=snapshot), on_event)
            return True

        self.current_row = row
        self.deepest_row = max(self.deepest_row, row)
        for col in range(self._size):
            if not signals.checkpoint():
                return False
            self.attempt_count += 1
            yield self._report(AttemptEvent(row=row, col=col), on_event)
            safe = self.is_safe(row, col)
            yield self._report(SafetyEvent(row=row, col=col, safe=safe), on_event)
            if not safe:
                continue
            self._board[row] = col
            yield self._report(PlaceEvent(row=row, col=col), on_event)
            finished = yield from self._explore(row + 1, signals, on_event)
            # Backtrack whether or not the subtree produced a solution.
            self._board[row] = None
            self.current_row = row
            yield self._report(RemoveEvent(row=row, col=col), on_event)
            if not finished:
                return False
        return True

    @staticmethod
    def _report(event: StepEvent, on_event: EventCallback | None) -> StepEvent:
        logger.trace("{event}", event=event)
        if on_event is not None:
            on_event(event)
        return event
