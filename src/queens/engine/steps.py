"""Step events reported by the search engine, one per algorithm action."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple, Union

from queens.events.bus import (
    EVENT_SEARCH_ATTEMPT,
    EVENT_SEARCH_PLACE,
    EVENT_SEARCH_REMOVE,
    EVENT_SEARCH_SAFETY,
    EVENT_SEARCH_SOLUTION,
)

Solution = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class AttemptEvent:
    """The cell ``(row, col)`` is about to be tested."""
    bus_event: ClassVar[str] = EVENT_SEARCH_ATTEMPT
    row: int
    col: int

    def payload(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True, slots=True)
class SafetyEvent:
    bus_event: ClassVar[str] = EVENT_SEARCH_SAFETY
    row: int
    col: int
    safe: bool

    def payload(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "safe": self.safe}


@dataclass(frozen=True, slots=True)
class PlaceEvent:
    bus_event: ClassVar[str] = EVENT_SEARCH_PLACE
    row: int
    col: int

    def payload(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True, slots=True)
class RemoveEvent:
    """A queen is taken back off ``(row, col)`` while backtracking."""
    bus_event: ClassVar[str] = EVENT_SEARCH_REMOVE
    row: int
    col: int

    def payload(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True, slots=True)
class SolutionEvent:
    """A complete placement was found.

    ``index`` is the zero-based discovery position and ``snapshot`` holds the
    queen column for every row.
    """
    bus_event: ClassVar[str] = EVENT_SEARCH_SOLUTION
    index: int
    snapshot: Solution

    def payload(self) -> Dict[str, Any]:
        return {"index": self.index, "snapshot": self.snapshot}


StepEvent = Union[AttemptEvent, SafetyEvent, PlaceEvent, RemoveEvent, SolutionEvent]
