"""Backtracking search engine and the collaborators a run needs."""

from .pacing import Pacing
from .search import SearchEngine
from .signals import ControlSignals
from .steps import (
    AttemptEvent,
    PlaceEvent,
    RemoveEvent,
    SafetyEvent,
    Solution,
    SolutionEvent,
    StepEvent,
)

__all__ = [
    "AttemptEvent",
    "ControlSignals",
    "Pacing",
    "PlaceEvent",
    "RemoveEvent",
    "SafetyEvent",
    "SearchEngine",
    "Solution",
    "SolutionEvent",
    "StepEvent",
]
