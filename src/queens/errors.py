"""Error kinds raised by the search engine and the run controller."""
from __future__ import annotations


class QueensError(Exception):
    """Base class for all errors raised by the queens package."""


class ConfigError(QueensError, ValueError):
    """Invalid board size / speed, or reconfiguration while a run is active.

    Raised before any state is touched, so the caller can simply retry with a
    valid value.
    """


class InvalidTransitionError(QueensError):
    """A lifecycle request that the current run state does not allow."""

    def __init__(self, action: str, state) -> None:
        self.action = action
        self.state = state
        name = getattr(state, "name", str(state))
        super().__init__(f"cannot {action} while {name.lower()}")
