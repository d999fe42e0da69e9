from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float seconds


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button


# ============================================================================
# SEARCH STEPS (relayed verbatim from the engine)
# ============================================================================
EVENT_SEARCH_ATTEMPT = "search_attempt"            # payload: row, col
EVENT_SEARCH_SAFETY = "search_safety"              # payload: row, col, safe=bool
EVENT_SEARCH_PLACE = "search_place"                # payload: row, col
EVENT_SEARCH_REMOVE = "search_remove"              # payload: row, col
EVENT_SEARCH_SOLUTION = "search_solution"          # payload: index=int, snapshot=tuple[int, ...]

SEARCH_STEP_EVENTS = (
    EVENT_SEARCH_ATTEMPT,
    EVENT_SEARCH_SAFETY,
    EVENT_SEARCH_PLACE,
    EVENT_SEARCH_REMOVE,
    EVENT_SEARCH_SOLUTION,
)


# ============================================================================
# RUN LIFECYCLE
# ============================================================================
EVENT_RUN_STATE_CHANGED = "run_state_changed"      # payload: previous_state, new_state
EVENT_RUN_STARTED = "run_started"                  # payload: size=int
EVENT_RUN_RESET = "run_reset"                      # payload: size=int
EVENT_RUN_COMPLETED = "run_completed"              # payload: size, solutions, attempts
EVENT_SPEED_CHANGED = "speed_changed"              # payload: delay_ms=int


# ============================================================================
# CONTROL REQUESTS (buttons / keys -> RunController)
# ============================================================================
EVENT_RUN_START_REQUEST = "run_start_request"      # payload: (none)
EVENT_RUN_PAUSE_TOGGLE_REQUEST = "run_pause_toggle_request"  # payload: (none)
EVENT_RUN_RESET_REQUEST = "run_reset_request"      # payload: (none)
EVENT_BOARD_SIZE_REQUEST = "board_size_request"    # payload: size=int
EVENT_SPEED_REQUEST = "speed_request"              # payload: delay_ms=int
