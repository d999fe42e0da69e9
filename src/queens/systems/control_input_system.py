"""Input handling for the run control bar."""
from __future__ import annotations

from esper import World

from queens.components.control_button import ControlAction, ControlButton
from queens.components.run_status import RunState
from queens.constants import BOARD_SIZE_CHOICES, SPEED_CHOICES_MS
from queens.events.bus import (
    EVENT_BOARD_SIZE_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_RUN_PAUSE_TOGGLE_REQUEST,
    EVENT_RUN_RESET_REQUEST,
    EVENT_RUN_START_REQUEST,
    EVENT_RUN_STATE_CHANGED,
    EVENT_SPEED_REQUEST,
    EventBus,
)
from queens.utils.run_state import get_run_status

# Arcade key codes; kept as literals so input handling does not import arcade.
KEY_SPACE = 32
KEY_R = 114
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364

LEFT_BUTTON = 1


def step_choice(choices: tuple[int, ...], current: int, direction: int) -> int:
    """Return the neighbour of ``current`` in ``choices`` (clamped at the ends).

    A value that is not one of the choices snaps to the closest one first.
    """
    if current in choices:
        index = choices.index(current)
    else:
        index = min(range(len(choices)), key=lambda i: abs(choices[i] - current))
    index = max(0, min(len(choices) - 1, index + direction))
    return choices[index]


class ControlInputSystem:
    """Turns clicks on control buttons and key presses into run requests."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_RUN_STATE_CHANGED, self.on_run_state_changed)
        status = get_run_status(world)
        self.refresh_buttons(status.state if status else RunState.IDLE)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button != LEFT_BUTTON:
            return
        self.handle_mouse_press(float(x), float(y))

    def handle_mouse_press(self, x: float, y: float) -> ControlAction | None:
        for _, control in self.world.get_component(ControlButton):
            if control.enabled and control.contains(x, y):
                self.activate(control.action)
                return control.action
        return None

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        if symbol == KEY_SPACE:
            state = self._state()
            if state in (RunState.RUNNING, RunState.PAUSED):
                self.activate(ControlAction.PAUSE_TOGGLE)
            else:
                self.activate(ControlAction.START)
        elif symbol == KEY_R:
            self.activate(ControlAction.RESET)
        elif symbol == KEY_UP:
            self.activate(ControlAction.SIZE_UP)
        elif symbol == KEY_DOWN:
            self.activate(ControlAction.SIZE_DOWN)
        elif symbol == KEY_RIGHT:
            self.activate(ControlAction.SPEED_UP)
        elif symbol == KEY_LEFT:
            self.activate(ControlAction.SPEED_DOWN)

    def activate(self, action: ControlAction) -> None:
        if action == ControlAction.START:
            self.event_bus.emit(EVENT_RUN_START_REQUEST)
        elif action == ControlAction.PAUSE_TOGGLE:
            self.event_bus.emit(EVENT_RUN_PAUSE_TOGGLE_REQUEST)
        elif action == ControlAction.RESET:
            self.event_bus.emit(EVENT_RUN_RESET_REQUEST)
        elif action in (ControlAction.SIZE_DOWN, ControlAction.SIZE_UP):
            status = get_run_status(self.world)
            if status is None:
                return
            direction = 1 if action == ControlAction.SIZE_UP else -1
            size = step_choice(BOARD_SIZE_CHOICES, status.size, direction)
            if size != status.size:
                self.event_bus.emit(EVENT_BOARD_SIZE_REQUEST, size=size)
        elif action in (ControlAction.SPEED_DOWN, ControlAction.SPEED_UP):
            status = get_run_status(self.world)
            if status is None:
                return
            # SPEED_CHOICES_MS runs from slowest to fastest.
            direction = 1 if action == ControlAction.SPEED_UP else -1
            delay_ms = step_choice(SPEED_CHOICES_MS, status.delay_ms, direction)
            if delay_ms != status.delay_ms:
                self.event_bus.emit(EVENT_SPEED_REQUEST, delay_ms=delay_ms)

    def on_run_state_changed(self, sender, **payload) -> None:
        new_state = payload.get("new_state")
        if isinstance(new_state, RunState):
            self.refresh_buttons(new_state)

    def refresh_buttons(self, state: RunState) -> None:
        """Enable / relabel buttons so they only offer valid transitions."""
        idle = state in (RunState.IDLE, RunState.COMPLETED)
        for _, control in self.world.get_component(ControlButton):
            if control.action == ControlAction.START:
                control.enabled = idle
                control.label = "Restart" if state == RunState.COMPLETED else "Start"
            elif control.action == ControlAction.PAUSE_TOGGLE:
                control.enabled = not idle
                control.label = "Resume" if state == RunState.PAUSED else "Pause"
            elif control.action in (ControlAction.SIZE_DOWN, ControlAction.SIZE_UP):
                control.enabled = idle

    def _state(self) -> RunState:
        status = get_run_status(self.world)
        return status.state if status else RunState.IDLE
