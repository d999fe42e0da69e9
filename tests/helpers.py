from __future__ import annotations

from typing import Any

from esper import World

from queens.events.bus import EVENT_SEARCH_SOLUTION, SEARCH_STEP_EVENTS, EventBus
from queens.systems.board_view_system import BoardViewSystem
from queens.systems.run_controller import RunController
from queens.world import create_world


class StepRecorder:
    """Collects every relayed search step as ``(event_name, payload)`` in bus order."""

    def __init__(self, event_bus: EventBus) -> None:
        self.steps: list[tuple[str, dict[str, Any]]] = []
        for name in SEARCH_STEP_EVENTS:
            event_bus.subscribe(name, self._make_handler(name))

    def _make_handler(self, name: str):
        def handler(sender, **payload):
            self.steps.append((name, payload))
        return handler

    def names(self) -> list[str]:
        return [name for name, _ in self.steps]

    def solutions(self) -> list[tuple[int, ...]]:
        return [payload["snapshot"] for name, payload in self.steps if name == EVENT_SEARCH_SOLUTION]

    def __len__(self) -> int:
        return len(self.steps)


def make_run(size: int, delay_ms: int = 0) -> tuple[World, EventBus, RunController, StepRecorder]:
    """World + bus + controller + board mirror, wired the way the window wires them."""
    bus = EventBus()
    world = create_world(size, delay_ms=delay_ms)
    controller = RunController(world, bus)
    BoardViewSystem(world, bus)
    recorder = StepRecorder(bus)
    return world, bus, controller, recorder
