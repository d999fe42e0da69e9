from __future__ import annotations

from esper import World

from queens.components.board_view import BoardView
from queens.components.run_stats import RunStats
from queens.components.run_status import RunState, RunStatus
from queens.events.bus import EVENT_RUN_STATE_CHANGED, EventBus


def get_run_status(world: World) -> RunStatus | None:
    for _, status in world.get_component(RunStatus):
        return status
    return None


def get_run_stats(world: World) -> RunStats | None:
    for _, stats in world.get_component(RunStats):
        return stats
    return None


def get_board_view(world: World) -> BoardView | None:
    for _, view in world.get_component(BoardView):
        return view
    return None


def set_run_state(world: World, event_bus: EventBus, state: RunState) -> None:
    """Update the run state and emit a change event when it differs."""

    status = get_run_status(world)
    if status is None:
        status = RunStatus(state=state)
        world.create_entity(status, RunStats())
        event_bus.emit(EVENT_RUN_STATE_CHANGED, previous_state=None, new_state=state)
        return
    previous_state = status.state
    if previous_state == state:
        return
    status.state = state
    event_bus.emit(EVENT_RUN_STATE_CHANGED, previous_state=previous_state, new_state=state)
