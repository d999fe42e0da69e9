from esper import World

from queens.components.board_view import BoardView
from queens.components.run_stats import RunStats
from queens.components.run_status import RunState, RunStatus
from queens.constants import DEFAULT_BOARD_SIZE, DEFAULT_SPEED_MS
from queens.engine.pacing import validate_delay
from queens.engine.search import validate_size


def create_world(
    size: int = DEFAULT_BOARD_SIZE,
    *,
    delay_ms: int = DEFAULT_SPEED_MS,
) -> World:
    """Build the world holding the run resources shared by all systems."""
    size = validate_size(size)
    delay_ms = validate_delay(delay_ms)
    world = World()

    # Run lifecycle + derived counters, written only by the RunController.
    state_entity = world.create_entity()
    world.add_component(state_entity, RunStatus(state=RunState.IDLE, size=size, delay_ms=delay_ms))
    world.add_component(state_entity, RunStats())

    # Board mirror, written only by the BoardViewSystem.
    view_entity = world.create_entity()
    world.add_component(view_entity, BoardView(size=size))
    return world
