from esper import World

from queens.components.board_view import BoardView, CellHighlight
from queens.events.bus import (
    EVENT_RUN_RESET,
    EVENT_RUN_STARTED,
    EVENT_SEARCH_ATTEMPT,
    EVENT_SEARCH_PLACE,
    EVENT_SEARCH_REMOVE,
    EVENT_SEARCH_SAFETY,
    EVENT_SEARCH_SOLUTION,
    EventBus,
)


class BoardViewSystem:
    """Keeps the renderer's BoardView in step with the relayed search events."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_RUN_STARTED, self.on_run_started)
        event_bus.subscribe(EVENT_RUN_RESET, self.on_run_reset)
        event_bus.subscribe(EVENT_SEARCH_ATTEMPT, self.on_attempt)
        event_bus.subscribe(EVENT_SEARCH_SAFETY, self.on_safety)
        event_bus.subscribe(EVENT_SEARCH_PLACE, self.on_place)
        event_bus.subscribe(EVENT_SEARCH_REMOVE, self.on_remove)
        event_bus.subscribe(EVENT_SEARCH_SOLUTION, self.on_solution)

    def _view(self) -> BoardView:
        for _, view in self.world.get_component(BoardView):
            return view
        view = BoardView(size=1)
        self.world.create_entity(view)
        return view

    def on_run_started(self, sender, **kwargs):
        view = self._view()
        view.clear(kwargs.get('size', view.size))

    def on_run_reset(self, sender, **kwargs):
        view = self._view()
        view.clear(kwargs.get('size', view.size))

    def on_attempt(self, sender, **kwargs):
        row = kwargs.get('row'); col = kwargs.get('col')
        if row is None or col is None:
            return
        self._view().highlight = CellHighlight(row=row, col=col, kind='current')

    def on_safety(self, sender, **kwargs):
        row = kwargs.get('row'); col = kwargs.get('col')
        if row is None or col is None:
            return
        kind = 'safe' if kwargs.get('safe') else 'unsafe'
        self._view().highlight = CellHighlight(row=row, col=col, kind=kind)

    def on_place(self, sender, **kwargs):
        row = kwargs.get('row'); col = kwargs.get('col')
        view = self._view()
        if row is None or col is None or not 0 <= row < view.size:
            return
        view.queens[row] = col
        view.highlight = None

    def on_remove(self, sender, **kwargs):
        row = kwargs.get('row')
        view = self._view()
        if row is None or not 0 <= row < view.size:
            return
        view.queens[row] = None
        view.highlight = None

    def on_solution(self, sender, **kwargs):
        snapshot = kwargs.get('snapshot')
        if snapshot is None:
            return
        self._view().solutions.append(tuple(snapshot))
