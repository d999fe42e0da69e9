from __future__ import annotations

from esper import World

from queens.components.board_view import BoardView
from queens.components.control_button import ControlButton
from queens.components.run_stats import RunStats
from queens.components.run_status import RunState, RunStatus
from queens.constants import SIDE_GAP, THUMBNAIL_CELL, TOP_MARGIN
from queens.events.bus import EVENT_RUN_STATE_CHANGED, EventBus
from queens.rendering.board_renderer import BoardRenderer
from queens.ui.layout import BoardGeometry, compute_board_geometry, compute_thumbnail_layout
from queens.utils.run_state import get_board_view, get_run_stats, get_run_status

STATE_LABELS = {
    RunState.IDLE: "Ready",
    RunState.RUNNING: "Searching...",
    RunState.PAUSED: "Paused",
    RunState.COMPLETED: "Done",
}


class RenderSystem:
    """Draws the board mirror, run stats, control bar and solution thumbnails."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._board_renderer = BoardRenderer()
        self._state_label = STATE_LABELS[RunState.IDLE]
        event_bus.subscribe(EVENT_RUN_STATE_CHANGED, self.on_run_state_changed)

    def on_run_state_changed(self, sender, **kwargs):
        new_state = kwargs.get('new_state')
        self._state_label = STATE_LABELS.get(new_state, self._state_label)

    def layout(self) -> BoardGeometry | None:
        view = get_board_view(self.world)
        if view is None:
            return None
        return compute_board_geometry(self.window.width, self.window.height, view.size)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        geometry = self.layout()
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if geometry is None or headless:
            return
        view: BoardView = get_board_view(self.world)
        self._board_renderer.render(arcade, view, geometry)
        self._draw_stats(arcade, geometry, get_run_status(self.world), get_run_stats(self.world))
        self._draw_solutions(arcade, geometry, view)
        self._draw_controls(arcade)

    def _draw_stats(self, arcade, geometry: BoardGeometry, status: RunStatus | None, stats: RunStats | None):
        if status is None or stats is None:
            return
        row_label = stats.current_row + 1 if status.state != RunState.IDLE else 0
        lines = (
            f"{status.size}x{status.size}  |  {self._state_label}",
            f"Solutions: {stats.solutions}   Row: {row_label}   Attempts: {stats.attempts}",
            f"Step delay: {status.delay_ms} ms",
        )
        y = self.window.height - TOP_MARGIN / 2
        for index, line in enumerate(lines[:2]):
            arcade.draw_text(line, geometry.left, y - index * 22, arcade.color.WHITE, 16, anchor_y="center")
        arcade.draw_text(lines[2], geometry.right + SIDE_GAP, y, arcade.color.LIGHT_GRAY, 14, anchor_y="center")

    def _draw_solutions(self, arcade, geometry: BoardGeometry, view: BoardView):
        area_left = geometry.right + SIDE_GAP
        area_top = geometry.top
        area_width = self.window.width - area_left - SIDE_GAP
        positions = compute_thumbnail_layout(len(view.solutions), view.size, area_left, area_top, area_width)
        thumb = THUMBNAIL_CELL * view.size
        for snapshot, (left, top) in zip(view.solutions, positions):
            if top - thumb < 0 or len(snapshot) != view.size:
                continue
            self._board_renderer.render_thumbnail(arcade, snapshot, left, top)

    def _draw_controls(self, arcade):
        for _, button in self.world.get_component(ControlButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = arcade.color.DARK_SLATE_BLUE if button.enabled else arcade.color.GRAY_BLUE
            text_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, text_color, border_width=2)
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                text_color,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
