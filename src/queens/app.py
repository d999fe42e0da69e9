"""Arcade window for the N-Queens backtracking visualiser.

Wires the ECS world and its systems to an Arcade window.
"""
from arcade import Window, run, set_background_color, color

from queens.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from queens.events.bus import EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from queens.log import configure_logging
from queens.rendering.render_system import RenderSystem
from queens.systems.board_view_system import BoardViewSystem
from queens.systems.control_input_system import ControlInputSystem
from queens.systems.run_controller import RunController
from queens.ui.control_bar import spawn_control_bar
from queens.world import create_world


class QueensWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()

        # Core: lifecycle + engine relay
        self.run_controller = RunController(self.world, self.event_bus)

        # Renderer side: mirror, controls, drawing
        self.board_view_system = BoardViewSystem(self.world, self.event_bus)
        spawn_control_bar(self.world, self.width)
        self.control_input_system = ControlInputSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.control_input_system.handle_key_press(symbol, modifiers)


def main():
    configure_logging("INFO")
    window = QueensWindow()
    run()
