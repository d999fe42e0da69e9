import pytest

from queens.components.control_button import ControlAction, ControlButton
from queens.components.run_status import RunState
from queens.constants import BOARD_SIZE_CHOICES, SPEED_CHOICES_MS
from queens.events.bus import EVENT_MOUSE_PRESS
from queens.systems.control_input_system import (
    KEY_DOWN,
    KEY_LEFT,
    KEY_R,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    ControlInputSystem,
    step_choice,
)
from queens.ui.control_bar import spawn_control_bar
from queens.utils.run_state import get_run_status
from tests.helpers import make_run


@pytest.fixture
def wired():
    world, bus, controller, recorder = make_run(5, delay_ms=500)
    spawn_control_bar(world, 1024)
    system = ControlInputSystem(world, bus)
    return world, bus, controller, system


def _button(world, action):
    for _, control in world.get_component(ControlButton):
        if control.action == action:
            return control
    raise AssertionError(f"no button for {action}")


def _click(bus, control, button=1):
    bus.emit(EVENT_MOUSE_PRESS, x=control.x, y=control.y, button=button)


def test_control_bar_has_one_button_per_action(wired):
    world, *_ = wired
    actions = [control.action for _, control in world.get_component(ControlButton)]
    assert sorted(actions, key=lambda a: a.value) == list(ControlAction)


def test_initial_buttons_offer_only_idle_transitions(wired):
    world, *_ = wired
    assert _button(world, ControlAction.START).enabled
    assert not _button(world, ControlAction.PAUSE_TOGGLE).enabled
    assert _button(world, ControlAction.SIZE_UP).enabled


def test_clicking_start_and_pause(wired):
    world, bus, controller, _ = wired
    _click(bus, _button(world, ControlAction.START))
    assert controller.state == RunState.RUNNING
    pause = _button(world, ControlAction.PAUSE_TOGGLE)
    assert pause.enabled and pause.label == "Pause"
    assert not _button(world, ControlAction.START).enabled
    _click(bus, pause)
    assert controller.state == RunState.PAUSED
    assert pause.label == "Resume"
    _click(bus, pause)
    assert controller.state == RunState.RUNNING


def test_disabled_buttons_and_other_mouse_buttons_do_nothing(wired):
    world, bus, controller, system = wired
    _click(bus, _button(world, ControlAction.PAUSE_TOGGLE))
    assert controller.state == RunState.IDLE
    _click(bus, _button(world, ControlAction.START), button=4)
    assert controller.state == RunState.IDLE
    assert system.handle_mouse_press(-100, -100) is None


def test_size_buttons_step_through_choices(wired):
    world, bus, controller, _ = wired
    _click(bus, _button(world, ControlAction.SIZE_UP))
    assert controller.size == 6
    _click(bus, _button(world, ControlAction.SIZE_DOWN))
    _click(bus, _button(world, ControlAction.SIZE_DOWN))
    assert controller.size == 4


def test_size_buttons_disabled_during_run(wired):
    world, bus, controller, _ = wired
    controller.start()
    size_up = _button(world, ControlAction.SIZE_UP)
    assert not size_up.enabled
    _click(bus, size_up)
    assert controller.size == 5


def test_restart_label_after_completion(wired):
    world, _, controller, _ = wired
    controller.start()
    controller.run_to_completion()
    start = _button(world, ControlAction.START)
    assert start.enabled
    assert start.label == "Restart"
    assert not _button(world, ControlAction.PAUSE_TOGGLE).enabled


def test_speed_buttons_change_the_delay(wired):
    world, bus, controller, _ = wired
    _click(bus, _button(world, ControlAction.SPEED_UP))
    assert controller.pacing.delay_ms == 250
    _click(bus, _button(world, ControlAction.SPEED_DOWN))
    _click(bus, _button(world, ControlAction.SPEED_DOWN))
    assert controller.pacing.delay_ms == 1000
    assert get_run_status(world).delay_ms == 1000


def test_space_starts_then_toggles_pause(wired):
    _, _, controller, system = wired
    system.handle_key_press(KEY_SPACE)
    assert controller.state == RunState.RUNNING
    system.handle_key_press(KEY_SPACE)
    assert controller.state == RunState.PAUSED
    system.handle_key_press(KEY_SPACE)
    assert controller.state == RunState.RUNNING
    system.handle_key_press(KEY_R)
    assert controller.state == RunState.IDLE


def test_arrow_keys_change_size_and_speed(wired):
    _, _, controller, system = wired
    system.handle_key_press(KEY_UP)
    assert controller.size == 6
    system.handle_key_press(KEY_DOWN)
    assert controller.size == 5
    system.handle_key_press(KEY_RIGHT)
    assert controller.pacing.delay_ms == 250
    system.handle_key_press(KEY_LEFT)
    assert controller.pacing.delay_ms == 500


def test_step_choice_clamps_at_the_ends():
    assert step_choice(BOARD_SIZE_CHOICES, BOARD_SIZE_CHOICES[-1], 1) == BOARD_SIZE_CHOICES[-1]
    assert step_choice(BOARD_SIZE_CHOICES, BOARD_SIZE_CHOICES[0], -1) == BOARD_SIZE_CHOICES[0]
    assert step_choice(SPEED_CHOICES_MS, 0, 1) == 0


def test_step_choice_snaps_unknown_values():
    assert step_choice(SPEED_CHOICES_MS, 480, 0) == 500
    assert step_choice(SPEED_CHOICES_MS, 480, 1) == 250
    assert step_choice(BOARD_SIZE_CHOICES, 40, -1) == BOARD_SIZE_CHOICES[-2]
