"""Factory helpers for the run control bar entities."""
from esper import World

from queens.components.control_button import ControlAction, ControlButton
from queens.constants import BOTTOM_MARGIN, CONTROL_BUTTON_HEIGHT, CONTROL_BUTTON_WIDTH
from queens.ui.layout import compute_control_positions

BUTTON_SPECS = (
    ("Start", ControlAction.START),
    ("Pause", ControlAction.PAUSE_TOGGLE),
    ("Reset", ControlAction.RESET),
    ("Size -", ControlAction.SIZE_DOWN),
    ("Size +", ControlAction.SIZE_UP),
    ("Slower", ControlAction.SPEED_DOWN),
    ("Faster", ControlAction.SPEED_UP),
)


def spawn_control_bar(world: World, width: int) -> list[int]:
    """Create one ControlButton entity per action, centred along the bottom edge."""
    y = BOTTOM_MARGIN / 2
    positions = compute_control_positions(len(BUTTON_SPECS), width / 2, y)
    entities: list[int] = []
    for (label, action), (x, y_pos) in zip(BUTTON_SPECS, positions):
        entities.append(
            world.create_entity(
                ControlButton(
                    label=label,
                    action=action,
                    x=x,
                    y=y_pos,
                    width=CONTROL_BUTTON_WIDTH,
                    height=CONTROL_BUTTON_HEIGHT,
                    enabled=action != ControlAction.PAUSE_TOGGLE,
                )
            )
        )
    return entities
