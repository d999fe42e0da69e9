"""Headless runner: watch the search in the terminal instead of a window.

Run with: ``queens-solve --size 6`` (or ``python -m queens.cli``).
"""
from __future__ import annotations

import argparse
import time
from typing import Sequence

from loguru import logger

from queens.components.run_status import RunState
from queens.constants import DEFAULT_BOARD_SIZE
from queens.errors import ConfigError
from queens.events.bus import (
    EVENT_SEARCH_ATTEMPT,
    EVENT_SEARCH_PLACE,
    EVENT_SEARCH_REMOVE,
    EVENT_SEARCH_SAFETY,
    EVENT_SEARCH_SOLUTION,
    EVENT_TICK,
    EventBus,
)
from queens.log import configure_logging
from queens.rendering.text import format_solution
from queens.systems.board_view_system import BoardViewSystem
from queens.systems.run_controller import RunController
from queens.world import create_world

TICK_SECONDS = 1 / 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enumerate N-Queens solutions by backtracking, step by step.")
    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help="Board size N (>= 1)")
    parser.add_argument(
        "--speed",
        type=int,
        default=0,
        help="Delay between steps in milliseconds; 0 runs without pacing",
    )
    parser.add_argument(
        "--show-steps",
        action="store_true",
        help="Log every attempt / verdict / placement / removal",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the summary, not every solution board",
    )
    parser.add_argument("--log-level", default="INFO", help="loguru level (TRACE, DEBUG, INFO, ...)")
    return parser


class StepPrinter:
    """Text renderer subscribed to the relayed search events."""

    def __init__(self, event_bus: EventBus, *, show_steps: bool, show_boards: bool):
        self.show_steps = show_steps
        self.show_boards = show_boards
        event_bus.subscribe(EVENT_SEARCH_SOLUTION, self.on_solution)
        if show_steps:
            event_bus.subscribe(EVENT_SEARCH_ATTEMPT, self.on_attempt)
            event_bus.subscribe(EVENT_SEARCH_SAFETY, self.on_safety)
            event_bus.subscribe(EVENT_SEARCH_PLACE, self.on_place)
            event_bus.subscribe(EVENT_SEARCH_REMOVE, self.on_remove)

    def on_attempt(self, sender, **kwargs):
        logger.info("try    ({row}, {col})", **kwargs)

    def on_safety(self, sender, **kwargs):
        verdict = "safe" if kwargs.get('safe') else "unsafe"
        logger.info("{verdict: <6} ({row}, {col})", verdict=verdict, row=kwargs.get('row'), col=kwargs.get('col'))

    def on_place(self, sender, **kwargs):
        logger.info("place  ({row}, {col})", **kwargs)

    def on_remove(self, sender, **kwargs):
        logger.info("remove ({row}, {col})", **kwargs)

    def on_solution(self, sender, **kwargs):
        if self.show_boards:
            print(format_solution(kwargs['index'], kwargs['snapshot']), end="\n\n", flush=True)


def build_run(size: int, speed: int, *, show_steps: bool = False, show_boards: bool = True):
    event_bus = EventBus()
    world = create_world(size, delay_ms=speed)
    controller = RunController(world, event_bus)
    BoardViewSystem(world, event_bus)
    StepPrinter(event_bus, show_steps=show_steps, show_boards=show_boards)
    return event_bus, controller


def drive(event_bus: EventBus, controller: RunController) -> None:
    """Start the run and tick it with wall-clock time until it completes."""
    controller.start()
    if controller.pacing.delay_ms == 0:
        controller.run_to_completion()
        return
    last = time.monotonic()
    while controller.state == RunState.RUNNING:
        time.sleep(TICK_SECONDS)
        now = time.monotonic()
        event_bus.emit(EVENT_TICK, dt=now - last)
        last = now


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
        event_bus, controller = build_run(
            args.size,
            args.speed,
            show_steps=args.show_steps,
            show_boards=not args.quiet,
        )
    except ConfigError as exc:
        logger.error("{err}", err=exc)
        return 2
    try:
        drive(event_bus, controller)
    except KeyboardInterrupt:
        controller.reset()
        logger.warning("interrupted; run cancelled")
        return 130
    stats = controller.stats
    print(f"{controller.size}x{controller.size}: {stats.solutions} solutions, {stats.attempts} attempts")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
