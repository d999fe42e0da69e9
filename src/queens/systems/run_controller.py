from __future__ import annotations

from typing import Iterator

from esper import World
from loguru import logger

from queens.components.run_stats import RunStats
from queens.components.run_status import RunState, RunStatus
from queens.constants import MAX_STEPS_PER_TICK
from queens.engine.pacing import Pacing
from queens.engine.search import SearchEngine, validate_size
from queens.engine.signals import ControlSignals
from queens.engine.steps import AttemptEvent, SolutionEvent, StepEvent
from queens.errors import ConfigError, InvalidTransitionError
from queens.events.bus import (
    EVENT_BOARD_SIZE_REQUEST,
    EVENT_RUN_COMPLETED,
    EVENT_RUN_PAUSE_TOGGLE_REQUEST,
    EVENT_RUN_RESET,
    EVENT_RUN_RESET_REQUEST,
    EVENT_RUN_START_REQUEST,
    EVENT_RUN_STARTED,
    EVENT_SPEED_CHANGED,
    EVENT_SPEED_REQUEST,
    EVENT_TICK,
    EventBus,
)
from queens.utils.run_state import get_run_stats, get_run_status, set_run_state


class RunController:
    """Owns the run lifecycle and relays engine step events onto the bus.

    The host loop drives the run through ``EVENT_TICK``: every tick the
    controller pulls as many events from the engine as the pacing delay
    allows. Nothing is pulled while the run is paused, so the engine stays
    suspended exactly where it stopped.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        engine: SearchEngine | None = None,
        pacing: Pacing | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        status = self._status()
        self.engine = engine or SearchEngine(status.size)
        self.pacing = pacing or Pacing(status.delay_ms)
        status.size = self.engine.size
        status.delay_ms = self.pacing.delay_ms
        self._signals: ControlSignals | None = None
        self._stream: Iterator[StepEvent] | None = None
        self._budget_ms = 0.0
        self._wait_ms = 0.0
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_RUN_START_REQUEST, self.on_start_request)
        event_bus.subscribe(EVENT_RUN_PAUSE_TOGGLE_REQUEST, self.on_pause_toggle_request)
        event_bus.subscribe(EVENT_RUN_RESET_REQUEST, self.on_reset_request)
        event_bus.subscribe(EVENT_BOARD_SIZE_REQUEST, self.on_board_size_request)
        event_bus.subscribe(EVENT_SPEED_REQUEST, self.on_speed_request)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    def _status(self) -> RunStatus:
        status = get_run_status(self.world)
        if status is None:
            set_run_state(self.world, self.event_bus, RunState.IDLE)
            status = get_run_status(self.world)
        return status

    def _stats(self) -> RunStats:
        stats = get_run_stats(self.world)
        if stats is None:
            stats = RunStats()
            self.world.create_entity(stats)
        return stats

    @property
    def state(self) -> RunState:
        return self._status().state

    @property
    def stats(self) -> RunStats:
        return self._stats()

    @property
    def size(self) -> int:
        return self._status().size

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        state = self.state
        if state == RunState.RUNNING:
            logger.debug("start ignored: run already in progress")
            return
        if state == RunState.PAUSED:
            self.resume()
            return
        size = self._status().size
        self.engine.configure(size)
        self._stats().clear()
        self._signals = ControlSignals()
        self._stream = self.engine.run(self._signals)
        self._budget_ms = 0.0
        self._wait_ms = 0.0
        logger.info("run started on a {n}x{n} board", n=size)
        self.event_bus.emit(EVENT_RUN_STARTED, size=size)
        set_run_state(self.world, self.event_bus, RunState.RUNNING)

    def pause(self) -> None:
        state = self.state
        if state != RunState.RUNNING or self._signals is None:
            raise InvalidTransitionError("pause", state)
        self._signals.pause()
        logger.info("run paused at attempt {attempts}", attempts=self._stats().attempts)
        set_run_state(self.world, self.event_bus, RunState.PAUSED)

    def resume(self) -> None:
        state = self.state
        if state != RunState.PAUSED or self._signals is None:
            raise InvalidTransitionError("resume", state)
        self._signals.resume()
        logger.info("run resumed")
        set_run_state(self.world, self.event_bus, RunState.RUNNING)

    def toggle_pause(self) -> None:
        state = self.state
        if state == RunState.RUNNING:
            self.pause()
        elif state == RunState.PAUSED:
            self.resume()
        else:
            raise InvalidTransitionError("pause", state)

    def reset(self) -> None:
        """Abandon any in-flight run and return to an empty, idle board."""
        self._abandon_run()
        status = self._status()
        self.engine.configure(status.size)
        self._stats().clear()
        self._budget_ms = 0.0
        self._wait_ms = 0.0
        logger.info("board reset to {n}x{n}", n=status.size)
        self.event_bus.emit(EVENT_RUN_RESET, size=status.size)
        set_run_state(self.world, self.event_bus, RunState.IDLE)

    def change_size(self, size: int) -> bool:
        """Reset onto a new board size; ignored while a run is in progress."""
        state = self.state
        if state in (RunState.RUNNING, RunState.PAUSED):
            logger.debug("size change to {size} ignored while {state}", size=size, state=state.name.lower())
            return False
        size = validate_size(size)
        self._status().size = size
        self.reset()
        return True

    def set_speed(self, delay_ms: int) -> None:
        self.pacing.set_delay(delay_ms)
        self._status().delay_ms = self.pacing.delay_ms
        logger.debug("step delay set to {ms} ms", ms=self.pacing.delay_ms)
        self.event_bus.emit(EVENT_SPEED_CHANGED, delay_ms=self.pacing.delay_ms)

    def _abandon_run(self) -> None:
        stream, signals = self._stream, self._signals
        self._stream = None
        self._signals = None
        if stream is None:
            return
        signals.cancel()
        # The engine unwinds at its next checkpoint; nothing it emits on the way out is relayed.
        unwound = sum(1 for _ in stream)
        logger.debug("abandoned run after {count} unreported events", count=unwound)

    # ------------------------------------------------------------------
    # Driving the engine
    # ------------------------------------------------------------------
    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            dt = 1/60
        self.update(dt)

    def update(self, dt: float) -> int:
        """Advance the run by ``dt`` seconds of wall time; return events relayed."""
        if self.state != RunState.RUNNING or self._stream is None:
            return 0
        self._budget_ms += max(0.0, dt) * 1000.0
        steps = 0
        while self._can_pull() and self._budget_ms >= self._wait_ms:
            if steps >= MAX_STEPS_PER_TICK:
                # Do not let a zero delay build up a backlog across ticks.
                self._budget_ms = 0.0
                break
            self._budget_ms -= self._wait_ms
            event = self._step()
            if event is None:
                break
            steps += 1
            self._wait_ms = self.pacing.delay_for(event)
        return steps

    def advance(self, steps: int = 1) -> int:
        """Relay up to ``steps`` events immediately, ignoring the pacing delay."""
        relayed = 0
        while relayed < steps and self._can_pull():
            if self._step() is None:
                break
            relayed += 1
        return relayed

    def run_to_completion(self) -> int:
        """Relay events until the run completes, is paused or is reset."""
        relayed = 0
        while self._can_pull():
            if self._step() is None:
                break
            relayed += 1
        return relayed

    def _can_pull(self) -> bool:
        return self._stream is not None and self.state == RunState.RUNNING

    def _step(self) -> StepEvent | None:
        try:
            event = next(self._stream)
        except StopIteration:
            self._finish()
            return None
        self._relay(event)
        return event

    def _relay(self, event: StepEvent) -> None:
        stats = self._stats()
        if isinstance(event, AttemptEvent):
            stats.attempts += 1
            stats.current_row = event.row
        elif isinstance(event, SolutionEvent):
            stats.solutions += 1
        self.event_bus.emit(event.bus_event, **event.payload())

    def _finish(self) -> None:
        self._stream = None
        self._signals = None
        stats = self._stats()
        size = self._status().size
        logger.info(
            "run completed on {n}x{n}: {solutions} solutions, {attempts} attempts",
            n=size,
            solutions=stats.solutions,
            attempts=stats.attempts,
        )
        set_run_state(self.world, self.event_bus, RunState.COMPLETED)
        self.event_bus.emit(
            EVENT_RUN_COMPLETED,
            size=size,
            solutions=stats.solutions,
            attempts=stats.attempts,
        )

    # ------------------------------------------------------------------
    # Bus requests
    # ------------------------------------------------------------------
    def on_start_request(self, sender, **kwargs):
        self.start()

    def on_pause_toggle_request(self, sender, **kwargs):
        try:
            self.toggle_pause()
        except InvalidTransitionError as exc:
            logger.debug("pause request ignored: {err}", err=exc)

    def on_reset_request(self, sender, **kwargs):
        self.reset()

    def on_board_size_request(self, sender, **kwargs):
        size = kwargs.get('size')
        try:
            self.change_size(size)
        except ConfigError as exc:
            logger.warning("board size request rejected: {err}", err=exc)

    def on_speed_request(self, sender, **kwargs):
        delay_ms = kwargs.get('delay_ms')
        try:
            self.set_speed(delay_ms)
        except ConfigError as exc:
            logger.warning("speed request rejected: {err}", err=exc)
