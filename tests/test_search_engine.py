import pytest

from queens.engine import (
    AttemptEvent,
    ControlSignals,
    PlaceEvent,
    RemoveEvent,
    SafetyEvent,
    SearchEngine,
    SolutionEvent,
)
from queens.errors import ConfigError

# A000170
KNOWN_SOLUTION_COUNTS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92}


def _run(size: int):
    engine = SearchEngine(size)
    events = list(engine.run(ControlSignals()))
    return engine, events


def _is_valid(snapshot):
    n = len(snapshot)
    if sorted(snapshot) != list(range(n)):
        return False
    for i in range(n):
        for j in range(i + 1, n):
            if abs(snapshot[i] - snapshot[j]) == abs(i - j):
                return False
    return True


@pytest.mark.parametrize("size,expected", sorted(KNOWN_SOLUTION_COUNTS.items()))
def test_solution_count_matches_known_sequence(size, expected):
    engine, events = _run(size)
    solution_events = [e for e in events if isinstance(e, SolutionEvent)]
    assert len(solution_events) == expected
    assert len(engine.solutions) == expected
    assert [e.index for e in solution_events] == list(range(expected))


def test_every_solution_is_a_valid_placement():
    engine, _ = _run(8)
    assert engine.solutions
    for snapshot in engine.solutions:
        assert len(snapshot) == 8
        assert _is_valid(snapshot), snapshot


def test_solutions_found_in_lexicographic_order():
    engine, _ = _run(8)
    solutions = list(engine.solutions)
    assert solutions == sorted(solutions)
    assert len(set(solutions)) == len(solutions)
    assert solutions[0] == (0, 4, 7, 5, 2, 6, 1, 3)


def test_four_queens_solutions_exact():
    engine, _ = _run(4)
    assert engine.solutions == ((1, 3, 0, 2), (2, 0, 3, 1))


@pytest.mark.parametrize("size,expected", [(1, 1), (2, 6), (3, 18), (4, 60), (8, 15720)])
def test_attempt_count_is_pinned(size, expected):
    engine, events = _run(size)
    assert engine.attempt_count == expected
    assert sum(isinstance(e, AttemptEvent) for e in events) == expected


@pytest.mark.parametrize("size", [5, 6, 7])
def test_attempt_count_is_n_per_explored_row(size):
    engine, events = _run(size)
    # Each placement above the last row opens one more row whose N columns all get tested.
    inner_places = sum(1 for e in events if isinstance(e, PlaceEvent) and e.row < size - 1)
    assert engine.attempt_count == size * (1 + inner_places)


def test_single_cell_board_event_sequence():
    _, events = _run(1)
    assert events == [
        AttemptEvent(row=0, col=0),
        SafetyEvent(row=0, col=0, safe=True),
        PlaceEvent(row=0, col=0),
        SolutionEvent(index=0, snapshot=(0,)),
        RemoveEvent(row=0, col=0),
    ]


def test_two_by_two_rejects_every_second_row_cell():
    _, events = _run(2)
    assert events == [
        AttemptEvent(0, 0), SafetyEvent(0, 0, True), PlaceEvent(0, 0),
        AttemptEvent(1, 0), SafetyEvent(1, 0, False),
        AttemptEvent(1, 1), SafetyEvent(1, 1, False),
        RemoveEvent(0, 0),
        AttemptEvent(0, 1), SafetyEvent(0, 1, True), PlaceEvent(0, 1),
        AttemptEvent(1, 0), SafetyEvent(1, 0, False),
        AttemptEvent(1, 1), SafetyEvent(1, 1, False),
        RemoveEvent(0, 1),
    ]


def test_every_attempt_is_followed_by_its_verdict():
    _, events = _run(5)
    for index, event in enumerate(events):
        if isinstance(event, AttemptEvent):
            verdict = events[index + 1]
            assert isinstance(verdict, SafetyEvent)
            assert (verdict.row, verdict.col) == (event.row, event.col)
            if verdict.safe:
                assert events[index + 2] == PlaceEvent(event.row, event.col)


def test_every_place_has_a_matching_remove():
    _, events = _run(6)
    stack = []
    for event in events:
        if isinstance(event, PlaceEvent):
            stack.append((event.row, event.col))
        elif isinstance(event, RemoveEvent):
            assert stack.pop() == (event.row, event.col)
    assert stack == []


def test_columns_tested_in_ascending_order_per_row_visit():
    _, events = _run(4)
    last_col = {}
    for event in events:
        if isinstance(event, AttemptEvent):
            if event.col == 0:
                last_col[event.row] = 0
            else:
                assert last_col[event.row] == event.col - 1
                last_col[event.row] = event.col


def test_board_is_clear_after_full_run():
    engine, _ = _run(6)
    assert engine.board == (None,) * 6
    assert not engine.is_active
    assert not engine.was_cancelled


def test_on_event_sees_every_yielded_event_in_order():
    engine = SearchEngine(5)
    seen = []
    yielded = list(engine.run(ControlSignals(), on_event=seen.append))
    assert seen == yielded


def test_run_without_signals_uses_a_fresh_token():
    engine = SearchEngine(4)
    events = list(engine.run())
    assert sum(isinstance(e, SolutionEvent) for e in events) == 2


def test_run_is_lazy_and_marks_engine_active():
    engine = SearchEngine(4)
    stream = engine.run(ControlSignals())
    assert engine.attempt_count == 0
    first = next(stream)
    assert first == AttemptEvent(0, 0)
    assert engine.is_active
    assert engine.attempt_count == 1
    stream.close()
    assert not engine.is_active
    assert engine.was_cancelled


def test_second_run_while_active_is_rejected():
    engine = SearchEngine(4)
    stream = engine.run(ControlSignals())
    next(stream)
    with pytest.raises(ConfigError):
        engine.run(ControlSignals())
    stream.close()


def test_new_run_starts_from_fresh_state():
    engine = SearchEngine(5)
    list(engine.run())
    attempts = engine.attempt_count
    list(engine.run())
    assert engine.attempt_count == attempts
    assert len(engine.solutions) == 10


def test_counters_track_rows_while_searching():
    engine = SearchEngine(6)
    stream = engine.run(ControlSignals())
    for event in stream:
        if isinstance(event, AttemptEvent):
            assert engine.current_row == event.row
            assert engine.deepest_row >= event.row
    assert engine.deepest_row == 5


@pytest.mark.parametrize("board,row,col,expected", [
    ([None, None, None, None], 0, 2, True),
    ([1, None, None, None], 1, 1, False),   # same column
    ([1, None, None, None], 1, 0, False),   # diagonal
    ([1, None, None, None], 1, 2, False),   # anti-diagonal
    ([1, None, None, None], 1, 3, True),
    ([1, 3, None, None], 2, 0, True),
    ([1, 3, None, None], 2, 2, False),
])
def test_is_safe(board, row, col, expected):
    engine = SearchEngine(4)
    engine._board = list(board)
    assert engine.is_safe(row, col) is expected


@pytest.mark.parametrize("bad", [0, -1, 2.5, "8", True, None])
def test_configure_rejects_invalid_sizes_without_state_change(bad):
    engine = SearchEngine(4)
    list(engine.run())
    with pytest.raises(ConfigError):
        engine.configure(bad)
    assert engine.size == 4
    assert len(engine.solutions) == 2
    assert engine.attempt_count == 60


def test_configure_resets_board_and_counters():
    engine = SearchEngine(4)
    list(engine.run())
    engine.configure(6)
    assert engine.size == 6
    assert engine.board == (None,) * 6
    assert engine.solutions == ()
    assert engine.attempt_count == 0
    assert engine.current_row == 0


def test_configure_rejected_while_run_active():
    engine = SearchEngine(5)
    stream = engine.run(ControlSignals())
    next(stream)
    with pytest.raises(ConfigError):
        engine.configure(6)
    assert engine.size == 5
    stream.close()
    engine.configure(6)
    assert engine.size == 6


def test_constructor_rejects_invalid_size():
    with pytest.raises(ConfigError):
        SearchEngine(0)


def test_solution_snapshots_are_immutable_tuples():
    engine, events = _run(5)
    snapshot = next(e.snapshot for e in events if isinstance(e, SolutionEvent))
    assert isinstance(snapshot, tuple)
    assert snapshot == engine.solutions[0]
