import pytest

from tetrafill.board import Board
from tetrafill.solver import TilingSolver
from tetrafill.stats import SearchStats


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_records_elapsed_time():
    clock = FakeClock()
    stats = SearchStats(clock=clock)
    stats.start()
    clock.advance(0.25)
    assert stats.stop() == pytest.approx(0.25)
    assert stats.elapsed == pytest.approx(0.25)
    assert "elapsed=250.000ms" in stats.summary()


def test_stop_without_start_raises():
    with pytest.raises(RuntimeError):
        SearchStats().stop()


def test_visit_tracks_deepest_frame():
    stats = SearchStats()
    for depth in (1, 2, 3, 2, 3, 4, 1):
        stats.visit(depth)
    assert stats.nodes == 7
    assert stats.max_depth == 4
    assert stats.as_dict()["nodes"] == 7


def test_solver_uses_injected_clock():
    clock = FakeClock()
    solver = TilingSolver(Board(2, 2), clock=clock)
    result = solver.solve([0, 0, 0, 1, 0, 0, 0])
    assert result.stats.elapsed == 0.0
    # The O goes in at (0,0); the next three cells are already covered.
    assert result.stats.nodes == 5
    assert result.stats.max_depth == 5
    assert result.stats.placements == 1
    assert result.stats.backtracks == 0
