"""Counters and timing collected while the search runs."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass
class SearchStats:
    """Aggregated counters for a single solve attempt."""

    nodes: int = 0
    placements: int = 0
    backtracks: int = 0
    skips: int = 0
    max_depth: int = 0
    elapsed: float = 0.0
    clock: Callable[[], float] = field(default=time.perf_counter, repr=False, compare=False)
    _started: Optional[float] = field(default=None, init=False, repr=False, compare=False)

    def start(self) -> None:
        """Begin timing the search."""

        self._started = self.clock()

    def stop(self) -> float:
        """Stop timing and return the elapsed seconds.

        Raises:
            RuntimeError: If :meth:`start` was not called first.
        """

        if self._started is None:
            raise RuntimeError("Search timer was not started")
        self.elapsed = max(0.0, self.clock() - self._started)
        self._started = None
        return self.elapsed

    def visit(self, depth: int) -> None:
        self.nodes += 1
        if depth > self.max_depth:
            self.max_depth = depth

    def as_dict(self) -> Dict[str, float | int]:
        return {
            "nodes": self.nodes,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "skips": self.skips,
            "max_depth": self.max_depth,
            "elapsed": self.elapsed,
        }

    def summary(self) -> str:
        """Return a one-line human readable summary."""

        return (
            f"nodes={self.nodes}, placements={self.placements}, "
            f"backtracks={self.backtracks}, skips={self.skips}, "
            f"depth={self.max_depth}, elapsed={self.elapsed * 1000.0:.3f}ms"
        )


__all__ = ["SearchStats"]
