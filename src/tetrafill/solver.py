"""Backtracking search that tiles a board with a fixed set of tetrominoes.

The board is scanned in raster order (columns first, then rows).  At every
empty cell the search tries each shape still in stock, in catalog order, in
each of its four rotations, always anchoring the piece's first listed cell on
the current cell.  A placement that leads to a dead end is removed again and
its piece returned to the inventory.  When no piece works the cell is left
empty and the scan moves on; a later piece whose rotation reaches back over
earlier cells may still cover it.

The first full tiling found is returned.  No attempt is made to find every
tiling or a tiling with the fewest pieces.

Example usage
-------------

>>> from tetrafill.solver import solve
>>> result = solve(2, 2, [0, 0, 0, 1, 0, 0, 0])
>>> result.success, result.message
(True, 'Filled')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generator, Iterator, List, Optional

from .board import Board, Grid
from .inventory import CountsLike, Inventory
from .point import Point
from .stats import SearchStats
from .tetromino import CATALOG, ROTATION_COUNT


LOGGER = logging.getLogger(__name__)

FILLED = "Filled"
NOT_FILLED = "Not Filled"
NOT_ENOUGH_PIECES = "Not enough figures"

# Each activation yields the next cursor to explore and returns whether the
# subtree below it produced a full tiling.
Activation = Generator[Point, None, bool]


def size_error_message(height: int, width: int) -> str:
    return f"Incorrect size of field ({height} {width})"


@dataclass(frozen=True)
class SolveResult:
    """Outcome of :meth:`TilingSolver.solve`.

    Truthy iff the board was filled.  Unpacks as ``success, message``.
    """

    success: bool
    message: str
    grid: Optional[Grid] = field(default=None, compare=False)
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator[object]:
        yield self.success
        yield self.message


class TilingSolver:
    """Depth-first tiler bound to one :class:`Board`."""

    def __init__(
        self,
        board: Board,
        *,
        skip_fallback: bool = True,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.board = board
        self.skip_fallback = skip_fallback
        self._clock = clock
        self._inventory = Inventory()
        self._stats = SearchStats()

    @classmethod
    def for_size(cls, height: int, width: int, **kwargs) -> "TilingSolver":
        return cls(Board(height, width), **kwargs)

    @property
    def remaining(self) -> Inventory:
        """Pieces left unused by the last solve attempt."""

        return self._inventory.copy()

    def solve(self, pieces: CountsLike) -> SolveResult:
        """Try to fill the board using ``pieces``.

        ``pieces`` is an :class:`Inventory`, a mapping of shape to count or
        seven counts in catalog order.  The caller's value is never mutated.
        """

        board = self.board
        if board.degenerate:
            message = size_error_message(*board.requested_size)
            LOGGER.warning("%s", message)
            return SolveResult(False, message)

        inventory = Inventory.coerce(pieces)
        if inventory.total * 4 < board.area:
            LOGGER.warning(
                "%s: %d pieces cannot cover %d cells",
                NOT_ENOUGH_PIECES,
                inventory.total,
                board.area,
            )
            return SolveResult(False, NOT_ENOUGH_PIECES)

        board.reset()
        self._inventory = inventory
        self._stats = stats = SearchStats() if self._clock is None else SearchStats(clock=self._clock)
        LOGGER.debug("Solving %dx%d board with %r", board.height, board.width, inventory)

        stats.start()
        filled = self._search()
        stats.stop()

        message = FILLED if filled else NOT_FILLED
        LOGGER.info("%s %dx%d board: %s", message, board.height, board.width, stats.summary())
        grid = board.copy_grid() if filled else None
        return SolveResult(filled, message, grid=grid, stats=stats)

    # Search -----------------------------------------------------------
    def _search(self) -> bool:
        """Drive the activations with an explicit stack.

        Equivalent to recursing from ``(0, 0)`` one cell at a time, without
        tying the board size to the interpreter's recursion limit.
        """

        stack: List[Activation] = [self._activation(Point(0, 0))]
        self._stats.visit(1)
        while stack:
            try:
                cursor = next(stack[-1])
            except StopIteration as finished:
                stack.pop()
                if finished.value:
                    stack.clear()
                    return True
                continue
            stack.append(self._activation(cursor))
            self._stats.visit(len(stack))
        return False

    def _activation(self, cursor: Point) -> Activation:
        board = self.board
        stats = self._stats
        row, col = cursor
        if col >= board.width:
            row, col = row + 1, 0
        if row >= board.height:
            return board.is_full()

        anchor = Point(row, col)
        following = Point(row, col + 1)
        if not board.is_empty(anchor):
            yield following
            return False

        inventory = self._inventory
        for piece in CATALOG:
            if not inventory.available(piece.shape):
                continue
            for rotation in range(ROTATION_COUNT):
                offsets = piece.orientation(rotation)
                if board.place(anchor, offsets, piece.code) is None:
                    continue
                stats.placements += 1
                inventory.take(piece.shape)
                yield following
                board.remove(anchor, offsets)
                inventory.put_back(piece.shape)
                stats.backtracks += 1

        if self.skip_fallback:
            stats.skips += 1
            yield following
        return False


def solve(
    height: int,
    width: int,
    pieces: CountsLike,
    *,
    skip_fallback: bool = True,
) -> SolveResult:
    """Build a board of the given size and try to tile it with ``pieces``."""

    solver = TilingSolver.for_size(height, width, skip_fallback=skip_fallback)
    return solver.solve(pieces)


__all__ = [
    "FILLED",
    "NOT_ENOUGH_PIECES",
    "NOT_FILLED",
    "SolveResult",
    "TilingSolver",
    "size_error_message",
    "solve",
]
