"""Board representation for the tiling grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .point import Point


Grid = NDArray[np.uint8]


class BoardSizeError(ValueError):
    """Raised by :meth:`Board.strict` for dimensions no tiling can cover."""


class PlacementOrderError(RuntimeError):
    """Raised when a removal does not undo the most recent placement."""


def create_empty_grid(height: int, width: int) -> Grid:
    """Return a new ``height`` x ``width`` grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


def is_tileable_area(height: int, width: int) -> bool:
    """Return ``True`` if a ``height`` x ``width`` area is a multiple of four."""

    return (height * width) % 4 == 0


@dataclass(frozen=True)
class Placement:
    """Record of a successful :meth:`Board.place` call.

    Only the board that issued it can undo it, and only while it is the most
    recent outstanding placement.
    """

    anchor: Point
    offsets: Tuple[Point, ...]
    code: int
    cells: Tuple[Point, ...]


class Board:
    """Rectangular grid of cells, each empty (``0``) or holding a shape code.

    A board with a non-positive side or an area not divisible by four can
    never be tiled, so it is collapsed to an empty ``0 x 0`` grid.  The
    dimensions that were asked for stay available through
    :attr:`requested_size` for error reporting.
    """

    def __init__(self, height: int, width: int) -> None:
        self.requested_size: Tuple[int, int] = (height, width)
        if height <= 0 or width <= 0 or not is_tileable_area(height, width):
            height = 0
            width = 0
        self.height = height
        self.width = width
        self.grid: Grid = create_empty_grid(height, width)
        self._placements: List[Placement] = []

    @classmethod
    def strict(cls, height: int, width: int) -> "Board":
        """Build a board, raising instead of collapsing on a bad size.

        Raises:
            BoardSizeError: If either dimension is not positive or the area is
                not a multiple of four.
        """

        if height <= 0 or width <= 0 or not is_tileable_area(height, width):
            raise BoardSizeError(f"Incorrect size of field ({height} {width})")
        return cls(height, width)

    @property
    def degenerate(self) -> bool:
        """``True`` when the board has no cells at all."""

        return self.height == 0 or self.width == 0

    @property
    def area(self) -> int:
        return self.height * self.width

    def reset(self) -> None:
        """Clear every cell and forget outstanding placements."""

        self.grid = create_empty_grid(self.height, self.width)
        self._placements.clear()

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.height and 0 <= point.y < self.width

    def cell(self, point: Point) -> int:
        """Safely return the value at ``point``.

        Raises:
            IndexError: If ``point`` is outside the board.
        """

        if self.in_bounds(point):
            return int(self.grid[point.x, point.y])
        raise IndexError("Cell out of bounds")

    def is_empty(self, point: Point) -> bool:
        """Return ``True`` if the cell at ``point`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        if self.in_bounds(point):
            return bool(self.grid[point.x, point.y] == 0)
        return False

    def fits(self, anchor: Point, offsets: Sequence[Point]) -> bool:
        """Return ``True`` if every ``anchor + offset`` is on the board and empty."""

        for offset in offsets:
            if not self.is_empty(anchor + offset):
                return False
        return True

    def place(self, anchor: Point, offsets: Sequence[Point], code: int) -> Optional[Placement]:
        """Write ``code`` into ``anchor + offset`` for every offset.

        Nothing is written when the shape does not fit; ``None`` is returned
        in that case.  On success the returned :class:`Placement` is the
        handle that undoes the write.
        """

        if not self.fits(anchor, offsets):
            return None

        cells = tuple(anchor + offset for offset in offsets)
        self._write(cells, code)
        placement = Placement(anchor=anchor, offsets=tuple(offsets), code=code, cells=cells)
        self._placements.append(placement)
        return placement

    def remove(self, anchor: Point, offsets: Sequence[Point]) -> None:
        """Clear the cells written by the most recent :meth:`place`.

        ``anchor`` and ``offsets`` must be the ones passed to that call;
        placements are undone strictly last-in first-out.

        Raises:
            PlacementOrderError: If the arguments do not match the most recent
                outstanding placement.  The grid is left untouched.
        """

        if not self._placements:
            raise PlacementOrderError("No placement to remove")
        top = self._placements[-1]
        if top.anchor != anchor or top.offsets != tuple(offsets):
            raise PlacementOrderError(
                f"Removal at {anchor} does not match last placement at {top.anchor}"
            )
        self._placements.pop()
        self._write(top.cells, 0)

    def remove_placement(self, placement: Placement) -> None:
        """Undo ``placement``; see :meth:`remove`."""

        self.remove(placement.anchor, placement.offsets)

    @property
    def outstanding(self) -> int:
        """Number of placements not yet removed."""

        return len(self._placements)

    def is_full(self) -> bool:
        """Return ``True`` if no cell is empty."""

        return bool(np.all(self.grid != 0))

    def copy_grid(self) -> Grid:
        return self.grid.copy()

    def rows(self) -> List[List[int]]:
        """Return the grid as nested lists of ints."""

        return [[int(value) for value in row] for row in self.grid]

    def _write(self, cells: Sequence[Point], value: int) -> None:
        if not cells:
            return
        coordinates = np.asarray([tuple(cell) for cell in cells], dtype=np.int16)
        rows, cols = coordinates.T
        self.grid[rows, cols] = np.uint8(value)


__all__ = [
    "Board",
    "BoardSizeError",
    "Grid",
    "Placement",
    "PlacementOrderError",
    "create_empty_grid",
    "is_tileable_area",
]
