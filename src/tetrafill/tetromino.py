"""Tetromino catalog and rotation engine.

The seven shapes are defined once as hand-authored offset lists.  Rotations
are not stored; they are derived on demand by turning every offset 90 degrees
about one of the shape's own cells (the *anchor*) and re-centring so that the
anchor lands on ``(0, 0)``.  The search places every piece by its anchor, so
the offsets returned here can be added directly to a grid cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Sequence, Tuple

from .point import Point

Offsets = Tuple[Point, ...]

ROTATION_COUNT = 4


class InvalidAnchorError(ValueError):
    """Raised when a rotation is requested about a cell the shape lacks."""


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes.

    Declaration order is the catalog order the search tries pieces in.
    """

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"

    @property
    def code(self) -> int:
        """Non-zero integer written into the grid for this shape."""

        return PIECE_VALUES[self]


# Mapping from ``TetrominoType`` to the integer stored in the grid.  ``0`` is
# reserved for an empty cell.
PIECE_VALUES: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(TetrominoType)}

# Glyph per grid value, index 0 being the empty cell.
GLYPHS = "." + "".join(t.value for t in TetrominoType)


def _offsets(*cells: Tuple[int, int]) -> Offsets:
    return tuple(Point(x, y) for x, y in cells)


# Base shapes as (row, col) offsets.  Cell 0 is the default anchor.
_BASE_SHAPES: Dict[TetrominoType, Offsets] = {
    TetrominoType.I: _offsets((0, 0), (0, 1), (0, 2), (0, 3)),
    TetrominoType.J: _offsets((0, 0), (0, 1), (0, 2), (1, 2)),
    TetrominoType.L: _offsets((0, 0), (1, 0), (2, 0), (2, 1)),
    TetrominoType.O: _offsets((0, 0), (0, 1), (1, 1), (1, 0)),
    TetrominoType.S: _offsets((0, 0), (1, 0), (1, 1), (2, 1)),
    TetrominoType.T: _offsets((0, 0), (1, 1), (0, 1), (0, 2)),
    TetrominoType.Z: _offsets((0, 0), (0, 1), (1, 1), (1, 2)),
}


def rotate_point(point: Point, pivot: Point) -> Point:
    """Return ``point`` turned a quarter turn about ``pivot``.

    For ``point = (x, y)`` and ``pivot = (x0, y0)`` the result is
    ``(y0 - y + x0, x - x0 + y0)``.  The catalog's offsets are written
    against this convention, so it must not be swapped for a textbook
    rotation matrix.
    """

    return Point(pivot.y - point.y + pivot.x, point.x - pivot.x + pivot.y)


def rotated_offsets(offsets: Sequence[Point], anchor: int, rotations: int) -> Offsets:
    """Rotate ``offsets`` ``rotations`` times about ``offsets[anchor]``.

    The rotated anchor is subtracted from every point afterwards, so the
    anchor cell of the result is always ``(0, 0)``.  Four rotations are the
    identity, hence ``rotations`` is taken modulo four.

    Raises:
        InvalidAnchorError: If ``anchor`` is not a valid index into
            ``offsets``.
    """

    if not 0 <= anchor < len(offsets):
        raise InvalidAnchorError(
            f"Anchor index {anchor} outside shape of {len(offsets)} cells"
        )

    pivot = offsets[anchor]
    turns = rotations % ROTATION_COUNT
    result = []
    for point in offsets:
        for _ in range(turns):
            point = rotate_point(point, pivot)
        result.append(point - pivot)
    return tuple(result)


@dataclass(frozen=True)
class Tetromino:
    """Catalog entry: one shape with its offsets and grid code."""

    shape: TetrominoType
    offsets: Offsets

    @property
    def code(self) -> int:
        return self.shape.code

    @property
    def glyph(self) -> str:
        return self.shape.value

    def orientation(self, rotation: int, anchor: int = 0) -> Offsets:
        """Return the offsets for ``rotation`` anchored at cell ``anchor``."""

        return _orientation(self.shape, rotation % ROTATION_COUNT, anchor)


@lru_cache(maxsize=None)
def _orientation(shape: TetrominoType, rotation: int, anchor: int) -> Offsets:
    return rotated_offsets(_BASE_SHAPES[shape], anchor, rotation)


CATALOG: Tuple[Tetromino, ...] = tuple(
    Tetromino(shape, offsets) for shape, offsets in _BASE_SHAPES.items()
)

_BY_TYPE: Dict[TetrominoType, Tetromino] = {t.shape: t for t in CATALOG}


def tetromino(shape: TetrominoType) -> Tetromino:
    """Return the catalog entry for ``shape``."""

    return _BY_TYPE[TetrominoType(shape)]


def shape_for_code(code: int) -> TetrominoType:
    """Return the shape whose grid value is ``code``.

    Raises:
        ValueError: If ``code`` is ``0`` or not a known shape code.
    """

    if not 1 <= code <= len(CATALOG):
        raise ValueError(f"No tetromino has grid code {code}")
    return CATALOG[code - 1].shape


__all__ = [
    "CATALOG",
    "GLYPHS",
    "InvalidAnchorError",
    "Offsets",
    "PIECE_VALUES",
    "ROTATION_COUNT",
    "Tetromino",
    "TetrominoType",
    "rotate_point",
    "rotated_offsets",
    "shape_for_code",
    "tetromino",
]
