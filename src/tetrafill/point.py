"""Integer grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Point:
    """Immutable ``(x, y)`` pair used both as a grid cell and as an offset.

    ``x`` is the row index and ``y`` the column index, matching the
    ``(row, col)`` indexing of the board grid.
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}; {self.y})"


ORIGIN = Point(0, 0)


def parse_point(line: str) -> Optional[Point]:
    """Parse ``"x y"`` into a :class:`Point`.

    The text is split on whitespace and every token that reads as an integer
    is kept; anything else is ignored.  A point is returned only when exactly
    two integers were found, otherwise ``None``.
    """

    coords: List[int] = []
    for token in line.split():
        try:
            coords.append(int(token))
        except ValueError:
            continue
    if len(coords) != 2:
        return None
    return Point(coords[0], coords[1])


__all__ = ["ORIGIN", "Point", "parse_point"]
