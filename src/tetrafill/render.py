"""Text rendering of a tiled board."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Union

from .board import Board, Grid
from .tetromino import GLYPHS, shape_for_code, tetromino

RESET = "\x1b[0m"

# ANSI foreground colours per grid value; ``0`` is the empty cell.
COLORS: Dict[int, str] = {
    0: "\x1b[97m",  # white
    1: "\x1b[96m",  # cyan
    2: "\x1b[94m",  # blue
    3: "\x1b[95m",  # magenta
    4: "\x1b[93m",  # yellow
    5: "\x1b[92m",  # green
    6: "\x1b[35m",  # dark magenta
    7: "\x1b[91m",  # red
}


def _grid_rows(source: Union[Board, Grid, Sequence[Sequence[int]]]) -> List[List[int]]:
    if isinstance(source, Board):
        return source.rows()
    return [[int(value) for value in row] for row in source]


def render_row(row: Iterable[int], *, color: bool = False) -> str:
    """Return one grid row as a string of shape glyphs."""

    parts: List[str] = []
    for value in row:
        glyph = GLYPHS[0] if value == 0 else tetromino(shape_for_code(value)).glyph
        if color:
            glyph = f"{COLORS[value]}{glyph}{RESET}"
        parts.append(glyph)
    return "".join(parts)


def render_text(source: Union[Board, Grid, Sequence[Sequence[int]]], *, color: bool = False) -> str:
    """Render ``source`` as one line per grid row.

    ``source`` may be a :class:`Board`, a numpy grid or nested lists of
    grid values.  With ``color`` each glyph is wrapped in the ANSI colour of
    its shape.
    """

    return "\n".join(render_row(row, color=color) for row in _grid_rows(source))


__all__ = ["COLORS", "render_row", "render_text"]
