"""Command line tiler.

Run with: `python -m tetrafill`

Without arguments this tiles a 6x6 board with eight I pieces, one J and one
L, prints the board when it could be filled and then the status message.
Defaults come from :class:`tetrafill.config.SolverConfig` and may be changed
through ``TETRAFILL_*`` environment variables.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import SolverConfig
from .point import parse_point
from .render import render_text
from .solver import TilingSolver


LOGGER = logging.getLogger(__name__)


def _size(text: str) -> tuple[int, int]:
    point = parse_point(text)
    if point is None:
        raise argparse.ArgumentTypeError(f"expected two integers 'HEIGHT WIDTH', got {text!r}")
    return point.x, point.y


def parse_args(argv: Optional[Sequence[str]] = None, config: Optional[SolverConfig] = None) -> argparse.Namespace:
    config = config or SolverConfig.from_env()
    parser = argparse.ArgumentParser(prog="tetrafill", description="Tile a rectangle with tetrominoes.")
    parser.add_argument(
        "--size",
        type=_size,
        default=None,
        help="Board size as 'HEIGHT WIDTH' (overrides --height/--width).",
    )
    parser.add_argument("--height", type=int, default=config.height, help="Number of rows.")
    parser.add_argument("--width", type=int, default=config.width, help="Number of columns.")
    parser.add_argument(
        "--pieces",
        type=int,
        nargs=7,
        metavar=("I", "J", "L", "O", "S", "T", "Z"),
        default=list(config.pieces),
        help="Piece counts in catalog order.",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=config.color,
        help="Colour the glyphs with ANSI escapes.",
    )
    parser.add_argument(
        "--no-fallback",
        dest="skip_fallback",
        action="store_false",
        help="Never leave an empty cell behind the scan.",
    )
    parser.set_defaults(skip_fallback=config.skip_fallback)
    parser.add_argument("--stats", action="store_true", help="Print search statistics.")
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    args = parser.parse_args(argv)
    if args.size is not None:
        args.height, args.width = args.size
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = SolverConfig.from_env()
    except ValueError as exc:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        LOGGER.error("%s", exc)
        return 2
    args = parse_args(argv, config)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    solver = TilingSolver.for_size(args.height, args.width, skip_fallback=args.skip_fallback)
    result = solver.solve(args.pieces)
    if result.success:
        print(render_text(solver.board, color=args.color))
        print()
    print(result.message)
    if args.stats:
        lines: List[str] = [f"{name}: {value}" for name, value in result.stats.as_dict().items()]
        print("\n".join(lines))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
