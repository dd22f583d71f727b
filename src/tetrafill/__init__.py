"""Tile rectangular boards with a given set of tetrominoes."""

from .board import Board, BoardSizeError, Placement, PlacementOrderError
from .config import SolverConfig
from .inventory import Inventory
from .point import Point, parse_point
from .render import render_text
from .solver import SolveResult, TilingSolver, solve
from .stats import SearchStats
from .tetromino import (
    CATALOG,
    InvalidAnchorError,
    Tetromino,
    TetrominoType,
    rotate_point,
    rotated_offsets,
)

__all__ = [
    "Board",
    "BoardSizeError",
    "CATALOG",
    "InvalidAnchorError",
    "Inventory",
    "Placement",
    "PlacementOrderError",
    "Point",
    "SearchStats",
    "SolveResult",
    "SolverConfig",
    "Tetromino",
    "TetrominoType",
    "TilingSolver",
    "parse_point",
    "render_text",
    "rotate_point",
    "rotated_offsets",
    "solve",
]
