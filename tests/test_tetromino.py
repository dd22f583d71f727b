import pytest

from tetrafill.point import Point
from tetrafill.tetromino import (
    CATALOG,
    GLYPHS,
    InvalidAnchorError,
    TetrominoType,
    rotate_point,
    rotated_offsets,
    shape_for_code,
    tetromino,
)


def _pts(*cells):
    return tuple(Point(x, y) for x, y in cells)


def test_catalog_order_and_codes():
    assert [piece.shape.value for piece in CATALOG] == list("IJLOSTZ")
    assert [piece.code for piece in CATALOG] == [1, 2, 3, 4, 5, 6, 7]
    assert GLYPHS == ".IJLOSTZ"
    for piece in CATALOG:
        assert len(piece.offsets) == 4
        assert piece.offsets[0] == Point(0, 0)
        assert shape_for_code(piece.code) is piece.shape


def test_shape_for_code_rejects_empty_and_unknown():
    with pytest.raises(ValueError):
        shape_for_code(0)
    with pytest.raises(ValueError):
        shape_for_code(8)


def test_rotate_point_formula():
    assert rotate_point(Point(0, 1), Point(0, 0)) == Point(-1, 0)
    assert rotate_point(Point(1, 0), Point(0, 0)) == Point(0, 1)
    # (y0 - y + x0, x - x0 + y0)
    assert rotate_point(Point(2, 3), Point(1, 1)) == Point(-1, 2)
    assert rotate_point(Point(1, 1), Point(1, 1)) == Point(1, 1)


def test_known_orientations():
    j = tetromino(TetrominoType.J)
    assert j.orientation(1) == _pts((0, 0), (-1, 0), (-2, 0), (-2, 1))
    assert j.orientation(2) == _pts((0, 0), (0, -1), (0, -2), (-1, -2))
    l_piece = tetromino(TetrominoType.L)
    assert l_piece.orientation(1) == _pts((0, 0), (0, 1), (0, 2), (-1, 2))
    assert l_piece.orientation(3) == _pts((0, 0), (0, -1), (0, -2), (1, -2))
    i_piece = tetromino(TetrominoType.I)
    assert i_piece.orientation(3) == _pts((0, 0), (1, 0), (2, 0), (3, 0))


@pytest.mark.parametrize("piece", CATALOG, ids=lambda p: p.shape.value)
@pytest.mark.parametrize("anchor", range(4))
def test_four_rotations_are_identity(piece, anchor):
    unrotated = rotated_offsets(piece.offsets, anchor, 0)
    assert rotated_offsets(piece.offsets, anchor, 4) == unrotated
    pivot = piece.offsets[anchor]
    assert unrotated == tuple(p - pivot for p in piece.offsets)

    turned = rotated_offsets(piece.offsets, anchor, 1)
    for _ in range(3):
        turned = rotated_offsets(turned, anchor, 1)
    assert turned == unrotated


@pytest.mark.parametrize("piece", CATALOG, ids=lambda p: p.shape.value)
def test_anchor_lands_on_origin_and_cells_stay_distinct(piece):
    for anchor in range(4):
        for rotation in range(4):
            offsets = rotated_offsets(piece.offsets, anchor, rotation)
            assert offsets[anchor] == Point(0, 0)
            assert len(set(offsets)) == 4


def test_rotation_count_wraps():
    piece = tetromino(TetrominoType.T)
    assert piece.orientation(5) == piece.orientation(1)
    assert piece.orientation(-1) == piece.orientation(3)


@pytest.mark.parametrize("anchor", [-1, 4, 10])
def test_invalid_anchor_raises(anchor):
    piece = tetromino(TetrominoType.S)
    with pytest.raises(InvalidAnchorError):
        rotated_offsets(piece.offsets, anchor, 1)
    assert issubclass(InvalidAnchorError, ValueError)


def test_rotation_does_not_mutate_catalog():
    piece = tetromino(TetrominoType.Z)
    before = piece.offsets
    for rotation in range(4):
        piece.orientation(rotation, anchor=2)
    assert piece.offsets == before == _pts((0, 0), (0, 1), (1, 1), (1, 2))
