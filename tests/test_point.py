import pytest

from tetrafill.point import ORIGIN, Point, parse_point


def test_arithmetic_is_component_wise():
    a = Point(2, -3)
    b = Point(-1, 5)
    assert a + b == Point(1, 2)
    assert a - b == Point(3, -8)
    assert a + ORIGIN == a


def test_points_are_values():
    assert Point(1, 2) == Point(1, 2)
    assert Point(1, 2) != Point(2, 1)
    assert len({Point(1, 2), Point(1, 2), Point(0, 0)}) == 2
    with pytest.raises(AttributeError):
        Point(1, 2).x = 5


def test_unpacks_and_formats():
    x, y = Point(4, 7)
    assert (x, y) == (4, 7)
    assert str(Point(1, 2)) == "(1; 2)"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 4", Point(3, 4)),
        ("  3    4  ", Point(3, 4)),
        ("-1 2", Point(-1, 2)),
        ("x 3 y 4", Point(3, 4)),
        ("3", None),
        ("3 4 5", None),
        ("", None),
        ("a b", None),
    ],
)
def test_parse_point(text, expected):
    assert parse_point(text) == expected
