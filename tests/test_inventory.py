import pytest

from tetrafill.inventory import Inventory
from tetrafill.tetromino import TetrominoType


def test_from_counts_follows_catalog_order():
    inventory = Inventory.from_counts([8, 1, 1, 0, 0, 0, 2])
    assert inventory[TetrominoType.I] == 8
    assert inventory[TetrominoType.J] == 1
    assert inventory[TetrominoType.Z] == 2
    assert inventory.total == 12
    assert inventory.counts() == [8, 1, 1, 0, 0, 0, 2]


@pytest.mark.parametrize("counts", [[], [1, 2, 3], [0] * 8])
def test_from_counts_requires_seven_values(counts):
    with pytest.raises(ValueError):
        Inventory.from_counts(counts)


def test_take_and_put_back():
    inventory = Inventory({TetrominoType.O: 1})
    assert inventory.available(TetrominoType.O)
    inventory.take(TetrominoType.O)
    assert not inventory.available(TetrominoType.O)
    with pytest.raises(ValueError):
        inventory.take(TetrominoType.O)
    inventory.put_back(TetrominoType.O)
    assert inventory[TetrominoType.O] == 1


def test_coerce_always_copies():
    original = Inventory.from_counts([1, 0, 0, 0, 0, 0, 0])
    copy = Inventory.coerce(original)
    copy.take(TetrominoType.I)
    assert original[TetrominoType.I] == 1
    assert Inventory.coerce({TetrominoType.T: 3})[TetrominoType.T] == 3
    assert Inventory.coerce((0, 0, 0, 0, 5, 0, 0))[TetrominoType.S] == 5
    assert Inventory.coerce(original) == original
