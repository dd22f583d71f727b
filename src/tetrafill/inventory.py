"""Per-shape piece counts available to a solve attempt."""

from __future__ import annotations

from collections import abc
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from .tetromino import TetrominoType

CountsLike = Union["Inventory", Mapping[TetrominoType, int], Iterable[int]]


class Inventory:
    """Mutable mapping from :class:`TetrominoType` to remaining count.

    The search takes a piece before descending and puts it back after a failed
    branch, so counts behave like a stack and never drop below zero.
    """

    def __init__(self, counts: Mapping[TetrominoType, int] | None = None) -> None:
        self._counts: Dict[TetrominoType, int] = {t: 0 for t in TetrominoType}
        if counts:
            for shape, count in counts.items():
                self._counts[TetrominoType(shape)] = int(count)

    @classmethod
    def from_counts(cls, counts: Iterable[int]) -> "Inventory":
        """Build an inventory from seven counts in catalog order (I J L O S T Z).

        Raises:
            ValueError: If ``counts`` does not hold exactly one count per shape.
        """

        values = [int(c) for c in counts]
        shapes = list(TetrominoType)
        if len(values) != len(shapes):
            raise ValueError(
                f"Expected {len(shapes)} piece counts (I J L O S T Z), got {len(values)}"
            )
        return cls(dict(zip(shapes, values)))

    @classmethod
    def coerce(cls, counts: CountsLike) -> "Inventory":
        """Return a fresh inventory built from any supported counts value."""

        if isinstance(counts, Inventory):
            return counts.copy()
        if isinstance(counts, abc.Mapping):
            return cls(counts)
        return cls.from_counts(counts)

    def copy(self) -> "Inventory":
        return Inventory(self._counts)

    def __getitem__(self, shape: TetrominoType) -> int:
        return self._counts[TetrominoType(shape)]

    def __iter__(self) -> Iterator[TetrominoType]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Inventory):
            return self._counts == other._counts
        return NotImplemented

    def __repr__(self) -> str:
        parts = " ".join(f"{t.value}={c}" for t, c in self._counts.items())
        return f"Inventory({parts})"

    def items(self) -> Iterator[Tuple[TetrominoType, int]]:
        return iter(self._counts.items())

    def counts(self) -> List[int]:
        """Return the counts in catalog order."""

        return list(self._counts.values())

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def available(self, shape: TetrominoType) -> bool:
        return self._counts[shape] > 0

    def take(self, shape: TetrominoType) -> None:
        """Use one ``shape`` piece.

        Raises:
            ValueError: If no ``shape`` piece is left.
        """

        if self._counts[shape] <= 0:
            raise ValueError(f"No {shape.value} pieces left")
        self._counts[shape] -= 1

    def put_back(self, shape: TetrominoType) -> None:
        self._counts[shape] += 1


__all__ = ["CountsLike", "Inventory"]
