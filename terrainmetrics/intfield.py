"""Integer-valued fields sampled on a regular 2D grid."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

_Key = Union[int, tuple[int, int]]


class IntField:
    """A grid of ``nx`` by ``ny`` integers stored row by row (``i`` varies fastest)."""

    def __init__(self, nx: int, ny: int, values: Union[int, Iterable[int]] = 0) -> None:
        if nx < 0 or ny < 0:
            raise ValueError("grid dimensions must not be negative")
        self.nx = nx
        self.ny = ny
        if isinstance(values, int):
            self.values = [values] * (nx * ny)
        else:
            self.values = [int(v) for v in values]
            if len(self.values) != nx * ny:
                raise ValueError(
                    f"expected {nx * ny} values for a {nx}x{ny} grid, got {len(self.values)}"
                )

    def cell_id(self, i: int, j: int) -> int:
        """Flat index of the grid vertex (i, j)."""
        return i + self.nx * j

    def is_valid_cell(self, i: int, j: int) -> bool:
        return 0 <= i < self.nx and 0 <= j < self.ny

    def at(self, i: int, j: int) -> int:
        if not self.is_valid_cell(i, j):
            raise IndexError(f"cell ({i}, {j}) outside a {self.nx}x{self.ny} grid")
        return self.values[self.cell_id(i, j)]

    def _flat(self, key: _Key) -> int:
        if isinstance(key, tuple):
            i, j = key
            if not self.is_valid_cell(i, j):
                raise IndexError(f"cell ({i}, {j}) outside a {self.nx}x{self.ny} grid")
            return self.cell_id(i, j)
        if not 0 <= key < len(self.values):
            raise IndexError(f"index {key} outside a field of {len(self.values)} values")
        return key

    def __getitem__(self, key: _Key) -> int:
        return self.values[self._flat(key)]

    def __setitem__(self, key: _Key, value: int) -> None:
        self.values[self._flat(key)] = int(value)

    def __len__(self) -> int:
        return len(self.values)

    def value_range(self) -> tuple[int, int]:
        """Minimum and maximum value of the field."""
        if not self.values:
            raise ValueError("range of an empty field")
        return min(self.values), max(self.values)

    def percentile(self, p: float) -> int:
        """Value at rank ``int(p * n)`` of the sorted field, clamped to the last one."""
        if not self.values:
            raise ValueError("percentile of an empty field")
        n = min(int(p * len(self.values)), len(self.values) - 1)
        return sorted(self.values)[n]

    def fill(self, value: int) -> None:
        self.values = [int(value)] * len(self.values)

    def to_floats(self) -> list[float]:
        """The field values as floating-point numbers, in storage order."""
        return [float(v) for v in self.values]