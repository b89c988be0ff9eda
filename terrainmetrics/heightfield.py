"""Elevation grids with interpolation, gradients and normals."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
_Key = Union[int, tuple[int, int]]


@dataclass(frozen=True)
class Box2:
    """Axis-aligned rectangle."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def size(self) -> Vec2:
        return self.x_max - self.x_min, self.y_max - self.y_min


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def _add(a: Vec3, b: Vec3) -> Vec3:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


def _scale(a: Vec3, s: float) -> Vec3:
    return a[0] * s, a[1] * s, a[2] * s


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalized(a: Vec3) -> Vec3:
    n = math.sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])
    if n == 0.0:
        return 0.0, 0.0, 0.0
    return a[0] / n, a[1] / n, a[2] / n


def _area_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    return _scale(_cross(_sub(b, a), _sub(c, a)), 0.5)


def _triangle_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    return _normalized(_cross(_sub(b, a), _sub(c, a)))


def _bilinear(a00: float, a10: float, a11: float, a01: float, u: float, v: float) -> float:
    return (1 - u) * (1 - v) * a00 + u * (1 - v) * a10 + u * v * a11 + (1 - u) * v * a01


class HeightField:
    """Elevations sampled at the ``nx`` by ``ny`` vertices of a rectangular domain."""

    def __init__(self, box: Box2, nx: int, ny: int, values: Iterable[float]) -> None:
        if nx < 2 or ny < 2:
            raise ValueError("a height field needs at least 2x2 samples")
        self.box = box
        self.nx = nx
        self.ny = ny
        self.values = [float(v) for v in values]
        if len(self.values) != nx * ny:
            raise ValueError(
                f"expected {nx * ny} values for a {nx}x{ny} grid, got {len(self.values)}"
            )

    @classmethod
    def constant(cls, box: Box2, nx: int, ny: int, value: float = 0.0) -> "HeightField":
        """A flat height field at the given elevation."""
        return cls(box, nx, ny, [value] * (nx * ny))

    def cell_size(self) -> Vec2:
        w, h = self.box.size()
        return w / (self.nx - 1), h / (self.ny - 1)

    def cell_id(self, i: int, j: int) -> int:
        return i + self.nx * j

    def is_valid_cell(self, i: int, j: int) -> bool:
        return 0 <= i < self.nx and 0 <= j < self.ny

    def at(self, i: int, j: int) -> float:
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

    def __getitem__(self, key: _Key) -> float:
        return self.values[self._flat(key)]

    def __setitem__(self, key: _Key, value: float) -> None:
        self.values[self._flat(key)] = float(value)

    def value_range(self) -> tuple[float, float]:
        return min(self.values), max(self.values)

    def bounds(self) -> tuple[Vec3, Vec3]:
        """Lower and upper corners of the 3D bounding box."""
        za, zb = self.value_range()
        return (self.box.x_min, self.box.y_min, za), (self.box.x_max, self.box.y_max, zb)

    def cell_coords(self, x: float, y: float) -> tuple[int, int, float, float]:
        """Cell (i, j) containing the point and the local coordinates (u, v) in it."""
        cx, cy = self.cell_size()
        fu = (x - self.box.x_min) / cx
        fv = (y - self.box.y_min) / cy
        i, j = math.floor(fu), math.floor(fv)
        u, v = fu - i, fv - j
        # Points on the upper boundary belong to the last cell.
        if i == self.nx - 1 and u == 0.0:
            i, u = i - 1, 1.0
        if j == self.ny - 1 and v == 0.0:
            j, v = j - 1, 1.0
        return i, j, u, v

    def _is_interior_cell(self, i: int, j: int) -> bool:
        return 0 <= i < self.nx - 1 and 0 <= j < self.ny - 1

    def height(self, x: float, y: float, triangular: bool = True) -> float:
        """Interpolated elevation, 0.0 outside the domain."""
        i, j, u, v = self.cell_coords(x, y)
        if not self._is_interior_cell(i, j):
            return 0.0
        a = self.at
        if triangular:
            if u > v:
                return (1.0 - u) * a(i, j) + (u - v) * a(i + 1, j) + v * a(i + 1, j + 1)
            return (1.0 - v) * a(i, j) + u * a(i + 1, j + 1) + (v - u) * a(i, j + 1)
        return _bilinear(a(i, j), a(i + 1, j), a(i + 1, j + 1), a(i, j + 1), u, v)

    def vertex(self, x: float, y: float, triangular: bool = True) -> Vec3:
        return x, y, self.height(x, y, triangular)

    def grid_vertex(self, i: int, j: int) -> Vec3:
        cx, cy = self.cell_size()
        return self.box.x_min + i * cx, self.box.y_min + j * cy, self.at(i, j)

    def grid_gradient(self, i: int, j: int) -> Vec2:
        """Finite-difference gradient at a grid vertex."""
        cx, cy = self.cell_size()
        a = self.at
        if i == 0:
            gx = (a(i + 1, j) - a(i, j)) / cx
        elif i == self.nx - 1:
            gx = (a(i, j) - a(i - 1, j)) / cx
        else:
            gx = (a(i + 1, j) - a(i - 1, j)) * 0.5 / cx
        if j == 0:
            gy = (a(i, j + 1) - a(i, j)) / cy
        elif j == self.ny - 1:
            gy = (a(i, j) - a(i, j - 1)) / cy
        else:
            gy = (a(i, j + 1) - a(i, j - 1)) * 0.5 / cy
        return gx, gy

    def gradient(self, x: float, y: float) -> Vec2:
        """Bilinearly interpolated vertex gradients, (0, 0) outside the domain."""
        i, j, u, v = self.cell_coords(x, y)
        if not self.is_valid_cell(i, j):
            return 0.0, 0.0
        g00 = self.grid_gradient(i, j)
        g10 = self.grid_gradient(i + 1, j) if self.is_valid_cell(i + 1, j) else g00
        g01 = self.grid_gradient(i, j + 1) if self.is_valid_cell(i, j + 1) else g00
        g11 = self.grid_gradient(i + 1, j + 1) if self.is_valid_cell(i + 1, j + 1) else g00
        g0 = tuple((1 - v) * p + v * q for p, q in zip(g00, g01))
        g1 = tuple((1 - v) * p + v * q for p, q in zip(g10, g11))
        return (1 - u) * g0[0] + u * g1[0], (1 - u) * g0[1] + u * g1[1]

    def grid_normal(self, i: int, j: int) -> Vec3:
        """Unit normal at a vertex: area-weighted sum over the adjacent triangles."""
        V = self.grid_vertex
        p = V(i, j)

        def t(a: tuple[int, int], b: tuple[int, int]) -> Vec3:
            return _area_normal(p, V(*a), V(*b))

        # The six triangles around (i, j), numbered counter-clockwise.
        tri = {
            0: ((i + 1, j), (i + 1, j + 1)),
            1: ((i + 1, j + 1), (i, j + 1)),
            2: ((i, j + 1), (i - 1, j)),
            3: ((i - 1, j), (i - 1, j - 1)),
            4: ((i - 1, j - 1), (i, j - 1)),
            5: ((i, j - 1), (i + 1, j)),
        }
        last_i, last_j = self.nx - 1, self.ny - 1
        if i == 0:
            if j == 0:
                ids = (0, 1)
            elif j == last_j:
                ids = (5,)
            else:
                ids = (0, 1, 5)
        elif i == last_i:
            if j == 0:
                ids = (2,)
            elif j == last_j:
                ids = (4, 3)
            else:
                ids = (2, 3, 4)
        else:
            if j == 0:
                ids = (0, 1, 2)
            elif j == last_j:
                ids = (3, 4, 5)
            else:
                ids = (0, 1, 2, 3, 4, 5)
        n: Vec3 = (0.0, 0.0, 0.0)
        for k in ids:
            n = _add(n, t(*tri[k]))
        return _normalized(n)

    def normal(self, x: float, y: float, triangular: bool = True) -> Vec3:
        """Surface normal at a point, (0, 0, 0) outside the domain."""
        i, j, u, v = self.cell_coords(x, y)
        if not self._is_interior_cell(i, j):
            return 0.0, 0.0, 0.0
        V = self.grid_vertex
        if triangular:
            if u > v:
                return _triangle_normal(V(i, j), V(i + 1, j), V(i + 1, j + 1))
            return _triangle_normal(V(i, j), V(i + 1, j + 1), V(i, j + 1))
        n00 = self.grid_normal(i, j)
        n10 = self.grid_normal(i + 1, j)
        n11 = self.grid_normal(i + 1, j + 1)
        n01 = self.grid_normal(i, j + 1)
        blended = tuple(
            _bilinear(n00[k], n10[k], n11[k], n01[k], u, v) for k in range(3)
        )
        return _normalized(blended)  # type: ignore[arg-type]