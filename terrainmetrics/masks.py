"""Colour images that mark classes, thresholds, water and normals of a grid."""

from __future__ import annotations

from typing import Protocol

from terrainmetrics.heightfield import HeightField

Color = tuple[float, float, float]

# An image is a list of columns: ``image[i][j]`` is the colour of pixel (i, j).
Image = list[list[Color]]

RED: Color = (1.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
LAND_FILL: Color = (232 / 255.0, 232 / 255.0, 232 / 255.0)
WATER: Color = (48 / 255.0, 128 / 255.0, 255 / 255.0)
_WATER_DEEP: Color = (18 / 255.0, 53 / 255.0, 102 / 255.0)
_WATER_SHALLOW: Color = (52 / 255.0, 135 / 255.0, 255 / 255.0)
_RELIEF_DEPTH = 1000.0


class Grid(Protocol):
    nx: int
    ny: int

    def at(self, i: int, j: int) -> float: ...


def _image(grid: Grid, pick) -> Image:
    return [[pick(i, j) for j in range(grid.ny)] for i in range(grid.nx)]


def _lerp(a: Color, b: Color, t: float) -> Color:
    return tuple(x + (y - x) * t for x, y in zip(a, b))  # type: ignore[return-value]


def _clamp01(c: Color) -> Color:
    return tuple(min(1.0, max(0.0, x)) for x in c)  # type: ignore[return-value]


def single_landform_image(
    lands: Grid, value: int, land_color: Color = RED, background: Color = WHITE
) -> Image:
    """Cells of class ``value`` in ``land_color``, all others in ``background``."""
    return _image(lands, lambda i, j: land_color if lands.at(i, j) == value else background)


def threshold_image(
    field: Grid, value: float, positive: Color = RED, negative: Color = WHITE
) -> Image:
    """Cells above the threshold in ``positive``, the rest in ``negative``.

    The threshold is truncated to an integer before comparing.
    """
    limit = int(value)
    return _image(field, lambda i, j: positive if field.at(i, j) > limit else negative)


def water_level_image(heights: HeightField, level: float, relief: bool = False) -> Image:
    """Cells below the water level in blue on a light grey land fill.

    With ``relief`` the blue darkens with depth, down to its darkest at
    1000 below the level.
    """

    def pick(i: int, j: int) -> Color:
        h = heights.at(i, j)
        if h >= level:
            return LAND_FILL
        if not relief:
            return WATER
        u = max(0.0, 1.0 - (level - h) / _RELIEF_DEPTH)
        return _clamp01(_lerp(_WATER_DEEP, _WATER_SHALLOW, u))

    return _image(heights, pick)


def normal_map_image(heights: HeightField) -> Image:
    """Vertex normals mapped from [-1, 1] to colour components in [0, 1]."""

    def pick(i: int, j: int) -> Color:
        n = heights.grid_normal(i, j)
        return _clamp01(tuple(0.5 * (c + 1.0) for c in n))  # type: ignore[arg-type]

    return _image(heights, pick)