"""Hill shading of colour images with a light map, surface normals and shadows."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional, Protocol

from terrainmetrics.heightfield import HeightField

Color = tuple[float, float, float]
Vec3 = tuple[float, float, float]

# An image is a list of columns: ``image[i][j]`` is the colour of pixel (i, j).
Image = list[list[Color]]

_WATER_DARK: Color = (52 / 255.0, 78 / 255.0, 118 / 255.0)
_RELIEF_COOL: Color = (0.65, 0.75, 0.85)
_RELIEF_WARM: Color = (1.00, 0.95, 0.80)
_DIAGONAL = (1.0 / math.sqrt(2.0), 1.0 / math.sqrt(2.0))


class ScalarGrid(Protocol):
    def at(self, i: int, j: int) -> float: ...


def light_direction(azimuth_deg: float, altitude_deg: float) -> Vec3:
    """Unit vector towards the light; azimuth is clockwise from north."""
    az = math.radians(azimuth_deg)
    alt = math.radians(altitude_deg)
    return math.cos(alt) * math.sin(az), math.cos(alt) * math.cos(az), math.sin(alt)


def _lerp(a: Color, b: Color, t: float) -> Color:
    return tuple(x + (y - x) * t for x, y in zip(a, b))  # type: ignore[return-value]


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _diffuse(normal: Vec3, light_dir: Vec3) -> float:
    s = 0.5 * (1.0 + _dot(normal, light_dir))
    return s ** 4


def shade_color(
    base: Color,
    shade_type: int,
    light: float = 0.0,
    normal: Vec3 = (0.0, 0.0, 1.0),
    light_dir: Vec3 = (0.0, 0.0, 1.0),
) -> Color:
    """Shade one colour.

    Type 1 uses the light map value ``light``, types 2 and 3 the surface
    ``normal`` and ``light_dir``; any other type returns ``base`` unchanged.
    """
    if shade_type == 1:
        s = light * light
        return tuple(0.2 + 0.6 * s * c + 0.2 * s for c in base)  # type: ignore[return-value]
    if shade_type == 2:
        cn = _lerp(_WATER_DARK, base, _diffuse(normal, light_dir))
        return tuple(0.15 * 0.975 + 0.85 * c for c in cn)  # type: ignore[return-value]
    if shade_type == 3:
        s = _diffuse(normal, light_dir)
        t = 0.5 * (1.0 + _dot(normal[:2], _DIAGONAL))
        cn = _lerp(_RELIEF_COOL, _RELIEF_WARM, t)
        return tuple(  # type: ignore[return-value]
            0.25 * 0.975 + 0.25 * cz + 0.50 * s * c for cz, c in zip(base, cn)
        )
    return tuple(base)  # type: ignore[return-value]


def _clamp01(c: Color) -> Color:
    return tuple(min(1.0, max(0.0, x)) for x in c)  # type: ignore[return-value]


def shade_image(
    image: Image,
    heights: HeightField,
    shade_type: int,
    light_map: Optional[ScalarGrid] = None,
    light_dir: Vec3 = (0.0, 0.0, 1.0),
    shadow_map: Optional[ScalarGrid] = None,
) -> Image:
    """Shade every pixel of an image the size of the height field.

    Shadows, when a shadow map is given, scale each colour by
    ``0.7 * shadow + 0.3``. Colours are clamped to [0, 1].
    """
    if len(image) != heights.nx or any(len(col) != heights.ny for col in image):
        raise ValueError(
            f"image does not match the {heights.nx}x{heights.ny} height field"
        )
    if shade_type == 1 and light_map is None:
        raise ValueError("shade type 1 needs a light map")

    shaded: Image = []
    for i, column in enumerate(image):
        out_column = []
        for j, base in enumerate(column):
            if shade_type == 1:
                c = shade_color(base, 1, light=light_map.at(i, j))  # type: ignore[union-attr]
            elif shade_type in (2, 3):
                c = shade_color(base, shade_type, normal=heights.grid_normal(i, j),
                                light_dir=light_dir)
            else:
                c = tuple(base)  # type: ignore[assignment]
            if shadow_map is not None:
                k = 0.7 * shadow_map.at(i, j) + 0.3
                c = tuple(x * k for x in c)  # type: ignore[assignment]
            out_column.append(_clamp01(c))
        shaded.append(out_column)
    return shaded