"""Text and value helpers for showing a height field and its metrics."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional, Protocol

from terrainmetrics.heightfield import HeightField


class ScalarGrid(Protocol):
    def at(self, i: int, j: int) -> float: ...


def palette_scale(palette_min: float, palette_max: float) -> tuple[float, str]:
    """Power-of-ten display scale for a palette range and its label.

    Ranges whose largest magnitude is below 0.1 or at least 100 are shown
    in units of ``10**k``.
    """
    largest = max(abs(palette_min), abs(palette_max))
    if largest == 0.0:
        raise ValueError("palette range has no magnitude")
    if largest < 0.1 or largest >= 100.0:
        pow10 = math.floor(math.log10(largest))
        return 10.0 ** pow10, f"Range (e{pow10})"
    return 1.0, "Range"


def rescale_values(values: Sequence[float], min_z: float, max_z: float) -> list[float]:
    """Map values linearly so that their range becomes [min_z, max_z]."""
    if not values:
        raise ValueError("no values to rescale")
    rmin, rmax = min(values), max(values)
    if rmax == rmin:
        raise ValueError("cannot rescale values that are all equal")
    span = rmax - rmin
    return [(max_z - min_z) * (v - rmin) / span + min_z for v in values]


def cell_size_text(heights: HeightField) -> str:
    """Cell size in metres with one decimal, as ``"x x y m"``."""
    cx, cy = heights.cell_size()
    return f"{cx:.1f} x {cy:.1f} m"


def cursor_info(
    heights: HeightField, metric: ScalarGrid, i: int, j: int
) -> Optional[tuple[str, str, str]]:
    """Cell, elevation and metric texts for the cell under the cursor.

    Returns None when no cell is selected (negative coordinates).
    """
    if i < 0 or j < 0:
        return None
    h = heights.at(i, j)
    return f"({i}, {j})", f"{h:.2f} m", f"{metric.at(i, j):g}"