"""Palette ranges, colour blending and point placement for map layers."""

from __future__ import annotations

from collections.abc import Sequence

RGB = tuple[int, int, int]


def palette_range(bounds: Sequence[float], centered: bool = False) -> tuple[float, float]:
    """Palette limits from a (low, high) pair.

    A centered range is symmetric around zero and wide enough for both ends.
    """
    if len(bounds) < 2:
        raise ValueError("a palette range needs a low and a high value")
    low, high = bounds[0], bounds[1]
    if centered:
        r = max(abs(low), abs(high))
        return -r, r
    return low, high


def interpolate_color(color1: RGB, color2: RGB, t: float) -> RGB:
    """Blend two 8-bit colours; ``t`` is clamped to [0, 1] and components truncated."""
    t = min(1.0, max(0.0, t))
    return tuple(int(a + (b - a) * t) for a, b in zip(color1, color2))  # type: ignore[return-value]


def basin_metric_range(values: Sequence[float]) -> tuple[float, float]:
    """Values at the 10th and 90th percentile ranks of the sorted metric values."""
    if not values:
        raise ValueError("range of an empty set of basin metrics")
    ordered = sorted(values)
    n = len(ordered)
    return ordered[int(0.1 * n)], ordered[int(0.9 * n)]


def scaled_point(i: int, j: int, scale: int = 1) -> tuple[float, float]:
    """Centre of cell (i, j) in a layer upscaled by ``scale``."""
    return scale * (i + 0.5), scale * (j + 0.5)