"""Distance from a peak to the nearest higher ground."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from terrainmetrics.heightfield import HeightField


@dataclass
class IsolationRecord:
    """Result of an isolation search around a peak."""

    found_higher_ground: bool = False
    closest_higher_ground: tuple[int, int] = (0, 0)
    distance: float = 0.0


class IsolationFinder:
    """Searches a height field for the closest cell higher than a given peak."""

    def __init__(self, heights: HeightField) -> None:
        self.heights = heights

    def find_isolation(self, peak: tuple[int, int], w: Optional[int] = None) -> IsolationRecord:
        """Closest strictly higher cell within a square window of half size ``w``.

        Without ``w`` the window is large enough to cover the whole grid.
        """
        hf = self.heights
        px, py = peak
        if w is None:
            dx = max(hf.nx - px, px)
            dy = max(hf.ny - py, py)
            w = max(dx, dy)

        peak_elev = hf.at(px, py)
        cx, cy = hf.cell_size()
        x_lo, x_hi = max(0, px - w), min(hf.nx - 1, px + w)
        y_lo, y_hi = max(0, py - w), min(hf.ny - 1, py + w)

        record = IsolationRecord()
        for x in range(x_lo, x_hi + 1):
            for y in range(y_lo, y_hi + 1):
                if hf.at(x, y) <= peak_elev:
                    continue
                dist = math.hypot((x - px) * cx, (y - py) * cy)
                if not record.found_higher_ground or record.distance > dist:
                    record = IsolationRecord(True, (x, y), dist)
        return record