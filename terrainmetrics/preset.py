"""Description of a preset terrain that can be loaded by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PresetTerrain:
    """Image source, extent and elevation range of a preset terrain."""

    image_path: str = ""
    cells_x: int = 0
    cells_y: int = 0
    terrain_x: float = 0.0
    terrain_y: float = 0.0
    hmin: float = 0.0
    hmax: float = 0.0
    avg_lat: float = 45.0
    default_scale: float = 1.0

    def describe(self) -> str:
        """One-line summary of grid size and extent in kilometres."""
        return (
            f"{self.cells_x} x {self.cells_y} cells,  "
            f"{self.terrain_x / 1000.0:.1f} x {self.terrain_y / 1000.0:.1f} km"
        )