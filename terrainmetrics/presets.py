"""Catalogues of preset terrains read from a comma-separated text file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Optional, Union

from terrainmetrics.preset import PresetTerrain


@dataclass(frozen=True)
class CatalogItem:
    """One entry of the catalogue list; headers and blank separators are disabled."""

    label: str
    enabled: bool


@dataclass
class PresetCatalog:
    """Listed entries in file order, the presets by name and the selected name."""

    items: list[CatalogItem] = field(default_factory=list)
    presets: dict[str, PresetTerrain] = field(default_factory=dict)
    selected: Optional[str] = None

    def names(self) -> list[str]:
        """Names of the selectable presets in the order they are listed."""
        return [item.label for item in self.items if item.enabled]

    def __getitem__(self, name: str) -> PresetTerrain:
        try:
            return self.presets[name]
        except KeyError:
            raise KeyError(f"no preset terrain named {name!r}") from None


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def parse_presets(text: str, data_path: str = "./") -> PresetCatalog:
    """Parse preset lines of ten fields.

    A blank line adds a separator, ``#`` a header, and a leading ``!`` marks
    the selected preset. Lines with another number of fields are skipped.
    """
    catalog = PresetCatalog()
    current: Optional[int] = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            catalog.items.append(CatalogItem("", False))
            continue
        if line.startswith("#"):
            catalog.items.append(CatalogItem(line[1:].strip(), False))
            continue
        is_selected = line.startswith("!")
        if is_selected:
            line = line[1:]

        parts = [p for p in line.split(",") if p]
        if len(parts) != 10:
            continue

        name = parts[0].strip().replace('"', "")
        image_path = parts[1].strip().replace('"', "")
        catalog.items.append(CatalogItem(name, True))
        if is_selected:
            current = len(catalog.items) - 1
        catalog.presets[name] = PresetTerrain(
            image_path=data_path + image_path,
            cells_x=_to_int(parts[2]),
            cells_y=_to_int(parts[3]),
            terrain_x=float(_to_int(parts[4])),
            terrain_y=float(_to_int(parts[5])),
            hmin=_to_float(parts[6]),
            hmax=_to_float(parts[7]),
            avg_lat=_to_float(parts[8]),
            default_scale=_to_float(parts[9]),
        )

    if current is None and catalog.items:
        current = 0
    if current is not None:
        label = catalog.items[current].label
        if catalog.items[current].enabled and label in catalog.presets:
            catalog.selected = label
    return catalog


def read_presets(path: Union[str, PathLike], data_path: str = "./") -> PresetCatalog:
    """Read and parse a preset file."""
    with open(path, encoding="utf-8") as f:
        return parse_presets(f.read(), data_path)