# terrainmetrics

Tools for analysing terrain heightfields (digital elevation models), in
pure Python with no third-party dependencies.

## Modules

- `terrainmetrics.heightfield`: `Box2(x_min, y_min, x_max, y_max)` and
  `HeightField`, a regular grid of elevations over a `Box2` domain. It offers
  triangular or bilinear height interpolation (`height`, `vertex`),
  finite-difference gradients (`grid_gradient`, `gradient`), area-weighted
  vertex normals (`grid_normal`, `normal`), `cell_coords`, `value_range` and
  `bounds`. Cells are indexed as `hf[i, j]` or by flat index.
- `terrainmetrics.intfield`: `IntField`, an integer grid (for class labels and
  the like) with `value_range`, `percentile`, `fill` and `to_floats`.
- `terrainmetrics.isolation`: `IsolationFinder.find_isolation(peak, w)` finds
  the closest strictly higher cell within a square window and returns an
  `IsolationRecord`; without `w` the whole grid is searched.
- `terrainmetrics.ppa`: `PPA`, ridge extraction by profile recognition. After
  `compute(profile_length)` it exposes `ridge_candidates`, `segments`,
  `reliable_segments`, the spanning tree (`mst`, `segments_in_mst`) and the
  pruned tree (`pruned_mst`, `segments_in_pruned_mst`). `DisjointSets`,
  `prune_ridge_leaves` and `prune_small_branches` are available on their own.
- `terrainmetrics.ascgrid`: `parse_asc` and `read_asc` read ESRI ASCII grids
  into an `AscHeader` and a vertically flipped `HeightField`; samples not
  above the no-data value become zero.
- `terrainmetrics.preset` and `terrainmetrics.presets`: `PresetTerrain` and
  `PresetCatalog`, read from a comma-separated preset file with
  `parse_presets` or `read_presets`.
- `terrainmetrics.shading`: `light_direction`, `shade_color` and
  `shade_image` for hill shading a colour image with a light map, vertex
  normals and an optional shadow map.
- `terrainmetrics.masks`: `single_landform_image`, `threshold_image`,
  `water_level_image` and `normal_map_image` build colour images, stored as
  lists of columns (`image[i][j]`).
- `terrainmetrics.styling`: `palette_range`, `interpolate_color`,
  `basin_metric_range` and `scaled_point`.
- `terrainmetrics.display`: `palette_scale`, `rescale_values`,
  `cell_size_text` and `cursor_info`.
- `terrainmetrics.export`: `format_metric` and `write_metric` write a field as
  a text table, with one line per column `i`.

## Installation

```
pip install .
```

## Example

```python
from terrainmetrics.heightfield import Box2, HeightField
from terrainmetrics.isolation import IsolationFinder
from terrainmetrics.ppa import PPA

hf = HeightField.constant(Box2(0.0, 0.0, 630.0, 630.0), 64, 64, 0.0)
hf[32, 32] = 100.0
hf[40, 32] = 150.0

print(hf.grid_gradient(31, 32))
print(hf.grid_normal(32, 32))

record = IsolationFinder(hf).find_isolation((32, 32), 10)
print(record.found_higher_ground, record.closest_higher_ground, record.distance)

ppa = PPA(hf)
ppa.compute(5)
print(ppa.segments_in_pruned_mst())
```

## What it does not do

The package is a library only. It has no command-line tool and no
interactive viewer. It does not load or save image files, does not draw
river or ridge layers, and does not compute field-wide metrics such as
slope, curvature, visibility, landform classes or flow accumulation. Images
produced by `masks` and `shading` are plain Python lists of colour tuples.

## Running the tests

```
pip install .[test]
pytest
```