# grblscene

Geometry builders for a CNC machine visualiser. Each drawer turns its
settings into flat lists of `VertexData` (`position`, `color`, `start`):
consecutive pairs of vertices in `lines` form line segments, and entries
in `points` are single dots. A `start` of `NO_START` (every coordinate
set to the marker value `SNAN`, 65536.0) means the vertex carries no
line start point.

The package only computes vertices; it needs nothing outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `grblscene.util` – the frozen dataclasses `Vector3` (with `length()`
  and `+`, `-`, scalar `*`), `Rect` and `Color` (components checked to be
  in [0, 1]); NaN-aware `n_min` / `n_max`; `color_to_vector`; and
  `color_from_hsv`, where a hue of -1 gives a grey.
- `grblscene.interpolation` – `cubic_interpolate`, `bicubic_interpolate`
  over a 4x4 patch, and `interpolate_grid`, which samples a height grid
  (rows along Y, values along X) spread evenly over a `Rect` at any X/Y
  point. The grid must be at least 2x2 and the rectangle must have a
  non-zero size, otherwise `ValueError` is raised.
- `grblscene.drawable` – `VertexData`, `NO_START` and the
  `ShaderDrawable` base class with `line_width`, `point_size`, `visible`,
  the `needs_update_geometry` flag, `update()`, `update_data()`,
  `update_geometry()` (returns the combined `vertices` list) and
  `get_vertex_count()`.
- `grblscene.origin` – `OriginDrawer`: X, Y and Z axes (red, green,
  blue) with arrow heads and a 2x2 square around the origin.
- `grblscene.border` – `HeightMapBorderDrawer`: the red outline of its
  `border_rect` at Z = 0.
- `grblscene.tool` – `ToolDrawer`: a wireframe cutter at `tool_position`
  with `tool_diameter`, `tool_length`, `rotation_angle`, `color` and a
  `tool_angle` that gives a conical tip (`end_length`); `rotate()` turns
  it. Also `normalize_angle` and `create_circle`.
- `grblscene.grid` – `HeightMapGridDrawer`: for each grid point of its
  `model`, an orange probe path between `z_top` and `z_bottom` when the
  value is NaN, or a blue dot at the measured height; plus blue grid
  lines between measured heights.
- `grblscene.interpolation_drawer` – `HeightMapInterpolationDrawer`: a
  mesh over its `data`, coloured by height from blue (lowest) to red
  (highest).

## Example

```python
from grblscene.interpolation import interpolate_grid
from grblscene.util import Rect

heights = [
    [0.0, 0.1, 0.2],
    [0.1, 0.2, 0.3],
    [0.2, 0.3, 0.4],
]
border = Rect(0.0, 0.0, 20.0, 20.0)
z = interpolate_grid(border, heights, 5.0, 5.0)
```

A drawer is rebuilt by calling `update_geometry()` when its
`needs_update_geometry` flag is set:

```python
from grblscene.tool import ToolDrawer

tool = ToolDrawer()
tool.rotate(15)
if tool.needs_update_geometry:
    vertices = tool.update_geometry()
print(tool.get_vertex_count())
```

## What it does not do

There is no renderer, window or command line: the vertex lists are meant
to be handed to whatever draws them. The package does not read or parse
G-code, draw toolpaths, talk to a machine, probe a height map, or load
and save height-map files.