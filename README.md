# simviz

Geometry builders for 3D debug visualisation, in plain Python with no
dependencies. Each builder produces plain vertex data: positions, normals,
texture coordinates, packed colours, tangents and triangle indices. You can
hand that data to any renderer.

## Installation

```
pip install simviz
```

## Modules

- `simviz.vector`: `Vec3` is a small frozen 3D vector. It supports `+`, `-`,
  scalar `*` and unary `-`, and has the methods `with_y` and `to_list`. The
  functions `forward()`, `right()` and `up()` return the directions of an
  identity transform: -Z, +X and +Y.
- `simviz.color`: `Color` is an sRGB colour with alpha. You build one with
  `Color.rgb`, `Color.rgba` or `Color.hsla`. It has `with_alpha`,
  `as_rgba_f32` and `as_rgba_u32`; the last one packs the colour into 32 bits
  with red in the lowest byte. Adding two colours adds all four components.
  Multiplying by a number scales only red, green and blue. The module also
  provides the constants `WHITE`, `RED`, `GREEN` and `BLUE`.
- `simviz.lines`: `Lines` is a buffer of `Line` segments for one frame, with a
  capacity that defaults to `MAX_LINES` (128000). You add segments with
  `line`, `line_colored` or `line_gradient`. When the buffer is full, a new
  line replaces the one added last. `generate_mesh(visible)` returns a
  `LineMeshData` and then empties the buffer. The `LineMeshData` holds two
  vertices per line, packed colours, and zero normals and UVs. When `visible`
  is false, `generate_mesh` empties the buffer and returns `None`.
- `simviz.axes`: `Axes(size, inner_offset)` draws into a `Lines` buffer. It
  draws a blue line along forward, a red line along right and a green line
  along up.
- `simviz.grid`: `Grid(size, divisions, start_color, end_color)` draws a
  square grid on the XZ plane. The centre lines are drawn brighter. Nothing
  is drawn when `size // divisions` is 0. A value of `divisions` that is not
  positive raises `ValueError`.
- `simviz.signal`: `SignalLine` is a polyline whose y values scroll left. It
  has the methods `shift`, `last_y` and `draw`.
  - `draw_signal_lines` takes entries of `(sample, signal_line, lines)`.
  - `draw_control_lines` takes entries of
    `(controller, signal_line, control_line, lines)`. The `controller` is any
    callable `(target, current) -> correction`.
  - Both functions spread the hues of the plots evenly around the colour
    wheel.
- `simviz.voxels`: `Voxel` is a cube and `VoxelBox` is an axis-aligned box.
  Build a box with `VoxelBox.centered` or `VoxelBox.from_voxel`.
  `VoxelsMesh.from_box` and `VoxelsMesh.from_voxel` each make 24 vertices and
  36 indices. `VoxelsMesh.extend` appends another mesh and offsets its
  indices. `merge(voxels)` combines many voxels into one mesh.
- `simviz.rod`: a `Rod` is a cylinder along the y axis with a hemisphere at
  each end, and the two ends can have different radii.
  - An optional `ease_func` shapes how the radius blends from south to north.
  - A `RodUvProfile` (`ASPECT`, `UNIFORM`, `FIXED`) chooses how the texture
    space is shared out.
  - `build_rod_mesh(rod)` returns a `RodMesh` with positions, normals, UVs,
    per-vertex tangents `[x, y, z, w]` and triangle indices. It raises
    `ValueError` for fewer than 4 latitudes, fewer than 1 longitude, negative
    rings or zero depth.
  - `RodMesh.num_faces`, `position`, `normal` and `tex_coord` look up data by
    triangle and corner.

## Example

```python
from simviz.axes import Axes
from simviz.grid import Grid
from simviz.lines import Lines

lines = Lines()
Grid().draw(lines, visible=True)
Axes(size=3.0).draw(lines, visible=True)

mesh = lines.generate_mesh(visible=True)
print(len(mesh.positions), "vertices")
```

```python
from simviz.vector import Vec3
from simviz.voxels import Voxel, merge

mesh = merge([Voxel(position=Vec3(6.0, 0.0, 0.0), size=0.5)])
print(len(mesh.positions), len(mesh.indices))  # 24 36
```

```python
from simviz.rod import Rod, build_rod_mesh

rod = build_rod_mesh(Rod())
print(rod.num_faces())
```

## What it does not do

- The package renders nothing. It opens no window and has no shaders,
  materials, camera or scene.
- It has no command-line program.
- It does not generate signals and has no controllers of its own. The
  samples and controller callables passed to `simviz.signal` come from your
  code.

## Running the tests

```
pip install -e ".[test]"
pytest
```