# hw3dkit

Small, dependency-free building blocks for simple 3D rendering pipelines:
vector types, RGBA colours, triangle meshes, primitive shape builders, a
Wavefront OBJ reader, and 2D pan/zoom views between world and screen space.

## Modules

- `hw3dkit.vector` – immutable `Vec2` and `Vec3` value types with
  element-wise arithmetic against vectors and scalars, `dot`, `cross`
  (3D), `mag`, `mag2`, `norm`, `floor`, `ceil`, `min`, `max`, `clamp`,
  `lerp` (3D) and `truncated` (2D). `Vec3` carries a homogeneous `w`
  component (default `1`), available through `as_array()` and `with_w(w)`.
- `hw3dkit.colour` – `Pixel`, an 8-bit RGBA colour that rejects channels
  outside 0..255, with `packed()` giving a 32-bit value (red in the lowest
  byte). Ready-made colours: `WHITE`, `GREY`, `RED`, `YELLOW`, `GREEN`,
  `BLUE`, `BLACK`, `BLANK`.
- `hw3dkit.mesh` – `Mesh`, parallel lists of positions, normals, texture
  coordinates and colours with a `DecalStructure` layout (`LIST`, `FAN`,
  `STRIP`); `Mesh.append(pos, norm, uv, col)` adds one vertex. Also
  `create_sanity_cube()` and `create_cube(size, offset)`.
- `hw3dkit.shapes` – `create_triangle()`, `create_three_sided_pyramid()`,
  `create_four_sided_pyramid(texture_type)`, `create_sphere(radius,
  latitude_count, longitude_count)`, `create_textured_cube(texture_type)`
  and `create_sky_cube()`, with the `SphereTextureType` and
  `CubeTextureType` layouts.
- `hw3dkit.objfile` – `parse_obj(lines)` and `load_obj(path)`. The x axis
  is mirrored and the v texture coordinate flipped on load; only triangular
  faces are kept. Malformed numbers, faces or out-of-range indices raise
  `ValueError`.
- `hw3dkit.transformed_view` – `TransformedView`, mapping world coordinates
  to screen pixels through an offset and a scale, with panning
  (`start_pan`, `update_pan`, `end_pan`), zooming about a screen point
  (`zoom_at_screen_pos`, `set_zoom`), optional scale clamping
  (`set_scale_extents`, `enable_scale_clamp`) and visibility tests.
- `hw3dkit.tile_view` – `TileTransformedView`, a view where one world unit
  is one tile, with `top_left_tile`, `bottom_right_tile`, `visible_tiles`,
  `tile_under_screen_pos` and `tile_offset`.

## Install

    pip install .

## Example

```python
from hw3dkit.vector import Vec2, Vec3
from hw3dkit.colour import WHITE
from hw3dkit.shapes import create_textured_cube, CubeTextureType
from hw3dkit.objfile import parse_obj
from hw3dkit.transformed_view import TransformedView

cube = create_textured_cube(CubeTextureType.TEXTURE)
print(len(cube))            # 36 vertices, 12 triangles

mesh = parse_obj(["v 1 0 0", "v 0 1 0", "v 0 0 1", "f 1 2 3"])
print(mesh.pos[0])          # (-1.0, 0.0, 0.0, 1.0) – x is mirrored

print(Vec3(1, 0, 0).cross(Vec3(0, 1, 0)))   # (0,0,1)
print(hex(WHITE.packed()))                   # 0xffffffff

view = TransformedView(Vec2(800, 600), Vec2(1.0, 1.0))
view.zoom_at_screen_pos(2.0, Vec2(400, 300))
print(view.world_to_screen(Vec2(200.0, 150.0)))
```

## What it does not do

The package builds and transforms geometry data only. It has no 4x4
matrix type, no projection or camera, no ray casting against meshes, and
no window, input handling or drawing: turning meshes into pixels is left
to whatever renderer you pair it with.

## Running the tests

    pip install .[test]
    pytest