"""Builders for common primitive meshes."""

from __future__ import annotations

import math
from enum import IntEnum

from hw3dkit.colour import GREEN, GREY, RED, WHITE, YELLOW, Pixel
from hw3dkit.mesh import Mesh, create_sanity_cube


class SphereTextureType(IntEnum):
    """Texture layouts for pyramids and spheres."""

    SOLID_TEXTURE = 0
    TOP_DOWN_VIEW = 1
    TEXTURE_MAP = 2


class CubeTextureType(IntEnum):
    """Texture layouts for textured cubes."""

    TEXTURE = 0
    LEFT_CROSS_TEXTURE_CUBE_MAP = 1
    LEFT_CROSS_TEXTURE_RECT_MAP = 2
    VERT_TEXTURE_MAP = 3
    HORZ_TEXTURE_MAP = 4


def _normal_of(x: float, y: float, z: float) -> tuple[float, float, float, float]:
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0:
        return (math.nan, math.nan, math.nan, 0.0)
    r = 1.0 / length
    return (x * r, y * r, z * r, 0.0)


def _push(mesh: Mesh, pos, uv=None, col: Pixel = WHITE) -> None:
    x, y, z = (float(v) for v in pos)
    mesh.pos.append((x, y, z, 0.0))
    mesh.norm.append(_normal_of(x, y, z))
    if uv is not None:
        mesh.uv.append((float(uv[0]), float(uv[1])))
    mesh.col.append(col)


def create_triangle() -> Mesh:
    """A single flat triangle."""
    mesh = Mesh()
    root3 = math.sqrt(3)
    corners = (
        (0.0, -0.5 * root3 / 3, 0.0),
        (0.0, 0.5 * root3 / 3, 0.0),
        (0.5, 0.0 * root3 * 2 / 3, 0.0),
    )
    for corner in corners:
        mesh.append(corner, (0, 0, 0, 0), (0, 0), WHITE)
    return mesh


def create_three_sided_pyramid() -> Mesh:
    """A tetrahedron with one colour per face."""
    top = (0.5, 0.5, 0.5)
    p1 = (0.0, 0.0, 0.0)
    p2 = (0.0, 0.5, 0.0)
    p3 = (0.0, 0.5, 0.5)
    faces = (
        (GREY, (top, p1, p2)),
        (YELLOW, (top, p2, p3)),
        (RED, (top, p1, p3)),
        (GREEN, (p1, p2, p3)),
    )
    mesh = Mesh()
    for colour, points in faces:
        for point in points:
            _push(mesh, point, (0.0, 0.0), colour)
    return mesh


_PYRAMID_UVS = {
    SphereTextureType.SOLID_TEXTURE: (
        (0.0, 0.0), (1.0, 0.0), (1.0, 1.0),
        (0.0, 0.0), (1.0, 1.0), (0.0, 1.0),
        (0.0, 0.0), (1.0, 0.0), (0.5, 0.5),
        (0.0, 0.0), (1.0, 0.0), (0.5, 0.5),
        (0.0, 0.0), (1.0, 0.0), (0.5, 0.5),
        (0.0, 0.0), (1.0, 0.0), (0.5, 0.5),
    ),
    SphereTextureType.TOP_DOWN_VIEW: (
        (0.0, 0.0), (1.0, 0.0), (1.0, 1.0),
        (0.0, 0.0), (1.0, 1.0), (0.0, 1.0),
        (0.0, 0.0), (1.0, 0.0), (0.5, 0.5),
        (1.0, 0.0), (1.0, 1.0), (0.5, 0.5),
        (1.0, 1.0), (0.0, 1.0), (0.5, 0.5),
        (0.0, 1.0), (0.0, 0.0), (0.5, 0.5),
    ),
    SphereTextureType.TEXTURE_MAP: (
        (0.34, 0.333333), (0.666666, 0.333333), (0.666666, 0.666666),
        (0.333333, 0.333333), (0.666666, 0.666666), (0.333333, 0.666666),
        (0.333333, 0.333333), (0.666666, 0.333333), (0.5, 0.0),
        (0.666666, 0.333333), (0.666666, 0.666666), (1.0, 0.5),
        (0.666666, 0.666666), (0.333333, 0.666666), (0.5, 1.0),
        (0.333333, 0.666666), (0.333333, 0.333333), (0.0, 0.5),
    ),
}


def create_four_sided_pyramid(
    texture_type: SphereTextureType = SphereTextureType.SOLID_TEXTURE,
) -> Mesh:
    """A square-based pyramid, texture coordinates laid out per ``texture_type``."""
    uvs = _PYRAMID_UVS.get(texture_type, _PYRAMID_UVS[SphereTextureType.TEXTURE_MAP])
    p1 = (0.0, 0.0, 0.5)
    p2 = (0.5, 0.0, 0.5)
    p3 = (0.5, 0.0, 0.0)
    p4 = (0.0, 0.0, 0.0)
    top = (0.25, 0.25, 0.25)
    points = (
        p1, p2, p3,
        p1, p3, p4,
        p1, p2, top,
        p2, p3, top,
        p3, p4, top,
        p4, p1, top,
    )
    mesh = Mesh()
    mesh.uv.extend(uvs)
    for point in points:
        _push(mesh, point)
    return mesh


def create_sphere(radius: float = 0.5, latitude_count: int = 50, longitude_count: int = 50) -> Mesh:
    """A UV sphere built from latitude rings and longitude segments."""
    grid: list[tuple[tuple[float, float, float], tuple[float, float]]] = []
    for i in range(latitude_count + 1):
        v = 1 - i / latitude_count
        theta = i * math.pi / latitude_count
        sin_theta, cos_theta = math.sin(theta), math.cos(theta)
        for j in range(longitude_count + 1):
            # The u coordinate is divided by the latitude count, as in the reference layout.
            u = 1 - j / latitude_count
            angle = j * 2 * math.pi / longitude_count
            point = (
                radius * math.cos(angle) * sin_theta,
                radius * cos_theta,
                radius * math.sin(angle) * sin_theta,
            )
            grid.append((point, (u, v)))

    stride = longitude_count + 1
    mesh = Mesh()
    for y in range(latitude_count):
        for x in range(longitude_count + 1):
            next_x = (x + 1) % stride
            p0 = y * stride + x
            p1 = (y + 1) * stride + x
            p2 = y * stride + next_x
            p3 = (y + 1) * stride + next_x
            for index in (p0, p1, p2, p1, p2, p3):
                point, uv = grid[index]
                _push(mesh, point, uv, WHITE)
    return mesh


_RECT_MAP_UVS = (
    # South
    (0.25, 0.66666), (0.5, 0.66666), (0.5, 0.33333),
    (0.25, 0.66666), (0.5, 0.33333), (0.25, 0.33333),
    # East
    (0.5, 0.66666), (0.75, 0.66666), (0.75, 0.33333),
    (0.5, 0.66666), (0.75, 0.33333), (0.5, 0.33333),
    # North
    (0.75, 0.66666), (1.0, 0.66666), (1.0, 0.33333),
    (0.75, 0.66666), (1.0, 0.33333), (0.75, 0.33333),
    # West
    (0.0, 0.66666), (0.25, 0.66666), (0.25, 0.33333),
    (0.0, 0.66666), (0.25, 0.33333), (0.0, 0.33333),
    # Top
    (0.25, 0.33333), (0.5, 0.33333), (0.5, 0.0),
    (0.25, 0.33333), (0.5, 0.0), (0.25, 0.0),
    # Bottom
    (0.25, 1.0), (0.5, 1.0), (0.5, 0.66666),
    (0.25, 1.0), (0.5, 0.66666), (0.25, 0.66666),
)


def _strip_uvs(texture_type: CubeTextureType) -> list[tuple[float, float]]:
    # The strip step is an integer division in the reference layout, so it is zero
    # and only five faces receive coordinates.
    step = 1 // 6
    uvs: list[tuple[float, float]] = []
    for i in range(5):
        start = float(step * i)
        end = start + step
        if texture_type is CubeTextureType.VERT_TEXTURE_MAP:
            uvs += [(0.0, start), (1.0, start), (0.0, end), (1.0, start), (0.0, end), (1.0, end)]
        else:
            uvs += [(start, 0.0), (end, 0.0), (start, 1.0), (end, 0.0), (start, 1.0), (end, 1.0)]
    return uvs


def create_textured_cube(
    texture_type: CubeTextureType = CubeTextureType.LEFT_CROSS_TEXTURE_CUBE_MAP,
) -> Mesh:
    """A unit cube with texture coordinates for the given map layout."""
    if texture_type is CubeTextureType.LEFT_CROSS_TEXTURE_CUBE_MAP:
        return create_sanity_cube()

    if texture_type is CubeTextureType.LEFT_CROSS_TEXTURE_RECT_MAP:
        uvs = list(_RECT_MAP_UVS)
    elif texture_type in (CubeTextureType.VERT_TEXTURE_MAP, CubeTextureType.HORZ_TEXTURE_MAP):
        uvs = _strip_uvs(texture_type)
    else:
        uvs = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)] * 6

    mesh = Mesh()
    mesh.uv.extend(uvs)
    for pos in create_sanity_cube().pos:
        _push(mesh, pos[:3])
    return mesh


_SKY_CORNERS = (
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
    (1.0, -1.0, -1.0),
    (-1.0, -1.0, -1.0),
    (-1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0),
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
)

_SKY_FACES = (
    (1, 2, 6, 6, 5, 1),  # Right
    (0, 4, 7, 7, 3, 0),  # Left
    (4, 5, 6, 6, 7, 4),  # Top
    (0, 3, 2, 2, 1, 0),  # Bottom
    (0, 1, 5, 5, 4, 0),  # Back
    (3, 7, 6, 6, 2, 3),  # Front
)


def create_sky_cube() -> Mesh:
    """A left-handed cube spanning -1..1 for cube-map sky rendering."""
    mesh = Mesh()
    for face in _SKY_FACES:
        for index in face:
            _push(mesh, _SKY_CORNERS[index], (0.0, 0.0), WHITE)
    return mesh