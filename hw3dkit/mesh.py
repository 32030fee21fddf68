"""Triangle meshes and the basic cube builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from hw3dkit.colour import WHITE, Pixel
from hw3dkit.vector import Vec3

Vec4Tuple = tuple[float, float, float, float]
Vec2Tuple = tuple[float, float]


class DecalStructure(Enum):
    """How a vertex stream is assembled into triangles."""

    LIST = "list"
    FAN = "fan"
    STRIP = "strip"


def _vec4(values: Iterable[float]) -> Vec4Tuple:
    items = tuple(float(v) for v in values)
    if len(items) > 4:
        raise ValueError(f"expected at most 4 components, got {len(items)}")
    return items + (0.0,) * (4 - len(items))  # type: ignore[return-value]


def _vec2(values: Iterable[float]) -> Vec2Tuple:
    items = tuple(float(v) for v in values)
    if len(items) != 2:
        raise ValueError(f"expected 2 texture components, got {len(items)}")
    return items  # type: ignore[return-value]


@dataclass
class Mesh:
    """Parallel vertex attribute lists describing a set of triangles."""

    pos: list[Vec4Tuple] = field(default_factory=list)
    norm: list[Vec4Tuple] = field(default_factory=list)
    uv: list[Vec2Tuple] = field(default_factory=list)
    col: list[Pixel] = field(default_factory=list)
    layout: DecalStructure = DecalStructure.LIST

    def append(
        self,
        pos: Iterable[float],
        norm: Iterable[float],
        uv: Iterable[float],
        col: Pixel = WHITE,
    ) -> None:
        """Add one vertex; missing position and normal components are zero."""
        self.pos.append(_vec4(pos))
        self.norm.append(_vec4(norm))
        self.uv.append(_vec2(uv))
        self.col.append(col)

    def __len__(self) -> int:
        return len(self.pos)


_SANITY_FACES = (
    # South
    ((0, 0, -1), (
        ((0, 0, 0), (0.25, 0.5)), ((1, 0, 0), (0.5, 0.5)), ((1, 1, 0), (0.5, 0.25)),
        ((0, 0, 0), (0.25, 0.5)), ((1, 1, 0), (0.5, 0.25)), ((0, 1, 0), (0.25, 0.25)),
    )),
    # East
    ((1, 0, 0), (
        ((1, 0, 0), (0.5, 0.5)), ((1, 0, 1), (0.75, 0.5)), ((1, 1, 1), (0.75, 0.25)),
        ((1, 0, 0), (0.5, 0.5)), ((1, 1, 1), (0.75, 0.25)), ((1, 1, 0), (0.5, 0.25)),
    )),
    # North
    ((0, 0, 1), (
        ((1, 0, 1), (0.75, 0.5)), ((0, 0, 1), (1.0, 0.5)), ((0, 1, 1), (1.0, 0.25)),
        ((1, 0, 1), (0.75, 0.5)), ((0, 1, 1), (1.0, 0.25)), ((1, 1, 1), (0.75, 0.25)),
    )),
    # West
    ((-1, 0, 0), (
        ((0, 0, 1), (0.0, 0.5)), ((0, 0, 0), (0.25, 0.5)), ((0, 1, 0), (0.25, 0.25)),
        ((0, 0, 1), (0.0, 0.5)), ((0, 1, 0), (0.25, 0.25)), ((0, 1, 1), (0.0, 0.25)),
    )),
    # Top
    ((0, 1, 0), (
        ((0, 1, 0), (0.25, 0.25)), ((1, 1, 0), (0.5, 0.25)), ((1, 1, 1), (0.5, 0.0)),
        ((0, 1, 0), (0.25, 0.25)), ((1, 1, 1), (0.5, 0.0)), ((0, 1, 1), (0.25, 0.0)),
    )),
    # Bottom
    ((0, -1, 0), (
        ((0, 0, 1), (0.25, 0.75)), ((1, 0, 1), (0.5, 0.75)), ((1, 0, 0), (0.5, 0.5)),
        ((0, 0, 1), (0.25, 0.75)), ((1, 0, 0), (0.5, 0.5)), ((0, 0, 0), (0.25, 0.5)),
    )),
)


def create_sanity_cube() -> Mesh:
    """A unit cube textured from a left-cross cube map layout."""
    mesh = Mesh()
    for normal, vertices in _SANITY_FACES:
        for pos, uv in vertices:
            mesh.append(pos, normal, uv, WHITE)
    return mesh


_CUBE_FACES = (
    ((0, 0, -1), (0, 1, 2, 0, 2, 3)),   # South
    ((1, 0, 0), (3, 2, 6, 3, 6, 7)),    # East
    ((0, 0, 1), (7, 6, 5, 7, 5, 4)),    # North
    ((-1, 0, 0), (4, 5, 1, 4, 1, 0)),   # West
    ((0, 1, 0), (1, 5, 6, 1, 6, 2)),    # Top
    ((0, -1, 0), (7, 4, 0, 7, 0, 3)),   # Bottom
)

_CUBE_FACE_UVS = ((0, 1), (0, 0), (1, 0), (0, 1), (1, 0), (1, 1))


def create_cube(size: Vec3, offset: Vec3 = Vec3(0, 0, 0)) -> Mesh:
    """A cuboid of the given size, its minimum corner at ``offset``."""
    corners = [
        Vec3(0, 0, 0) + offset,
        Vec3(0, size.y, 0) + offset,
        Vec3(size.x, size.y, 0) + offset,
        Vec3(size.x, 0, 0) + offset,
        Vec3(0, 0, size.z) + offset,
        Vec3(0, size.y, size.z) + offset,
        Vec3(size.x, size.y, size.z) + offset,
        Vec3(size.x, 0, size.z) + offset,
    ]
    mesh = Mesh()
    for normal, indices in _CUBE_FACES:
        for index, uv in zip(indices, _CUBE_FACE_UVS):
            mesh.append(corners[index].as_array(), normal, uv, WHITE)
    return mesh