"""Reading Wavefront OBJ geometry into meshes."""

from __future__ import annotations

import os
from typing import Iterable

from hw3dkit.colour import WHITE
from hw3dkit.mesh import Mesh
from hw3dkit.vector import Vec2, Vec3


def _floats(tokens: list[str], count: int, line: str) -> list[float]:
    if len(tokens) < count:
        raise ValueError(f"expected {count} numbers in OBJ line {line!r}")
    try:
        return [float(t) for t in tokens[:count]]
    except ValueError as exc:
        raise ValueError(f"malformed number in OBJ line {line!r}") from exc


def _face_indices(token: str) -> list[int]:
    return [int(piece) for piece in token.split("/") if piece]


def _lookup(items: list, index_list: list[int], slot: int, what: str):
    if slot >= len(index_list):
        raise ValueError(f"face vertex has no {what} index")
    index = index_list[slot]
    if not 1 <= index <= len(items):
        raise ValueError(f"{what} index {index} out of range 1..{len(items)}")
    return items[index - 1]


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from OBJ text lines.

    The x axis is mirrored to convert to a left-handed system, and the v
    texture coordinate is flipped. Only triangular faces are kept.
    """
    verts: list[Vec3] = []
    norms: list[Vec3] = []
    texs: list[Vec2] = []
    faces: list[list[list[int]]] = []

    for raw in lines:
        line = raw.rstrip("\r\n")
        tokens = line.split()
        if not tokens:
            continue
        keyword, args = tokens[0], tokens[1:]
        if keyword == "vt":
            u, v = _floats(args, 2, line)
            texs.append(Vec2(u, 1.0 - v))
        elif keyword == "vn":
            x, y, z = _floats(args, 3, line)
            norms.append(Vec3(-x, y, z))
        elif keyword == "v":
            x, y, z = _floats(args, 3, line)
            verts.append(Vec3(-x, y, z))
        elif keyword == "f":
            try:
                faces.append([_face_indices(token) for token in args])
            except ValueError as exc:
                raise ValueError(f"malformed face in OBJ line {line!r}") from exc

    mesh = Mesh()
    for face in faces:
        if len(face) != 3:
            continue
        for index in face:
            pos = _lookup(verts, index, 0, "vertex").as_array() if verts else (0, 0, 0, 0)
            uv = tuple(_lookup(texs, index, 1, "texture")) if texs else (0, 0)
            norm = _lookup(norms, index, 2, "normal").as_array() if norms else (0, 0, 0, 0)
            mesh.append(pos, norm, uv, WHITE)
    return mesh


def load_obj(path: str | os.PathLike) -> Mesh:
    """Read an OBJ file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)