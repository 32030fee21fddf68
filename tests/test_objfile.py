import pytest

from hw3dkit.colour import WHITE
from hw3dkit.objfile import load_obj, parse_obj

TRIANGLE = [
    "# a triangle",
    "v 1.0 2.0 3.0",
    "v 4.0 5.0 6.0",
    "v 7.0 8.0 9.0",
    "vt 0.25 0.75",
    "vt 0.5 0.0",
    "vn 1.0 0.0 0.0",
    "",
    "f 1/1/1 2/2/1 3/1/1",
]


def test_positions_are_mirrored_in_x():
    mesh = parse_obj(TRIANGLE)
    assert mesh.pos == [(-1.0, 2.0, 3.0, 1.0), (-4.0, 5.0, 6.0, 1.0), (-7.0, 8.0, 9.0, 1.0)]


def test_texture_v_is_flipped():
    mesh = parse_obj(TRIANGLE)
    assert mesh.uv[0] == (0.25, 1.0 - 0.75)
    assert mesh.uv[1] == (0.5, 1.0)
    assert mesh.uv[2] == mesh.uv[0]


def test_normals_are_mirrored_in_x():
    mesh = parse_obj(TRIANGLE)
    assert all(n == (-1.0, 0.0, 0.0, 1.0) for n in mesh.norm)
    assert mesh.col == [WHITE] * 3


def test_non_triangle_faces_are_skipped():
    lines = ["v 0 0 0", "v 1 0 0", "v 1 1 0", "v 0 1 0", "f 1 2 3 4"]
    assert len(parse_obj(lines)) == 0


def test_missing_attributes_default_to_zero():
    lines = ["v 1 2 3", "v 4 5 6", "v 7 8 9", "f 1 2 3"]
    mesh = parse_obj(lines)
    assert len(mesh) == 3
    assert mesh.uv == [(0.0, 0.0)] * 3
    assert mesh.norm == [(0.0, 0.0, 0.0, 0.0)] * 3


def test_index_out_of_range_raises():
    with pytest.raises(ValueError):
        parse_obj(["v 0 0 0", "f 1 2 3"])


def test_malformed_vertex_raises():
    with pytest.raises(ValueError):
        parse_obj(["v 1 x 3"])


def test_load_obj_round_trip(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("\n".join(TRIANGLE) + "\n", encoding="utf-8")
    assert load_obj(path) == parse_obj(TRIANGLE)


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")