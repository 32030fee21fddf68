import pytest

from hw3dkit.transformed_view import TransformedView
from hw3dkit.vector import Vec2


def approx_vec(v):
    return pytest.approx(tuple(v))


def make_view(scale=Vec2(1.0, 1.0)):
    return TransformedView(Vec2(100, 80), scale)


def test_initial_state_uses_pixel_scale():
    view = make_view(Vec2(2.0, 4.0))
    assert view.world_scale == Vec2(2.0, 4.0)
    assert view.world_offset == Vec2(0.0, 0.0)
    assert tuple(view.recip_pixel) == approx_vec(1.0 / Vec2(2.0, 4.0))


def test_world_screen_round_trip():
    view = make_view(Vec2(2.0, 3.0))
    view.set_world_offset(Vec2(-7.5, 4.25))
    p = Vec2(12.3, -4.5)
    assert tuple(view.screen_to_world(view.world_to_screen(p))) == approx_vec(p)


def test_scale_round_trip():
    view = make_view(Vec2(2.5, 0.5))
    size = Vec2(10.0, 6.0)
    assert tuple(view.scale_to_world(view.scale_to_screen(size))) == approx_vec(size)


def test_top_left_is_world_offset():
    view = make_view()
    view.set_world_offset(Vec2(3.0, -2.0))
    assert tuple(view.world_top_left()) == approx_vec(Vec2(3.0, -2.0))


def test_visible_area_is_corner_difference():
    view = make_view(Vec2(2.0, 2.0))
    view.set_world_offset(Vec2(5.0, 5.0))
    area = view.world_visible_area()
    expected = view.world_bottom_right() - view.world_top_left()
    assert tuple(area) == approx_vec(expected)
    assert tuple(area) == approx_vec(view.scale_to_world(view.view_area))


def test_move_world_offset_accumulates():
    view = make_view()
    view.move_world_offset(Vec2(1.0, 2.0))
    view.move_world_offset(Vec2(3.0, -1.0))
    assert tuple(view.world_offset) == approx_vec(Vec2(1.0, 2.0) + Vec2(3.0, -1.0))


def test_zoom_keeps_point_under_cursor_fixed():
    view = make_view()
    cursor = Vec2(30, 20)
    before = view.screen_to_world(cursor)
    view.zoom_at_screen_pos(2.0, cursor)
    assert view.world_scale == Vec2(2.0, 2.0)
    assert tuple(view.screen_to_world(cursor)) == approx_vec(before)


def test_set_zoom_is_uniform_and_anchored():
    view = make_view(Vec2(1.0, 3.0))
    cursor = Vec2(40.0, 10.0)
    before = view.screen_to_world(cursor)
    view.set_zoom(0.5, cursor)
    assert view.world_scale == Vec2(0.5, 0.5)
    assert tuple(view.screen_to_world(cursor)) == approx_vec(before)


def test_scale_clamp_applies_only_when_enabled():
    view = make_view()
    view.set_scale_extents(Vec2(0.5, 0.5), Vec2(2.0, 2.0))
    view.set_world_scale(Vec2(10.0, 10.0))
    assert view.world_scale == Vec2(10.0, 10.0)
    view.enable_scale_clamp(True)
    view.set_world_scale(Vec2(10.0, 0.1))
    assert view.world_scale == Vec2(2.0, 0.5)


def test_zoom_is_clamped():
    view = make_view()
    view.set_scale_extents(Vec2(0.5, 0.5), Vec2(2.0, 2.0))
    view.enable_scale_clamp(True)
    for _ in range(5):
        view.zoom_at_screen_pos(3.0, Vec2(10, 10))
    assert view.world_scale == Vec2(2.0, 2.0)


def test_pan_drags_world_with_cursor():
    view = make_view(Vec2(2.0, 2.0))
    grabbed = view.screen_to_world(Vec2(10, 10))
    view.start_pan(Vec2(10, 10))
    view.update_pan(Vec2(25, 4))
    assert tuple(view.screen_to_world(Vec2(25, 4))) == approx_vec(grabbed)


def test_update_pan_without_start_does_nothing():
    view = make_view()
    view.update_pan(Vec2(50, 50))
    assert view.world_offset == Vec2(0.0, 0.0)


def test_end_pan_applies_last_move_then_stops():
    view = make_view()
    grabbed = view.screen_to_world(Vec2(0, 0))
    view.start_pan(Vec2(0, 0))
    view.end_pan(Vec2(5, 5))
    assert tuple(view.screen_to_world(Vec2(5, 5))) == approx_vec(grabbed)
    offset = view.world_offset
    view.update_pan(Vec2(60, 60))
    assert view.world_offset == offset
    assert view.panning is False


@pytest.mark.parametrize(
    "point, visible",
    [
        (Vec2(0.0, 0.0), True),
        (Vec2(99.0, 79.0), True),
        (Vec2(100.0, 10.0), False),
        (Vec2(10.0, 80.0), False),
        (Vec2(-5.0, 10.0), False),
    ],
)
def test_point_visibility(point, visible):
    assert make_view().is_point_visible(point) is visible


@pytest.mark.parametrize(
    "pos, size, visible",
    [
        (Vec2(10.0, 10.0), Vec2(5.0, 5.0), True),
        (Vec2(-20.0, 10.0), Vec2(30.0, 5.0), True),
        (Vec2(-20.0, 10.0), Vec2(10.0, 5.0), False),
        (Vec2(100.0, 10.0), Vec2(10.0, 5.0), False),
        (Vec2(10.0, 90.0), Vec2(5.0, 5.0), False),
    ],
)
def test_rect_visibility(pos, size, visible):
    assert make_view().is_rect_visible(pos, size) is visible


def test_visibility_follows_offset():
    view = make_view()
    view.set_world_offset(Vec2(200.0, 0.0))
    assert view.is_point_visible(Vec2(0.0, 0.0)) is False
    assert view.is_point_visible(Vec2(250.0, 40.0)) is True