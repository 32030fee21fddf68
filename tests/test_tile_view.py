from hw3dkit.tile_view import TileTransformedView
from hw3dkit.vector import Vec2


def _view() -> TileTransformedView:
    return TileTransformedView(Vec2(640, 480), Vec2(32, 32))


def test_scale_is_tile_size():
    view = _view()
    assert view.world_scale == Vec2(32, 32)


def test_top_left_tile_at_origin():
    assert _view().top_left_tile() == Vec2(0, 0)


def test_visible_tiles_is_difference():
    view = _view()
    view.set_world_offset(Vec2(3.3, -1.7))
    assert view.visible_tiles() == view.bottom_right_tile() - view.top_left_tile()


def test_bottom_right_covers_view():
    view = _view()
    br = view.bottom_right_tile()
    assert br.x * 32 >= 640 and br.y * 32 >= 480


def test_tile_under_origin_matches_top_left():
    view = _view()
    view.set_world_offset(Vec2(2.5, 7.25))
    assert view.tile_under_screen_pos(Vec2(0, 0)) == view.top_left_tile()


def test_tile_under_screen_pos_steps_by_tile():
    view = _view()
    first = view.tile_under_screen_pos(Vec2(5, 5))
    next_tile = view.tile_under_screen_pos(Vec2(5 + 32, 5))
    assert next_tile - first == Vec2(1, 0)


def test_tile_offset_zero_for_whole_offset():
    view = _view()
    view.set_world_offset(Vec2(4.0, 9.0))
    assert view.tile_offset() == Vec2(0, 0)


def test_tile_offset_within_tile():
    view = _view()
    view.set_world_offset(Vec2(2.5, 1.25))
    offset = view.tile_offset()
    assert 0 <= offset.x < 32 and 0 <= offset.y < 32
    assert offset.x == 16


def test_zoom_changes_visible_tiles():
    view = _view()
    before = view.visible_tiles()
    view.zoom_at_screen_pos(2.0, Vec2(0, 0))
    after = view.visible_tiles()
    assert after.x < before.x and after.y < before.y