"""A transformed view whose world units are whole tiles."""

from __future__ import annotations

import math

from hw3dkit.transformed_view import TransformedView
from hw3dkit.vector import Vec2


class TileTransformedView(TransformedView):
    """A view where one world unit is one tile of ``tile_size`` pixels."""

    def __init__(self, view_area: Vec2, tile_size: Vec2) -> None:
        super().__init__(view_area, tile_size)

    def top_left_tile(self) -> Vec2:
        return self.screen_to_world(Vec2(0, 0)).floor()

    def bottom_right_tile(self) -> Vec2:
        return self.screen_to_world(self.view_area).ceil()

    def visible_tiles(self) -> Vec2:
        """Number of tiles spanned by the view in each direction."""
        return self.bottom_right_tile() - self.top_left_tile()

    def tile_under_screen_pos(self, pos: Vec2) -> Vec2:
        return self.screen_to_world(pos).floor()

    def tile_offset(self) -> Vec2:
        """Pixel offset of the world offset within its tile."""
        ox, oy = self.world_offset
        return Vec2(
            int((ox - math.floor(ox)) * self.world_scale.x),
            int((oy - math.floor(oy)) * self.world_scale.y),
        )