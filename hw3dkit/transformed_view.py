"""A pannable, zoomable mapping between world space and screen space."""

from __future__ import annotations

from hw3dkit.vector import Vec2


class TransformedView:
    """Maps world coordinates to screen pixels through an offset and a scale."""

    def __init__(self, view_area: Vec2, pixel_scale: Vec2 = Vec2(1.0, 1.0)) -> None:
        self.world_offset = Vec2(0.0, 0.0)
        self.world_scale = Vec2(1.0, 1.0)
        self.panning = False
        self.start_pan_pos = Vec2(0.0, 0.0)
        self.zoom_clamp = False
        self.max_scale = Vec2(0.0, 0.0)
        self.min_scale = Vec2(0.0, 0.0)
        self.view_area = Vec2(0, 0)
        self.set_view_area(view_area)
        self.set_world_scale(pixel_scale)
        self.pixel_scale = pixel_scale
        self.recip_pixel = 1.0 / pixel_scale

    def _clamped(self, scale: Vec2) -> Vec2:
        if self.zoom_clamp:
            return scale.clamp(self.min_scale, self.max_scale)
        return scale

    def set_world_offset(self, offset: Vec2) -> None:
        self.world_offset = offset

    def move_world_offset(self, delta: Vec2) -> None:
        self.world_offset = self.world_offset + delta

    def set_world_scale(self, scale: Vec2) -> None:
        """Set the scale, clamped to the extents when clamping is on."""
        self.world_scale = self._clamped(scale)

    def set_view_area(self, view_area: Vec2) -> None:
        self.view_area = view_area

    def world_top_left(self) -> Vec2:
        """World position at the top-left corner of the view."""
        return self.screen_to_world(Vec2(0, 0))

    def world_bottom_right(self) -> Vec2:
        """World position at the bottom-right corner of the view."""
        return self.screen_to_world(self.view_area)

    def world_visible_area(self) -> Vec2:
        return self.world_bottom_right() - self.world_top_left()

    def set_scale_extents(self, scale_min: Vec2, scale_max: Vec2) -> None:
        self.max_scale = scale_max
        self.min_scale = scale_min

    def enable_scale_clamp(self, enable: bool) -> None:
        self.zoom_clamp = enable

    def _zoom_about(self, new_scale: Vec2, pos: Vec2) -> None:
        before = self.screen_to_world(pos)
        self.world_scale = self._clamped(new_scale)
        after = self.screen_to_world(pos)
        self.world_offset = self.world_offset + (before - after)

    def zoom_at_screen_pos(self, delta_zoom: float, pos: Vec2) -> None:
        """Multiply the scale, keeping the world point under ``pos`` fixed."""
        self._zoom_about(self.world_scale * delta_zoom, pos)

    def set_zoom(self, zoom: float, pos: Vec2) -> None:
        """Set a uniform scale, keeping the world point under ``pos`` fixed."""
        self._zoom_about(Vec2(zoom, zoom), pos)

    def start_pan(self, pos: Vec2) -> None:
        self.panning = True
        self.start_pan_pos = Vec2(float(pos.x), float(pos.y))

    def update_pan(self, pos: Vec2) -> None:
        if self.panning:
            current = Vec2(float(pos.x), float(pos.y))
            self.world_offset = self.world_offset - (current - self.start_pan_pos) / self.world_scale
            self.start_pan_pos = current

    def end_pan(self, pos: Vec2) -> None:
        self.update_pan(pos)
        self.panning = False

    def world_to_screen(self, world_pos: Vec2) -> Vec2:
        return (world_pos - self.world_offset) * self.world_scale

    def screen_to_world(self, screen_pos: Vec2) -> Vec2:
        return screen_pos / self.world_scale + self.world_offset

    def scale_to_world(self, screen_size: Vec2) -> Vec2:
        return screen_size / self.world_scale

    def scale_to_screen(self, world_size: Vec2) -> Vec2:
        return world_size * self.world_scale

    def is_point_visible(self, pos: Vec2) -> bool:
        """True if the world point lands on a pixel inside the view."""
        screen = self.world_to_screen(pos).truncated()
        return 0 <= screen.x < self.view_area.x and 0 <= screen.y < self.view_area.y

    def is_rect_visible(self, pos: Vec2, size: Vec2) -> bool:
        """True if any part of the world rectangle overlaps the view."""
        screen_pos = self.world_to_screen(pos).truncated()
        screen_size = (size * self.world_scale).truncated()
        return (
            screen_pos.x < self.view_area.x
            and screen_pos.x + screen_size.x > 0
            and screen_pos.y < self.view_area.y
            and screen_pos.y + screen_size.y > 0
        )