"""
Ride Vehicle Editor - View State

Manages viewport camera position, zoom, and conversions between screen
pixels and map units.
"""


from pygame import Rect

from park.core.coords import CoordsXY, align_with_map
from vehicle_editor.core.constants import MAP_TILE_SIZE


class ViewState:
    """Manages viewport camera and coordinate transformations."""

    def __init__(
        self, canvas_rect: Rect, offset_x: int = 0, offset_y: int = 0, scale: int = 1
    ):
        """
        Initialize view state.

        Args:
            canvas_rect: The canvas drawing area (screen coordinates)
            offset_x: Horizontal scroll offset in pixels
            offset_y: Vertical scroll offset in pixels
            scale: Screen pixels per map unit
        """
        self.canvas_rect = canvas_rect
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.scale = scale

    @property
    def tile_size(self) -> int:
        """Get the current tile size in pixels (based on scale)."""
        return MAP_TILE_SIZE * self.scale

    def screen_to_map(self, screen_pos: tuple[int, int]) -> CoordsXY | None:
        """
        Convert screen position to map units.

        Args:
            screen_pos: Screen position (x, y) in pixels

        Returns:
            Map coordinates, or None if outside canvas
        """
        if not self.canvas_rect.collidepoint(screen_pos):
            return None

        local_x = screen_pos[0] - self.canvas_rect.x + self.offset_x
        local_y = screen_pos[1] - self.canvas_rect.y + self.offset_y
        return CoordsXY(local_x // self.scale, local_y // self.scale)

    def screen_to_tile_corner(self, screen_pos: tuple[int, int]) -> CoordsXY | None:
        """Map coordinates of the corner of the tile under a screen position."""
        coords = self.screen_to_map(screen_pos)
        if coords is None:
            return None
        return CoordsXY(align_with_map(coords.x), align_with_map(coords.y))

    def map_to_screen(self, x: int, y: int) -> tuple[int, int]:
        """
        Convert map units to a screen position.

        Args:
            x: Map x coordinate
            y: Map y coordinate

        Returns:
            Screen position (x, y) in pixels
        """
        screen_x = self.canvas_rect.x + x * self.scale - self.offset_x
        screen_y = self.canvas_rect.y + y * self.scale - self.offset_y
        return (screen_x, screen_y)

    def is_tile_visible(self, tile_x: int, tile_y: int) -> bool:
        """
        Check if a tile is visible in the current viewport.

        Args:
            tile_x: Tile column
            tile_y: Tile row

        Returns:
            True if tile is visible in viewport
        """
        x, y = self.map_to_screen(tile_x * MAP_TILE_SIZE, tile_y * MAP_TILE_SIZE)
        tile_size = self.tile_size

        return not (
            x + tile_size < self.canvas_rect.x
            or x > self.canvas_rect.right
            or y + tile_size < self.canvas_rect.y
            or y > self.canvas_rect.bottom
        )
