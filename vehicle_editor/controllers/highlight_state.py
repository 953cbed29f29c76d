"""
Ride Vehicle Editor - Highlight State

Manages temporary visual highlights (tile selection under a dragged car,
selected car).
"""

from pygame import Rect

from park.core.coords import CoordsXY
from vehicle_editor.core.constants import MAP_TILE_SIZE


class HighlightState:
    """Manages temporary visual highlights and previews."""

    def __init__(self):
        """Initialize with no highlights."""
        self.tiles: list[CoordsXY] = []  # tile corners in map units
        self.selected_car_id: int | None = None

    def set_tiles(self, tiles: list[CoordsXY]):
        """
        Replace the highlighted tile selection.

        Args:
            tiles: Tile corner coordinates in map units
        """
        self.tiles = list(tiles)

    def clear_tiles(self):
        """Clear the tile selection."""
        self.tiles = []

    def tile_rects(self) -> list[Rect]:
        """Highlighted tiles as rectangles in map units."""
        return [Rect(tile.x, tile.y, MAP_TILE_SIZE, MAP_TILE_SIZE) for tile in self.tiles]
