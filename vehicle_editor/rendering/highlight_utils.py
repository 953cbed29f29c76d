"""
Ride Vehicle Editor - Highlight Utilities

Drawing helpers for tile selection borders and car markers.
"""

from typing import Tuple

import pygame


# Gold highlighting constants
HIGHLIGHT_COLOR = (255, 215, 0)
HIGHLIGHT_BORDER_WIDTH = 2


def draw_tile_border(
    screen,
    x: int,
    y: int,
    tile_size: int,
    color: Tuple[int, int, int] = HIGHLIGHT_COLOR,
    border_width: int = HIGHLIGHT_BORDER_WIDTH
):
    """
    Draw a colored border just inside a tile at the specified screen position.

    Args:
        screen: Pygame surface to draw on
        x: Screen x coordinate of tile
        y: Screen y coordinate of tile
        tile_size: Rendered size of tile in pixels
        color: Border color (default: gold)
        border_width: Border width in pixels (default: 2)
    """
    pygame.draw.rect(screen, color, pygame.Rect(x, y, tile_size, tile_size), border_width)


def draw_car_marker(
    screen,
    center: Tuple[int, int],
    radius: int,
    color: Tuple[int, int, int],
    direction: int | None = None,
):
    """Draw a car as a filled circle, with a heading tick when it is on track."""
    pygame.draw.circle(screen, color, center, radius)
    if direction is not None:
        dx, dy = ((-1, 0), (0, 1), (1, 0), (0, -1))[direction % 4]
        tip = (center[0] + dx * radius * 2, center[1] + dy * radius * 2)
        pygame.draw.line(screen, color, center, tip, 2)
