"""
Ride Vehicle Editor - Park Renderer

Renders the top-down park view: tiles, cars and the drag highlight.
"""

import pygame
from pygame import Surface

from park.formats.park_data import ParkData
from vehicle_editor.controllers.highlight_state import HighlightState
from vehicle_editor.controllers.view_state import ViewState
from vehicle_editor.core.constants import (
    COLOR_CAR,
    COLOR_CAR_SELECTED,
    COLOR_GRID,
    COLOR_GRID_SUPER,
    ELEMENT_COLORS,
    GRID_SUPER_INTERVAL,
    MAP_TILE_SIZE,
    WATER_COLOR,
)
from .highlight_utils import draw_car_marker, draw_tile_border


class ParkRenderer:
    """Renders park canvas view."""

    @staticmethod
    def tile_color(park: ParkData, tile_x: int, tile_y: int) -> tuple[int, int, int]:
        """Color of the highest element on a tile, water if flooded."""
        elements = park.get_tile_elements(tile_x, tile_y)
        if not elements:
            return (0, 0, 0)
        top = max(elements, key=lambda e: e.base_z)
        surface = elements[0] if elements[0].type == "surface" else None
        if top is surface and surface.water_height > surface.base_z:
            return WATER_COLOR
        return ELEMENT_COLORS.get(top.type, (255, 0, 255))

    @staticmethod
    def grid_color(edge: int) -> tuple[int, int, int]:
        """Color of the line along a tile edge; every 4th edge is brighter."""
        return COLOR_GRID_SUPER if edge % GRID_SUPER_INTERVAL == 0 else COLOR_GRID

    @staticmethod
    def render_grid(screen: Surface, view_state: ViewState, park: ParkData):
        """Draw tile edge lines over the park area only."""
        left, top = view_state.map_to_screen(0, 0)
        right, bottom = view_state.map_to_screen(
            park.width * MAP_TILE_SIZE, park.height * MAP_TILE_SIZE
        )

        for edge in range(park.width + 1):
            x, _ = view_state.map_to_screen(edge * MAP_TILE_SIZE, 0)
            pygame.draw.line(screen, ParkRenderer.grid_color(edge), (x, top), (x, bottom))

        for edge in range(park.height + 1):
            _, y = view_state.map_to_screen(0, edge * MAP_TILE_SIZE)
            pygame.draw.line(screen, ParkRenderer.grid_color(edge), (left, y), (right, y))

    @staticmethod
    def render(
        screen: Surface,
        view_state: ViewState,
        park: ParkData,
        highlight_state: HighlightState,
        show_grid: bool = True,
    ):
        """
        Render park canvas view.

        Args:
            screen: Pygame surface to draw on
            view_state: Viewport for map to screen conversion
            park: Park data to render
            highlight_state: Tile selection and selected car
            show_grid: Whether to show grid overlay
        """
        tile_size = view_state.tile_size
        screen.set_clip(view_state.canvas_rect)

        for tile_y in range(park.height):
            for tile_x in range(park.width):
                if not view_state.is_tile_visible(tile_x, tile_y):
                    continue
                x, y = view_state.map_to_screen(tile_x * MAP_TILE_SIZE, tile_y * MAP_TILE_SIZE)
                color = ParkRenderer.tile_color(park, tile_x, tile_y)
                pygame.draw.rect(screen, color, (x, y, tile_size, tile_size))

        if show_grid:
            ParkRenderer.render_grid(screen, view_state, park)

        for rect in highlight_state.tile_rects():
            x, y = view_state.map_to_screen(rect.x, rect.y)
            draw_tile_border(screen, x, y, tile_size)

        radius = max(3, tile_size // 6)
        for car in park.cars.values():
            color = COLOR_CAR_SELECTED if car.id == highlight_state.selected_car_id else COLOR_CAR
            direction = car.track_location.direction if car.track_location else None
            draw_car_marker(screen, view_state.map_to_screen(car.x, car.y), radius, color, direction)

        screen.set_clip(None)
