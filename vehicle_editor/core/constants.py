"""
Ride Vehicle Editor - Editor Constants

Configuration constants for the vehicle dragger and the viewer window.
"""

from park.core.coords import TILE_CENTER_OFFSET, TILE_SIZE

# Map geometry
MAP_TILE_SIZE = TILE_SIZE
TILE_CENTER = TILE_CENTER_OFFSET
SURFACE_SLOPE_HEIGHT = 8

# Vehicle silhouette correction
INVERTED_TAB_HEIGHT_LIMIT = -10
INVERTED_HEIGHT_OFFSET = 29

# Only every 5th tick is processed while dragging in multiplayer (~8 updates/s)
MULTIPLAYER_UPDATE_INTERVAL = 5

# Tool and action identifiers
DRAG_TOOL_ID = "rve-drag-vehicle"
DRAG_ACTION_ID = "rve-drag-car"

# UI Layout
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 720
STATUS_HEIGHT = 30
CANVAS_OFFSET_X = 0
CANVAS_OFFSET_Y = 0
CANVAS_SCALE = 1  # screen pixels per map unit
FPS = 40

# Colors
COLOR_BG = (48, 48, 48)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_GRID_SUPER = (120, 120, 120)
GRID_SUPER_INTERVAL = 4  # tiles between brighter grid lines
COLOR_TEXT = (255, 255, 255)
COLOR_CAR = (220, 60, 60)
COLOR_CAR_SELECTED = (255, 215, 0)

ELEMENT_COLORS = {
    "surface": (12, 147, 0),
    "footpath": (160, 140, 110),
    "track": (90, 90, 200),
    "small_scenery": (0, 82, 0),
    "large_scenery": (0, 60, 0),
    "wall": (130, 130, 130),
    "banner": (200, 80, 200),
    "entrance": (200, 200, 80),
}
WATER_COLOR = (100, 176, 255)
