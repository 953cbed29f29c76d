"""
Ride Vehicle Editor - Position Resolver

Turns a tool hit-test into a candidate car placement.
"""

from park.core.coords import CarTrackLocation, CoordsXYZ
from park.core.tile_elements import BASE_HEIGHT_TYPES
from park.core.vehicles import RideObjectVehicle

from vehicle_editor.core.constants import (
    INVERTED_HEIGHT_OFFSET,
    INVERTED_TAB_HEIGHT_LIMIT,
    SURFACE_SLOPE_HEIGHT,
    TILE_CENTER,
)
from vehicle_editor.core.protocols import TileLookup, TrackIteratorLookup
from vehicle_editor.tools.base_tool import ToolEventArgs


def get_tab_height_offset(tab_height: int) -> int:
    """Extra height that lines the drag preview up with how the car is drawn.

    29 for fully inverted cars, the negated tab height for other negative
    values, 0 for regular cars.
    """
    if tab_height < INVERTED_TAB_HEIGHT_LIMIT:
        return INVERTED_HEIGHT_OFFSET
    if tab_height < 0:
        return -tab_height
    return 0


def get_position_from_tool(
    args: ToolEventArgs,
    vehicle_type: RideObjectVehicle | None,
    tile_lookup: TileLookup,
    track_lookup: TrackIteratorLookup,
) -> tuple[CoordsXYZ | None, CarTrackLocation | None]:
    """Get a possible position to drag the car to.

    Args:
        args: Tool hit-test with map coordinates of the tile corner and the
            index of the hit element in that tile's stack
        vehicle_type: Type of the dragged car, None if unknown
        tile_lookup: Resolves tile elements by position and index
        track_lookup: Resolves track iterators by position and index

    Returns:
        (tile_position, track_location). Both are None when the hit-test is
        not over a usable surface; the track location is None unless a track
        iterator is available for the hit element.
    """
    if args.map_coords is None or args.tile_element_index is None:
        return None, None

    x = args.map_coords.x + TILE_CENTER
    y = args.map_coords.y + TILE_CENTER
    index = args.tile_element_index
    element = tile_lookup.get_tile_element(x, y, index)
    if element is None:
        return None, None

    z = element.base_z if element.type in BASE_HEIGHT_TYPES else element.clearance_z

    # Cars dropped on terrain float on water, or sit on top of sloped land
    if element.type == "surface":
        if element.water_height > z:
            z = element.water_height
        elif element.slope:
            z += SURFACE_SLOPE_HEIGHT

    track_location = None
    if element.type == "track":
        iterator = track_lookup.get_track_iterator(x, y, index)
        if iterator is not None:
            track_location = CarTrackLocation(
                x=iterator.position.x - TILE_CENTER,
                y=iterator.position.y - TILE_CENTER,
                z=iterator.position.z,
                direction=element.direction,
                track_type=element.track_type,
            )

    tab_height = vehicle_type.tab_height if vehicle_type else 0
    z += get_tab_height_offset(tab_height)

    return CoordsXYZ(x, y, z), track_location
