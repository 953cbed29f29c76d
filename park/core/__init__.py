"""
Core park simulation types.

Coordinates, tile elements, ride vehicles and the game clock.
"""

from .clock import GameClock
from .coords import CarTrackLocation, CoordsXY, CoordsXYZ, equal_coords_xyz
from .tile_elements import TileElement, TrackIterator
from .vehicles import Car, RideObjectVehicle, get_distance_from_progress

__all__ = [
    "GameClock",
    "CarTrackLocation",
    "CoordsXY",
    "CoordsXYZ",
    "equal_coords_xyz",
    "TileElement",
    "TrackIterator",
    "Car",
    "RideObjectVehicle",
    "get_distance_from_progress",
]
