"""
Ride Vehicle Editor - Park Data Model

Manages the park map (tile element stacks per tile), vehicle types and ride
cars. Handles loading from and saving to JSON files.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from . import compact_json as json
from ..core.coords import (
    TILE_CENTER_OFFSET,
    TILE_SIZE,
    CarTrackLocation,
    CoordsXYZ,
)
from ..core.tile_elements import TileElement, TrackIterator
from ..core.vehicles import Car, RideObjectVehicle, get_distance_from_progress

LOGGER = logging.getLogger(__name__)

DEFAULT_SURFACE_Z = 14


class ParkData:
    """Manages park tiles, vehicle types and cars."""

    def __init__(self, width: int = 0, height: int = 0):
        self.name: str = ""
        self.width = width  # in tiles
        self.height = height
        self.tiles: Dict[Tuple[int, int], List[TileElement]] = {}
        self.vehicle_types: Dict[str, RideObjectVehicle] = {}
        self.cars: Dict[int, Car] = {}
        self.filepath: Optional[str] = None
        self.modified: bool = False

    def load(self, path: str):
        """Load park data from JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)

        self.name = data.get("name", "")
        self.width = data["width"]
        self.height = data["height"]

        # Every tile starts with the default surface unless listed explicitly
        default_surface = data.get(
            "defaultSurface",
            {"type": "surface", "baseZ": DEFAULT_SURFACE_Z, "clearanceZ": DEFAULT_SURFACE_Z},
        )
        self.tiles = {}
        for tile_y in range(self.height):
            for tile_x in range(self.width):
                self.tiles[(tile_x, tile_y)] = [TileElement.from_dict(default_surface)]

        for tile in data.get("tiles", []):
            elements = [TileElement.from_dict(e) for e in tile["elements"]]
            self.tiles[(tile["x"], tile["y"])] = elements

        self.vehicle_types = {}
        for name, vehicle_type in data.get("vehicleTypes", {}).items():
            self.vehicle_types[name] = RideObjectVehicle(name, vehicle_type.get("tabHeight", 0))

        self.cars = {}
        for car_data in data.get("cars", []):
            self.add_car(self._parse_car(car_data))

        self.filepath = path
        self.modified = False
        LOGGER.info("Loaded park %r (%dx%d, %d cars) from %s",
                    self.name, self.width, self.height, len(self.cars), path)

    def _parse_car(self, car_data: Dict[str, Any]) -> Car:
        type_name = car_data.get("type")
        car = Car(
            car_data["id"],
            ride_id=car_data.get("rideId", 0),
            vehicle_type=self.vehicle_types.get(type_name) if type_name else None,
            x=car_data.get("x", 0),
            y=car_data.get("y", 0),
            z=car_data.get("z", 0),
        )
        track_location = car_data.get("trackLocation")
        if track_location is not None:
            car.track_location = CarTrackLocation.from_dict(track_location)
            progress = car_data.get("trackProgress", 0)
            car.travel_by(get_distance_from_progress(car, progress))
        return car

    def save(self, path: Optional[str] = None):
        """Save park data to JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        tiles = []
        for (tile_x, tile_y), elements in sorted(self.tiles.items(), key=lambda t: (t[0][1], t[0][0])):
            tiles.append({
                "x": tile_x,
                "y": tile_y,
                "elements": [element.to_dict() for element in elements],
            })

        cars = []
        for car in self.cars.values():
            car_data = {
                "id": car.id,
                "rideId": car.ride_id,
                "type": car.vehicle_type.name if car.vehicle_type else None,
                "x": car.x,
                "y": car.y,
                "z": car.z,
            }
            if car.track_location is not None:
                car_data["trackLocation"] = car.track_location.to_dict()
                car_data["trackProgress"] = car.track_progress
            cars.append(car_data)

        data = {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "tiles": tiles,
            "vehicleTypes": {
                name: {"tabHeight": vehicle_type.tab_height}
                for name, vehicle_type in self.vehicle_types.items()
            },
            "cars": cars,
        }

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

        self.filepath = path
        self.modified = False

    def in_bounds(self, tile_x: int, tile_y: int) -> bool:
        return 0 <= tile_x < self.width and 0 <= tile_y < self.height

    def get_tile_elements(self, tile_x: int, tile_y: int) -> List[TileElement]:
        """Get the element stack of a tile (empty outside the map)."""
        return self.tiles.get((tile_x, tile_y), [])

    def set_tile_elements(self, tile_x: int, tile_y: int, elements: List[TileElement]):
        """Replace the element stack of a tile."""
        if self.in_bounds(tile_x, tile_y):
            self.tiles[(tile_x, tile_y)] = list(elements)
            self.modified = True

    def get_tile_element(self, x: int, y: int, index: int) -> Optional[TileElement]:
        """Get a tile element by map-unit position and stack index."""
        elements = self.get_tile_elements(x // TILE_SIZE, y // TILE_SIZE)
        if 0 <= index < len(elements):
            return elements[index]
        return None

    def top_element_index(self, x: int, y: int) -> Optional[int]:
        """Stack index of the highest element on the tile at a map-unit position."""
        elements = self.get_tile_elements(x // TILE_SIZE, y // TILE_SIZE)
        if not elements:
            return None
        return max(range(len(elements)), key=lambda i: (elements[i].base_z, i))

    def get_track_iterator(self, x: int, y: int, index: int) -> Optional[TrackIterator]:
        """Get a track iterator for a track element, or None for any other element."""
        element = self.get_tile_element(x, y, index)
        if element is None or element.type != "track":
            return None
        tile_x = x // TILE_SIZE
        tile_y = y // TILE_SIZE
        position = CoordsXYZ(
            tile_x * TILE_SIZE + TILE_CENTER_OFFSET,
            tile_y * TILE_SIZE + TILE_CENTER_OFFSET,
            element.base_z,
        )
        return TrackIterator(position, element.direction, element.track_type)

    def add_car(self, car: Car):
        self.cars[car.id] = car
        self.modified = True

    def get_car_by_id(self, car_id: int) -> Optional[Car]:
        return self.cars.get(car_id)

    def get_car_at(self, x: int, y: int, radius: int = TILE_CENTER_OFFSET) -> Optional[Car]:
        """Find the car closest to a map-unit position, within a radius."""
        closest = None
        closest_distance = radius * radius
        for car in self.cars.values():
            distance = (car.x - x) ** 2 + (car.y - y) ** 2
            if distance <= closest_distance:
                closest = car
                closest_distance = distance
        return closest
