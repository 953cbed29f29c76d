"""
Ride Vehicle Editor - Ride Vehicles

Cars of a ride train and the vehicle type metadata the editor needs.
"""

from dataclasses import dataclass

from .coords import TILE_CENTER_OFFSET, CarTrackLocation


# Travel distance covered by one step of track progress
DISTANCE_PER_PROGRESS = 1000

# Unit step per track direction (0 = -x, 1 = +y, 2 = +x, 3 = -y)
DIRECTION_DELTAS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class RideObjectVehicle:
    """Vehicle type metadata from the ride object."""

    name: str = ""
    tab_height: int = 0  # vertical offset of the tab icon, negative for inverted cars


class Car:
    """A single car entity of a ride vehicle."""

    def __init__(
        self,
        car_id: int,
        ride_id: int = 0,
        vehicle_type: RideObjectVehicle | None = None,
        x: int = 0,
        y: int = 0,
        z: int = 0,
    ):
        self.id = car_id
        self.ride_id = ride_id
        self.vehicle_type = vehicle_type
        self.x = x
        self.y = y
        self.z = z
        self.track_progress: int = 0
        self._track_location: CarTrackLocation | None = None

    @property
    def track_location(self) -> CarTrackLocation | None:
        return self._track_location

    @track_location.setter
    def track_location(self, location: CarTrackLocation | None):
        """Put the car at the start of a track piece, or take it off the track."""
        self._track_location = location
        self.track_progress = 0
        if location is not None:
            self._move_to_track()

    def travel_by(self, distance: int):
        """Move the car along its current track piece by a travel distance.

        Cars that are not on a track do not move.
        """
        if self._track_location is None:
            return
        self.track_progress += round(distance / DISTANCE_PER_PROGRESS)
        self._move_to_track()

    def _move_to_track(self):
        location = self._track_location
        dx, dy = DIRECTION_DELTAS[location.direction % 4]
        self.x = location.x + TILE_CENTER_OFFSET + dx * self.track_progress
        self.y = location.y + TILE_CENTER_OFFSET + dy * self.track_progress
        self.z = location.z

    def __repr__(self) -> str:
        return f"Car(id={self.id}, x={self.x}, y={self.y}, z={self.z}, track={self._track_location})"


def get_distance_from_progress(car: Car, progress: int) -> int:
    """Travel distance needed to bring the car to the given track progress."""
    return (progress - car.track_progress) * DISTANCE_PER_PROGRESS
