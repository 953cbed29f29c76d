"""
Ride Vehicle Editor - Coordinates

Map-unit points and track-relative car locations.
"""

from dataclasses import dataclass


# Map units per tile edge, and the offset from a tile corner to its center
TILE_SIZE = 32
TILE_CENTER_OFFSET = 16


@dataclass(frozen=True)
class CoordsXY:
    """A 2D point in map units."""

    x: int
    y: int


@dataclass(frozen=True)
class CoordsXYZ:
    """A 3D point in map units."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class CarTrackLocation:
    """A point on a track element plus the orientation a car takes there."""

    x: int
    y: int
    z: int
    direction: int
    track_type: int

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "direction": self.direction,
            "trackType": self.track_type,
        }

    @staticmethod
    def from_dict(data: dict) -> "CarTrackLocation":
        return CarTrackLocation(
            data["x"], data["y"], data["z"], data["direction"], data["trackType"]
        )


def equal_coords_xyz(a: CoordsXYZ | CarTrackLocation, b: CoordsXYZ | CarTrackLocation | None) -> bool:
    """Compare two points component-wise. A point never equals an absent point."""
    if b is None:
        return False
    return a.x == b.x and a.y == b.y and a.z == b.z


def coords_to_dict(coords: CoordsXYZ) -> dict:
    return {"x": coords.x, "y": coords.y, "z": coords.z}


def coords_from_dict(data: dict) -> CoordsXYZ:
    return CoordsXYZ(data["x"], data["y"], data["z"])


def align_with_map(coordinate: int) -> int:
    """Align a map-unit coordinate with the edge of its map tile."""
    return (coordinate // TILE_SIZE) * TILE_SIZE
