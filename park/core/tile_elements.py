"""
Ride Vehicle Editor - Tile Elements

Layered objects stacked on a map tile, and the track iterator that yields
where a car sits on a track element.
"""

from dataclasses import dataclass

from .coords import CoordsXYZ


# Element kinds placed by their base height rather than their clearance
BASE_HEIGHT_TYPES = ("footpath", "banner", "wall", "track")

ELEMENT_TYPES = (
    "surface",
    "footpath",
    "track",
    "small_scenery",
    "wall",
    "large_scenery",
    "banner",
    "entrance",
)


@dataclass
class TileElement:
    """A single element in a tile's stack."""

    type: str
    base_z: int = 0
    clearance_z: int = 0
    water_height: int = 0   # surface only
    slope: int = 0          # surface only
    direction: int = 0      # track only
    track_type: int = 0     # track only

    def to_dict(self) -> dict:
        data = {"type": self.type, "baseZ": self.base_z, "clearanceZ": self.clearance_z}
        if self.type == "surface":
            data["waterHeight"] = self.water_height
            data["slope"] = self.slope
        elif self.type == "track":
            data["direction"] = self.direction
            data["trackType"] = self.track_type
        return data

    @staticmethod
    def from_dict(data: dict) -> "TileElement":
        element_type = data["type"]
        if element_type not in ELEMENT_TYPES:
            raise ValueError(f"Unknown tile element type: {element_type}")
        return TileElement(
            type=element_type,
            base_z=data.get("baseZ", 0),
            clearance_z=data.get("clearanceZ", 0),
            water_height=data.get("waterHeight", 0),
            slope=data.get("slope", 0),
            direction=data.get("direction", 0),
            track_type=data.get("trackType", 0),
        )


@dataclass(frozen=True)
class TrackIterator:
    """Cursor over a track element; position is the piece origin at the tile center."""

    position: CoordsXYZ
    direction: int
    track_type: int
