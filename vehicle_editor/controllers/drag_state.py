"""
Ride Vehicle Editor - Drag State

Payload types for a vehicle drag: where the car goes, and how the drag ended.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from park.core.coords import (
    CarTrackLocation,
    CoordsXYZ,
    coords_from_dict,
    coords_to_dict,
)


class DragState(IntEnum):
    """How a drag update came about."""

    DRAGGING = 0
    COMPLETE = 1
    CANCEL = 2


@dataclass(frozen=True)
class FreePlacement:
    """Car floats freely at a map position."""

    tile_position: CoordsXYZ

    @property
    def track_position(self) -> None:
        return None

    @property
    def track_progress(self) -> None:
        return None


@dataclass(frozen=True)
class TrackPlacement:
    """Car sits on a track piece, optionally at a given track progress."""

    tile_position: CoordsXYZ
    location: CarTrackLocation
    progress: int | None = None

    @property
    def track_position(self) -> CarTrackLocation:
        return self.location

    @property
    def track_progress(self) -> int | None:
        return self.progress


DragPosition = Union[FreePlacement, TrackPlacement]


def make_drag_position(
    tile_position: CoordsXYZ,
    track_position: CarTrackLocation | None,
    track_progress: int | None = None,
) -> DragPosition:
    """Build the placement matching the given fields.

    Raises:
        ValueError: if a track progress is given without a track position
    """
    if track_position is None:
        if track_progress is not None:
            raise ValueError("Track progress given without a track position")
        return FreePlacement(tile_position)
    return TrackPlacement(tile_position, track_position, track_progress)


@dataclass(frozen=True)
class DragVehicleArgs:
    """Arguments of the drag action sent to every participant."""

    target: int
    position: DragPosition
    state: DragState

    def to_payload(self) -> dict:
        track_position = self.position.track_position
        return {
            "target": self.target,
            "position": {
                "tilePosition": coords_to_dict(self.position.tile_position),
                "trackPosition": track_position.to_dict() if track_position else None,
                "trackProgress": self.position.track_progress,
            },
            "state": int(self.state),
        }

    @staticmethod
    def from_payload(payload: dict) -> "DragVehicleArgs":
        position = payload["position"]
        track_position = position.get("trackPosition")
        return DragVehicleArgs(
            target=payload["target"],
            position=make_drag_position(
                coords_from_dict(position["tilePosition"]),
                CarTrackLocation.from_dict(track_position) if track_position else None,
                position.get("trackProgress"),
            ),
            state=DragState(payload["state"]),
        )
