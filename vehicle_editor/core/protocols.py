"""
Capability interfaces the dragger needs from the surrounding game.

Park data, the game clock and the highlight state implement these
structurally; tests substitute Mocks or small fakes.
"""

from typing import Protocol

from park.core.coords import CoordsXY
from park.core.tile_elements import TileElement, TrackIterator
from park.core.vehicles import Car


class TileLookup(Protocol):
    def get_tile_element(self, x: int, y: int, index: int) -> TileElement | None:
        ...


class TrackIteratorLookup(Protocol):
    def get_track_iterator(self, x: int, y: int, index: int) -> TrackIterator | None:
        ...


class VehicleLookup(Protocol):
    modified: bool

    def get_car_by_id(self, car_id: int) -> Car | None:
        ...


class Clock(Protocol):
    ticks_elapsed: int


class HighlightOverlay(Protocol):
    def set_tiles(self, tiles: list[CoordsXY]) -> None:
        ...

    def clear_tiles(self) -> None:
        ...
