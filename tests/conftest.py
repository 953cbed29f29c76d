"""Shared pytest fixtures for park and vehicle dragger tests."""

import pytest

from park.core.clock import GameClock
from park.core.coords import CarTrackLocation
from park.core.tile_elements import TileElement
from park.core.vehicles import Car, RideObjectVehicle, get_distance_from_progress
from park.formats.park_data import ParkData
from vehicle_editor.controllers.action_registry import ActionRegistry
from vehicle_editor.controllers.events import EventBus
from vehicle_editor.controllers.highlight_state import HighlightState
from vehicle_editor.controllers.vehicle_dragger import VehicleDragger
from vehicle_editor.tools.tool_manager import ToolManager


def build_park() -> ParkData:
    """10x10 park: flat grass, a footpath at tile (6, 6), a straight track along row 5."""
    park = ParkData(width=10, height=10)
    for tile_y in range(10):
        for tile_x in range(10):
            park.tiles[(tile_x, tile_y)] = [TileElement("surface", base_z=14, clearance_z=14)]

    park.tiles[(6, 6)] = [
        TileElement("surface", base_z=14, clearance_z=14),
        TileElement("footpath", base_z=48, clearance_z=64),
    ]
    for tile_x in range(2, 6):
        park.tiles[(tile_x, 5)] = [
            TileElement("surface", base_z=14, clearance_z=14),
            TileElement("track", base_z=56, clearance_z=88, direction=2, track_type=7),
        ]

    park.vehicle_types = {
        "Wooden Car": RideObjectVehicle("Wooden Car", 0),
        "Inverted Car": RideObjectVehicle("Inverted Car", -20),
    }

    free_car = Car(0, ride_id=1, vehicle_type=park.vehicle_types["Wooden Car"], x=100, y=100, z=50)
    park.add_car(free_car)

    track_car = Car(1, ride_id=2, vehicle_type=park.vehicle_types["Inverted Car"])
    track_car.track_location = CarTrackLocation(64, 160, 56, 2, 7)
    track_car.travel_by(get_distance_from_progress(track_car, 3))
    park.add_car(track_car)

    park.modified = False
    return park


@pytest.fixture
def park():
    """Create a small park with one free car (id 0) and one car on track (id 1)."""
    return build_park()


@pytest.fixture
def clock():
    return GameClock()


@pytest.fixture
def events():
    return EventBus()


@pytest.fixture
def registry():
    return ActionRegistry("host")


@pytest.fixture
def tool_manager():
    return ToolManager()


@pytest.fixture
def highlight_state():
    return HighlightState()


@pytest.fixture
def dragger(park, registry, events, tool_manager, clock, highlight_state):
    """Vehicle dragger wired to the test park."""
    return VehicleDragger(park, registry, events, tool_manager, clock, highlight_state)


@pytest.fixture
def park_factory():
    """Build independent copies of the test park."""
    return build_park
