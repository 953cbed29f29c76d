"""Unit tests for the vehicle dragger service and the drag action handler."""

import pytest
from unittest.mock import Mock

from park.core.coords import CarTrackLocation, CoordsXY, CoordsXYZ
from vehicle_editor.controllers.drag_state import (
    DragState,
    DragVehicleArgs,
    FreePlacement,
    TrackPlacement,
)
from vehicle_editor.controllers.events import REFRESH_VEHICLE
from vehicle_editor.controllers.vehicle_dragger import apply_vehicle_drag
from vehicle_editor.core.constants import DRAG_ACTION_ID, DRAG_TOOL_ID
from vehicle_editor.tools.base_tool import ToolEventArgs


@pytest.fixture
def refresh_listener(events):
    """Mock subscribed to vehicle refresh events."""
    listener = Mock()
    events.subscribe(REFRESH_VEHICLE, listener)
    return listener


def car_state(car):
    return (car.x, car.y, car.z, car.track_location, car.track_progress)


class TestApplyVehicleDrag:
    """Tests for applying drag actions to the park."""

    def test_free_placement_sets_position(self, park, events, refresh_listener):
        args = DragVehicleArgs(0, FreePlacement(CoordsXYZ(216, 216, 48)), DragState.COMPLETE)

        apply_vehicle_drag(args, park, events)

        car = park.get_car_by_id(0)
        assert (car.x, car.y, car.z) == (216, 216, 48)
        refresh_listener.assert_called_once_with(0)

    def test_unknown_target_changes_nothing(self, park, events, refresh_listener):
        """A drag for a car that no longer exists is a silent no-op."""
        before = {car_id: car_state(car) for car_id, car in park.cars.items()}
        args = DragVehicleArgs(99, FreePlacement(CoordsXYZ(1, 2, 3)), DragState.COMPLETE)

        apply_vehicle_drag(args, park, events)

        assert {car_id: car_state(car) for car_id, car in park.cars.items()} == before
        assert 99 not in park.cars
        refresh_listener.assert_not_called()

    def test_track_placement_with_progress(self, park, events, refresh_listener):
        location = CarTrackLocation(128, 160, 56, 2, 7)
        args = DragVehicleArgs(0, TrackPlacement(CoordsXYZ(144, 176, 56), location, 5), DragState.CANCEL)

        apply_vehicle_drag(args, park, events)

        car = park.get_car_by_id(0)
        assert car.track_location == location
        assert car.track_progress == 5
        assert (car.x, car.y, car.z) == (128 + 16 + 5, 176, 56)
        refresh_listener.assert_called_once_with(0)

    def test_track_placement_without_progress_settles_at_one(self, park, events):
        location = CarTrackLocation(128, 160, 56, 2, 7)
        args = DragVehicleArgs(1, TrackPlacement(CoordsXYZ(144, 176, 56), location), DragState.COMPLETE)

        apply_vehicle_drag(args, park, events)

        car = park.get_car_by_id(1)
        assert car.track_location == location
        assert car.track_progress == 1

    def test_track_placement_with_zero_progress(self, park, events):
        """Progress 0 is a real progress value, not a missing one."""
        location = CarTrackLocation(128, 160, 56, 2, 7)
        args = DragVehicleArgs(1, TrackPlacement(CoordsXYZ(144, 176, 56), location, 0), DragState.CANCEL)

        apply_vehicle_drag(args, park, events)

        assert park.get_car_by_id(1).track_progress == 0

    def test_same_location_resettles_progress(self, park, events):
        """Re-applying the current location still travels to the given progress."""
        car = park.get_car_by_id(1)
        location = car.track_location
        args = DragVehicleArgs(1, TrackPlacement(CoordsXYZ(0, 0, 0), location, 2), DragState.CANCEL)

        apply_vehicle_drag(args, park, events)

        assert car.track_progress == 2
        assert car.x == 64 + 16 + 2

    def test_complete_marks_park_modified(self, park, events):
        args = DragVehicleArgs(0, FreePlacement(CoordsXYZ(216, 216, 48)), DragState.COMPLETE)

        apply_vehicle_drag(args, park, events)

        assert park.modified

    @pytest.mark.parametrize("state", [DragState.DRAGGING, DragState.CANCEL])
    def test_preview_and_revert_keep_park_unmodified(self, park, events, state):
        args = DragVehicleArgs(0, FreePlacement(CoordsXYZ(216, 216, 48)), state)

        apply_vehicle_drag(args, park, events)

        assert not park.modified

    def test_stale_target_keeps_park_unmodified(self, park, events):
        args = DragVehicleArgs(99, FreePlacement(CoordsXYZ(1, 2, 3)), DragState.COMPLETE)

        apply_vehicle_drag(args, park, events)

        assert not park.modified


class TestToggle:
    """Tests for switching the drag tool on and off."""

    def test_press_activates_session(self, dragger, park, tool_manager):
        car = park.get_car_by_id(0)
        tool = dragger.toggle(True, (car, 0), CoordsXYZ(100, 100, 50), None, 0, Mock())

        assert tool is not None
        assert tool_manager.get_active_tool() is tool
        assert tool_manager.get_active_tool_id() == DRAG_TOOL_ID
        assert dragger.is_dragging()

    def test_release_cancels_session(self, dragger, park, registry):
        on_cancel = Mock()
        dragger.drag_car(park.get_car_by_id(0), on_cancel=on_cancel)

        result = dragger.toggle(False, None, None, None, 0, Mock())

        assert result is None
        assert not dragger.is_dragging()
        assert registry.executed[DRAG_ACTION_ID] == 1
        on_cancel.assert_called_once()

    def test_press_without_selection_does_nothing(self, dragger, registry, tool_manager):
        result = dragger.toggle(True, None, CoordsXYZ(0, 0, 0), None, 0, Mock())

        assert result is None
        assert tool_manager.get_active_tool() is None
        assert registry.executed[DRAG_ACTION_ID] == 0

    def test_press_without_selection_cancels_existing_session(self, dragger, park, registry):
        dragger.drag_car(park.get_car_by_id(0))

        dragger.toggle(True, None, None, None, 0, Mock())

        assert not dragger.is_dragging()
        assert registry.executed[DRAG_ACTION_ID] == 1

    def test_new_session_cancels_previous(self, dragger, park, registry):
        first_cancel = Mock()
        first = dragger.drag_car(park.get_car_by_id(0), on_cancel=first_cancel)

        second = dragger.drag_car(park.get_car_by_id(1))

        assert first.terminated
        first_cancel.assert_called_once()
        assert not second.terminated
        assert registry.executed[DRAG_ACTION_ID] == 1

    def test_restarting_drag_of_previewed_car_keeps_committed_origin(self, dragger, park, registry):
        """Dragging the same car again starts from where it was before the preview."""
        car = park.get_car_by_id(0)
        dragger.drag_car(car)
        dragger.tool_manager.handle_move(ToolEventArgs(CoordsXY(200, 200), 1))
        assert (car.x, car.y, car.z) == (216, 216, 48)

        second = dragger.drag_car(car)

        assert second.original_position == CoordsXYZ(100, 100, 50)
        assert (car.x, car.y, car.z) == (100, 100, 50)

        dragger.tool_manager.cancel_current_tool()

        assert (car.x, car.y, car.z) == (100, 100, 50)
        assert registry.executed[DRAG_ACTION_ID] == 2

    def test_restarting_drag_of_track_car_keeps_track_origin(self, dragger, park):
        car = park.get_car_by_id(1)
        dragger.drag_car(car)
        dragger.tool_manager.handle_move(ToolEventArgs(CoordsXY(200, 200), 1))

        second = dragger.drag_car(car)
        dragger.tool_manager.cancel_current_tool()

        assert second.original_track_location == CarTrackLocation(64, 160, 56, 2, 7)
        assert second.original_track_progress == 3
        assert (car.x, car.y, car.z, car.track_progress) == (83, 176, 56, 3)

    def test_single_player_session_is_not_throttled(self, dragger, park):
        tool = dragger.drag_car(park.get_car_by_id(0))
        assert tool.multiplayer is False

    def test_drag_car_uses_current_car_state(self, dragger, park):
        car = park.get_car_by_id(1)
        tool = dragger.drag_car(car, car_index=2)

        assert tool.car is car
        assert tool.car_index == 2
        assert tool.original_position == CoordsXYZ(car.x, car.y, car.z)
        assert tool.original_track_location == car.track_location
        assert tool.original_track_progress == 3


class TestPreview:
    """Tests for the local preview while dragging."""

    def test_preview_moves_car_without_executing(self, dragger, park, registry, highlight_state):
        dragger.drag_car(park.get_car_by_id(0))

        dragger.tool_manager.handle_move(ToolEventArgs(CoordsXY(200, 200), 1))

        car = park.get_car_by_id(0)
        assert (car.x, car.y, car.z) == (216, 216, 48)
        assert highlight_state.tiles == [CoordsXY(192, 192)]
        assert registry.executed[DRAG_ACTION_ID] == 0
