"""
Ride Vehicle Editor - Vehicle Dragger

Wires the vehicle drag tool into one participant of a park session: it
registers the drag action, starts and stops drag sessions, and applies
drag actions to the park.
"""

import logging
from typing import Callable, Optional

from park.core.coords import CarTrackLocation, CoordsXYZ
from park.core.vehicles import Car, get_distance_from_progress

from vehicle_editor.core.constants import DRAG_ACTION_ID, DRAG_TOOL_ID
from vehicle_editor.core.protocols import VehicleLookup
from vehicle_editor.tools.base_tool import ToolContext
from vehicle_editor.tools.tool_manager import ToolManager
from vehicle_editor.tools.vehicle_drag_tool import VehicleDragTool

from .action_registry import ActionRegistry
from .drag_state import DragState, DragVehicleArgs, FreePlacement
from .events import REFRESH_VEHICLE, EventBus
from .highlight_state import HighlightState

LOGGER = logging.getLogger(__name__)


def apply_vehicle_drag(args: DragVehicleArgs, park: VehicleLookup, events: EventBus):
    """Move the targeted car to the position of a drag action.

    Cars that no longer exist are skipped; the session may outlive its car.
    """
    car = park.get_car_by_id(args.target)
    if car is None:
        LOGGER.debug("Drag target %s no longer exists", args.target)
        return

    position = args.position
    if isinstance(position, FreePlacement):
        car.x = position.tile_position.x
        car.y = position.tile_position.y
        car.z = position.tile_position.z
    else:
        car.track_location = position.location
        # Assigning the location alone does not settle the car; travelling
        # moves it onto the track, to progress 1 when none was given
        progress = position.progress if position.progress is not None else 1
        car.travel_by(get_distance_from_progress(car, progress))

    # Previews and reverts leave the saved layout as it was
    if args.state == DragState.COMPLETE:
        park.modified = True
    events.invoke(REFRESH_VEHICLE, car.id)


class VehicleDragger:
    """Vehicle drag tool for one participant."""

    def __init__(
        self,
        park,
        registry: ActionRegistry,
        events: EventBus,
        tool_manager: ToolManager,
        clock,
        highlight_state: HighlightState,
    ):
        self.park = park
        self.registry = registry
        self.events = events
        self.tool_manager = tool_manager
        self.context = ToolContext(park, park, clock, highlight_state, tool_manager)
        self.execute = registry.register(DRAG_ACTION_ID, self.apply, DragVehicleArgs.from_payload)

    def apply(self, args: DragVehicleArgs):
        """Apply a drag action to this participant's park."""
        apply_vehicle_drag(args, self.park, self.events)

    def toggle(
        self,
        is_pressed: bool,
        selection: Optional[tuple[Car, int]],
        position: CoordsXYZ,
        track_location: CarTrackLocation | None,
        track_progress: int,
        on_cancel: Callable[[], None],
    ) -> Optional[VehicleDragTool]:
        """
        Enable or disable the tool to drag a car to a new location.

        Args:
            is_pressed: Whether the drag button is pressed
            selection: Selected car and its index in the train, or None
            position: Current car position
            track_location: Current car track location, None when off track
            track_progress: Current car track progress
            on_cancel: Called when the drag session ends

        Returns:
            The new drag session, or None if the tool was switched off
        """
        # Close any running session before a new one starts
        self.tool_manager.cancel_tools(DRAG_TOOL_ID)
        if not is_pressed or selection is None:
            return None

        tool = VehicleDragTool(
            self.context,
            selection,
            position,
            track_location,
            track_progress,
            execute=self.execute,
            preview=self.apply,
            on_cancel=on_cancel,
            multiplayer=self.registry.is_multiplayer(),
        )
        self.tool_manager.activate_tool(DRAG_TOOL_ID, tool)
        return tool

    def drag_car(self, car: Car, car_index: int = 0,
                 on_cancel: Callable[[], None] = lambda: None) -> VehicleDragTool:
        """Start dragging a car from where it currently is.

        A running session is reverted first, so a car that is still being
        previewed starts from its committed position.
        """
        self.tool_manager.cancel_tools(DRAG_TOOL_ID)
        return self.toggle(
            True,
            (car, car_index),
            CoordsXYZ(car.x, car.y, car.z),
            car.track_location,
            car.track_progress,
            on_cancel,
        )

    def is_dragging(self) -> bool:
        return self.tool_manager.is_active(DRAG_TOOL_ID)
