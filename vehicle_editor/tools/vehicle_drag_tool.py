"""
Vehicle drag tool - pick up a car, move it across the map and drop it.

A session is created when the tool is pressed and lives until the tool is
closed. Moving the pointer previews the car locally; clicking commits the
new placement, closing the tool without a click puts the car back.
"""

import logging
from typing import Callable

from park.core.coords import (
    CarTrackLocation,
    CoordsXY,
    CoordsXYZ,
    align_with_map,
    equal_coords_xyz,
)
from park.core.vehicles import Car

from vehicle_editor.controllers.drag_state import (
    DragPosition,
    DragState,
    DragVehicleArgs,
    make_drag_position,
)
from vehicle_editor.controllers.position_resolver import get_position_from_tool
from vehicle_editor.core.constants import MULTIPLAYER_UPDATE_INTERVAL

from .base_tool import ToolContext, ToolEventArgs, ToolResult

LOGGER = logging.getLogger(__name__)


class VehicleDragTool:
    """Drag session for a single car."""

    def __init__(
        self,
        context: ToolContext,
        selection: tuple[Car, int],
        original_position: CoordsXYZ,
        original_track_location: CarTrackLocation | None,
        original_track_progress: int,
        execute: Callable[[DragVehicleArgs], None],
        preview: Callable[[DragVehicleArgs], None],
        on_cancel: Callable[[], None],
        multiplayer: bool = False,
    ):
        """
        Start a drag session.

        Args:
            context: Tool context with tile/track lookups, clock and highlight
            selection: Dragged car and its index within the train
            original_position: Car position when the drag started
            original_track_location: Car track location when the drag started
            original_track_progress: Car track progress when the drag started
            execute: Sends the authoritative drag action to all participants
            preview: Applies a drag update to the local game only
            on_cancel: Called when the session ends, confirmed or not
            multiplayer: Whether move updates should be throttled
        """
        self.context = context
        self.car, self.car_index = selection
        self.original_position = original_position
        self.original_track_location = original_track_location
        self.original_track_progress = original_track_progress
        self.revert = True
        self.last_position: CoordsXYZ = original_position
        self.last_track_location: CarTrackLocation | None = original_track_location
        self.multiplayer = multiplayer
        self.terminated = False

        self._execute = execute
        self._preview = preview
        self._on_cancel = on_cancel

        LOGGER.info("Started dragging car %s from %s", self.car.id, original_position)

    def on_move(self, args: ToolEventArgs) -> ToolResult:
        """Preview the car at the hovered position if it is a new candidate."""
        if self.terminated:
            return ToolResult.not_handled()

        # Keep multiplayer traffic down to a fraction of the tick rate
        if self.multiplayer and self.context.clock.ticks_elapsed % MULTIPLAYER_UPDATE_INTERVAL != 0:
            return ToolResult.not_handled()

        tile_position, track_location = get_position_from_tool(
            args,
            self.car.vehicle_type,
            self.context.tile_lookup,
            self.context.track_lookup,
        )
        if tile_position is None:
            return ToolResult.handled()

        if not self._is_new_candidate(tile_position, track_location):
            return ToolResult.handled()

        position = make_drag_position(tile_position, track_location)
        self._preview(self._make_args(position, DragState.DRAGGING))
        self.context.highlight_state.set_tiles(
            [CoordsXY(align_with_map(tile_position.x), align_with_map(tile_position.y))]
        )
        self.last_position = tile_position
        self.last_track_location = track_location
        LOGGER.debug("Car %s dragged to %s (track: %s)", self.car.id, tile_position, track_location)
        return ToolResult.modified()

    def on_confirm(self, args: ToolEventArgs) -> ToolResult:
        """Commit the last previewed position and close the tool."""
        if self.terminated:
            return ToolResult.not_handled()

        self.revert = False
        # Progress from the drag is stale on the new track piece
        position = make_drag_position(self.last_position, self.last_track_location)
        self._execute(self._make_args(position, DragState.COMPLETE))
        LOGGER.info("Placed car %s at %s", self.car.id, self.last_position)

        self.context.cancel_current_tool()
        if not self.terminated:
            self.on_terminate()
        return ToolResult.modified(message=f"Car {self.car.id} placed")

    def on_terminate(self):
        """Put the car back unless the drag was confirmed, then clean up."""
        if self.terminated:
            return
        self.terminated = True

        if self.revert:
            position = make_drag_position(
                self.original_position,
                self.original_track_location,
                self.original_track_progress if self.original_track_location else None,
            )
            self._execute(self._make_args(position, DragState.CANCEL))
            LOGGER.info("Cancelled dragging car %s", self.car.id)

        self.context.highlight_state.clear_tiles()
        self._on_cancel()

    def _is_new_candidate(
        self, tile_position: CoordsXYZ, track_location: CarTrackLocation | None
    ) -> bool:
        if track_location is not None:
            return track_location != self.last_track_location
        return not equal_coords_xyz(tile_position, self.last_position)

    def _make_args(self, position: DragPosition, state: DragState) -> DragVehicleArgs:
        return DragVehicleArgs(target=self.car.id, position=position, state=state)
