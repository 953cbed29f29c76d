"""
Tool protocol and base definitions for editor tools.
"""

from dataclasses import dataclass
from typing import Protocol

from park.core.coords import CoordsXY
from vehicle_editor.core.protocols import (
    Clock,
    HighlightOverlay,
    TileLookup,
    TrackIteratorLookup,
)


@dataclass(frozen=True)
class ToolEventArgs:
    """Hit-test result delivered with every tool event."""

    map_coords: CoordsXY | None = None
    tile_element_index: int | None = None
    screen_coords: tuple[int, int] | None = None


class Tool(Protocol):
    """Protocol defining the tool interface.

    Tools are session objects: one is constructed per activation and
    discarded once terminated.
    """

    def on_move(self, args: ToolEventArgs) -> "ToolResult":
        """Handle pointer movement."""
        ...

    def on_confirm(self, args: ToolEventArgs) -> "ToolResult":
        """Handle pointer press."""
        ...

    def on_terminate(self) -> None:
        """Called once when the tool is closed, confirmed or not."""
        ...


class ToolContext:
    """Context object providing tools access to game state.

    This acts as a facade, limiting what tools can reach and letting tests
    swap in fakes for each capability.
    """

    def __init__(
        self,
        tile_lookup: TileLookup,
        track_lookup: TrackIteratorLookup,
        clock: Clock,
        highlight_state: HighlightOverlay,
        tool_manager=None,
    ):
        self.tile_lookup = tile_lookup
        self.track_lookup = track_lookup
        self.clock = clock
        self.highlight_state = highlight_state
        self.tool_manager = tool_manager

    def cancel_current_tool(self) -> None:
        """Close the active tool through the tool manager, if there is one."""
        if self.tool_manager:
            self.tool_manager.cancel_current_tool()


class ToolResult:
    """Result of a tool operation."""

    def __init__(
        self,
        handled: bool = False,
        needs_render: bool = False,
        message: str | None = None,
    ):
        self.handled = handled
        self.needs_render = needs_render
        self.message = message

    @staticmethod
    def handled() -> "ToolResult":
        """Event handled but nothing changed."""
        return ToolResult(handled=True)

    @staticmethod
    def not_handled() -> "ToolResult":
        """Event not handled."""
        return ToolResult(handled=False)

    @staticmethod
    def modified(message: str | None = None) -> "ToolResult":
        """Something visible changed."""
        return ToolResult(handled=True, needs_render=True, message=message)
