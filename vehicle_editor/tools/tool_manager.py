"""
Tool manager for activating, dispatching to and cancelling editor tools.
"""

import logging

from .base_tool import Tool, ToolEventArgs, ToolResult

LOGGER = logging.getLogger(__name__)


class ToolManager:
    """Holds the single active tool session and routes input events to it."""

    def __init__(self):
        self.active_tool: Tool | None = None
        self.active_tool_id: str | None = None

    def activate_tool(self, tool_id: str, tool: Tool):
        """Make a tool session active, terminating whichever session was active."""
        if self.active_tool is not None:
            self.cancel_current_tool()

        self.active_tool = tool
        self.active_tool_id = tool_id
        LOGGER.debug("Activated tool %s", tool_id)

    def get_active_tool(self) -> Tool | None:
        """Get the currently active tool."""
        return self.active_tool

    def get_active_tool_id(self) -> str | None:
        """Get the id of the currently active tool."""
        return self.active_tool_id

    def is_active(self, tool_id: str) -> bool:
        return self.active_tool is not None and self.active_tool_id == tool_id

    def cancel_current_tool(self):
        """Close the active tool. Its on_terminate runs exactly once."""
        tool = self.active_tool
        if tool is None:
            return

        # Cleared first so a tool that cancels itself is not terminated twice
        tool_id = self.active_tool_id
        self.active_tool = None
        self.active_tool_id = None
        tool.on_terminate()
        LOGGER.debug("Terminated tool %s", tool_id)

    def cancel_tools(self, tool_id: str):
        """Close the active tool only if it has the given id."""
        if self.is_active(tool_id):
            self.cancel_current_tool()

    def handle_move(self, args: ToolEventArgs) -> ToolResult:
        if self.active_tool is None:
            return ToolResult.not_handled()
        return self.active_tool.on_move(args)

    def handle_confirm(self, args: ToolEventArgs) -> ToolResult:
        if self.active_tool is None:
            return ToolResult.not_handled()
        return self.active_tool.on_confirm(args)
