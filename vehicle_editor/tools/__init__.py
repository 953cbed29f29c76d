"""
Ride Vehicle Editor - Tools

Interactive editor tools and the manager that routes input to them.
"""

from .base_tool import Tool, ToolContext, ToolEventArgs, ToolResult
from .tool_manager import ToolManager

__all__ = [
    "Tool",
    "ToolContext",
    "ToolEventArgs",
    "ToolResult",
    "ToolManager",
]
