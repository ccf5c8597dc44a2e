"""Agent tools."""

from webdigest.tools.base import Tool
from webdigest.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry"]
