"""Tool-calling chat agent over the wine query tools."""
from .registry import TOOL_REGISTRY, TOOLS_SPECS, execute_tool
from .chat import WineChatAgent
