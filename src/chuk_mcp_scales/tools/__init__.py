"""
MCP tool implementations.

Tools are organized by domain:
- theory - Interval and pitch arithmetic
- scales - Scale catalog lifecycle and spelling
- export - MIDI export tools
"""

from chuk_mcp_scales.tools.export import register_export_tools
from chuk_mcp_scales.tools.scales import register_scale_tools
from chuk_mcp_scales.tools.theory import register_theory_tools

__all__ = [
    "register_export_tools",
    "register_scale_tools",
    "register_theory_tools",
]
