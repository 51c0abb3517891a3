"""
MCP tool implementations.

Tools are organized by domain:
- theory - Interval spelling, scales, note comparison
- piano - Keyboard layout, SVG rendering, MIDI export
"""

from chuk_mcp_piano.tools.piano import register_piano_tools
from chuk_mcp_piano.tools.theory import register_theory_tools

__all__ = [
    "register_piano_tools",
    "register_theory_tools",
]
