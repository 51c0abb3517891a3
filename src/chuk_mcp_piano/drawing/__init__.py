"""
Keyboard drawing - layout and SVG output.
"""

from chuk_mcp_piano.drawing.layout import (
    HighlightedNote,
    KeyboardScene,
    PianoLayout,
    RenderedKey,
)
from chuk_mcp_piano.drawing.svg import format_coordinate, save_svg, scene_to_svg

__all__ = [
    "HighlightedNote",
    "KeyboardScene",
    "PianoLayout",
    "RenderedKey",
    "format_coordinate",
    "save_svg",
    "scene_to_svg",
]
