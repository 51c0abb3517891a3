"""
Pydantic models for the piano renderer.

This module provides:
- PianoConfig: Render geometry, octave range and highlights
- HighlightSpec: A note/color pair to highlight
"""

from chuk_mcp_piano.models.piano import HighlightSpec, PianoConfig, resolve_color

__all__ = [
    "HighlightSpec",
    "PianoConfig",
    "resolve_color",
]
