"""
Piano tools - MCP tools for keyboard diagrams and MIDI export.

Tools for laying out and rendering highlighted keyboards, and for writing
generated scales to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_piano.compiler import notes_to_midi
from chuk_mcp_piano.constants import (
    DEFAULT_NUM_OCTAVES,
    DEFAULT_WIDTH,
    ErrorMessages,
    MatchPolicy,
)
from chuk_mcp_piano.core import Interval, NoteParseError, Scale, parse_note
from chuk_mcp_piano.drawing import PianoLayout, save_svg
from chuk_mcp_piano.models import HighlightSpec, PianoConfig

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _build_config(
    highlights: dict[str, str] | None,
    num_octaves: int,
    width: float,
    match_policy: str,
) -> PianoConfig:
    """Build a validated config from tool arguments."""
    return PianoConfig(
        width=width,
        num_octaves=num_octaves,
        match_policy=MatchPolicy(match_policy),
        highlights=[
            HighlightSpec(note=note, color=color) for note, color in (highlights or {}).items()
        ],
    )


def register_piano_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register keyboard rendering tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_piano_layout(
        highlights: dict[str, str] | None = None,
        num_octaves: int = DEFAULT_NUM_OCTAVES,
        width: float = DEFAULT_WIDTH,
        match_policy: str = MatchPolicy.INTRA_OCTAVE.value,
    ) -> str:
        """
        Compute key geometry for a highlighted keyboard without writing a file.

        Args:
            highlights: Mapping of note to color (e.g., {"E4": "green", "Fbb": "red"})
            num_octaves: Octaves to draw, starting at C4
            width: Keyboard width in pixels
            match_policy: 'intra_octave' (any octave) or 'absolute' (exact pitch)

        Returns:
            JSON string with every key's rectangle and fill

        Example:
            music_piano_layout(highlights={"C4": "red", "E4": "green", "G4": "blue"})
        """
        try:
            config = _build_config(highlights, num_octaves, width, match_policy)
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})

        try:
            scene = PianoLayout(config).layout()
            return json.dumps(
                {
                    "status": "success",
                    "width": scene.width,
                    "height": scene.height,
                    "keys": [
                        {
                            "note": str(key.note),
                            "color": key.key_color.value,
                            "x": key.x,
                            "y": key.y,
                            "width": key.width,
                            "height": key.height,
                            "fill": key.fill,
                        }
                        for key in scene.keys
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to lay out piano")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_piano_layout"] = music_piano_layout

    @mcp.tool  # type: ignore[arg-type]
    async def music_render_piano(
        highlights: dict[str, str] | None = None,
        num_octaves: int = DEFAULT_NUM_OCTAVES,
        width: float = DEFAULT_WIDTH,
        match_policy: str = MatchPolicy.INTRA_OCTAVE.value,
        output_name: str = "piano",
    ) -> str:
        """
        Render a highlighted keyboard to an SVG file.

        Args:
            highlights: Mapping of note to color (e.g., {"Fbb": "red", "A##": "#ff00ff"})
            num_octaves: Octaves to draw, starting at C4
            width: Keyboard width in pixels
            match_policy: 'intra_octave' (any octave) or 'absolute' (exact pitch)
            output_name: Output filename (without .svg extension)

        Returns:
            JSON string with the file path

        Example:
            music_render_piano(highlights={"Fbb": "red", "E4": "green"}, output_name="chord")
        """
        try:
            config = _build_config(highlights, num_octaves, width, match_policy)
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})

        try:
            scene = PianoLayout(config).layout()
            highlighted = [str(k.note) for k in scene.keys if k.fill not in ("white", "black")]
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = save_svg(scene, output_dir / f"{output_name}.svg")

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "keys": len(scene.keys),
                    "highlighted": highlighted,
                }
            )
        except Exception as e:
            logger.exception("Failed to render piano")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_render_piano"] = music_render_piano

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_scale_midi(
        root: str,
        scale: str,
        tempo: int = 120,
        output_name: str | None = None,
    ) -> str:
        """
        Write a scale, up and back down, to a MIDI file.

        Args:
            root: Root note (e.g., 'D4')
            scale: Scale name (e.g., 'melodic_minor')
            tempo: Tempo in BPM
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and the notes played

        Example:
            music_export_scale_midi(root="A3", scale="melodic_minor")
        """
        try:
            start = parse_note(root)
        except NoteParseError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=root)}
            )
        try:
            scale_obj = Scale.parse(scale)
        except ValueError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.UNKNOWN_SCALE.format(scale=scale)}
            )

        try:
            notes = start.ascending_scale(scale_obj)
            notes.append(start.apply_interval(Interval.OCTAVE))
            notes.extend(start.descending_scale(scale_obj))

            filename = f"{output_name or f'{start}_{scale_obj.name}'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            notes_to_midi(notes, tempo_bpm=tempo).save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "notes": [str(n) for n in notes],
                }
            )
        except Exception as e:
            logger.exception("Failed to export scale MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_scale_midi"] = music_export_scale_midi

    return tools
