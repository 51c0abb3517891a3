"""
Theory tools - MCP tools for notes, intervals and scales.

Tools for spelling interval results and generating scales.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_piano.constants import ErrorMessages
from chuk_mcp_piano.core import Interval, Note, NoteParseError, Scale, parse_note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def note_to_dict(note: Note) -> dict[str, Any]:
    """JSON-friendly view of a note."""
    return {
        "name": str(note),
        "unicode": note.spell(unicode=True),
        "letter": note.letter.name,
        "accidental": note.accidental.name.lower(),
        "octave": note.octave,
        "semitone_value": note.semitone_value(),
        "midi": note.to_midi(),
        "key_color": note.key_color().value,
    }


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note/interval/scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_apply_interval(note: str, interval: str) -> str:
        """
        Spell the note an interval above another note.

        The result is spelled by letter distance first, so a minor third
        above Db is Fb (not E).

        Args:
            note: Starting note (e.g., 'Db4', 'F#', 'B♭3')
            interval: Interval short name (e.g., 'm3', 'P5', 'A4', 'T#11')

        Returns:
            JSON string with the resulting note

        Example:
            music_apply_interval(note="Db4", interval="m3")
        """
        try:
            start = parse_note(note)
        except NoteParseError:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
            )
        try:
            step = Interval.parse(interval)
        except ValueError:
            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.UNKNOWN_INTERVAL.format(interval=interval),
                }
            )

        try:
            result = start.apply_interval(step)
            return json.dumps(
                {
                    "status": "success",
                    "note": note_to_dict(start),
                    "interval": step.name,
                    "result": note_to_dict(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to apply interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_apply_interval"] = music_apply_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale(root: str, scale: str, direction: str = "ascending") -> str:
        """
        Generate a correctly spelled scale.

        Args:
            root: Root note (e.g., 'F4', 'Ab')
            scale: Scale name (e.g., 'major', 'melodic_minor', 'altered')
            direction: 'ascending' or 'descending'

        Returns:
            JSON string with the scale's notes

        Example:
            music_scale(root="F4", scale="mixolydian_flat13")
        """
        if direction not in ("ascending", "descending"):
            return json.dumps({"status": "error", "message": f"Invalid direction: {direction}"})
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
            if direction == "ascending":
                notes = start.ascending_scale(scale_obj)
            else:
                notes = start.descending_scale(scale_obj)

            return json.dumps(
                {
                    "status": "success",
                    "root": str(start),
                    "scale": scale_obj.name,
                    "direction": direction,
                    "notes": [str(n) for n in notes],
                }
            )
        except Exception as e:
            logger.exception("Failed to generate scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale"] = music_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_intervals() -> str:
        """
        List the named intervals.

        Returns:
            JSON string with each interval's name, quality, letter distance
            and semitone distance
        """
        return json.dumps(
            {
                "status": "success",
                "intervals": [
                    {
                        "name": name,
                        "quality": interval.quality.value,
                        "number": interval.number,
                        "semitones": interval.semitones,
                    }
                    for name, interval in Interval.catalog().items()
                ],
            }
        )

    tools["music_list_intervals"] = music_list_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_scales() -> str:
        """
        List the available scales.

        Returns:
            JSON string with each scale's name and ascending intervals
        """
        return json.dumps(
            {
                "status": "success",
                "scales": [
                    {
                        "name": name,
                        "ascending": [i.name for i in scale.ascending],
                        "descending": (
                            [i.name for i in scale.descending] if scale.descending else None
                        ),
                    }
                    for name, scale in Scale.catalog().items()
                ],
            }
        )

    tools["music_list_scales"] = music_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_compare_notes(first: str, second: str) -> str:
        """
        Compare two notes by spelling and by sound.

        Args:
            first: First note (e.g., 'C#4')
            second: Second note (e.g., 'Db4')

        Returns:
            JSON string with spelled/enharmonic/pitch-class equality and
            the semitone distance from first to second

        Example:
            music_compare_notes(first="C#4", second="Db4")
        """
        try:
            a = parse_note(first)
            b = parse_note(second)
        except NoteParseError as e:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=e.text)}
            )

        return json.dumps(
            {
                "status": "success",
                "first": str(a),
                "second": str(b),
                "spelled_equal": a.spelled_equal(b),
                "enharmonic_equal": a.enharmonic_equal(b),
                "same_pitch_class": a.same_pitch_class(b),
                "semitones": b.semitone_distance(a),
            }
        )

    tools["music_compare_notes"] = music_compare_notes

    return tools
