"""
Core music primitives - the spelling engine.

- NoteLetter / Accidental: the two halves of a note's spelling
- Note: letter + accidental + octave, with interval application
- Interval: letter distance + semitone distance, plus the named catalog
- Scale: named interval runs relative to a root
- parse_note: text -> Note
"""

from chuk_mcp_piano.core.errors import InvariantViolation, NoteParseError, ParseErrorKind
from chuk_mcp_piano.core.interval import Interval, IntervalQuality
from chuk_mcp_piano.core.note import Accidental, KeyColor, Note, NoteLetter
from chuk_mcp_piano.core.parser import parse_note
from chuk_mcp_piano.core.scale import Scale

__all__ = [
    # Errors
    "InvariantViolation",
    "NoteParseError",
    "ParseErrorKind",
    # Interval
    "Interval",
    "IntervalQuality",
    # Note
    "Accidental",
    "KeyColor",
    "Note",
    "NoteLetter",
    "parse_note",
    # Scale
    "Scale",
]
