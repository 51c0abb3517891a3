"""
Note text parsing.

Format: <Letter A-G><Accidental?><Octave?>

    "C"      -> C4 (octave defaults to 4)
    "F♭♭4"   -> Fbb4
    "A##"    -> A##4
    "Bb3"    -> Bb3
"""

from __future__ import annotations

import re

from .errors import NoteParseError, ParseErrorKind
from .note import Accidental, Note, NoteLetter

DEFAULT_OCTAVE = 4

_ACCIDENTALS: dict[str, Accidental] = {
    "": Accidental.NATURAL,
    "b": Accidental.FLAT,
    "♭": Accidental.FLAT,
    "bb": Accidental.DOUBLE_FLAT,
    "♭♭": Accidental.DOUBLE_FLAT,
    "#": Accidental.SHARP,
    "♯": Accidental.SHARP,
    "##": Accidental.DOUBLE_SHARP,
    "♯♯": Accidental.DOUBLE_SHARP,
    "×": Accidental.DOUBLE_SHARP,
}

# Longest alternatives first so "bb" is not read as "b" + garbage
_ACCIDENTAL_PATTERN = "|".join(
    re.escape(symbol) for symbol in sorted(_ACCIDENTALS, key=len, reverse=True) if symbol
)
_NOTE_RE = re.compile(
    rf"(?P<letter>[A-G])(?P<accidental>{_ACCIDENTAL_PATTERN})?(?P<octave>[0-8])?"
)


def parse_note(text: str) -> Note:
    """
    Parse a note from a string like 'C', 'Db4', 'F♭♭4' or 'A##'.

    Args:
        text: Note text; surrounding whitespace is ignored

    Returns:
        The parsed Note

    Raises:
        NoteParseError: If the text is not a valid note
    """
    match = _NOTE_RE.fullmatch(text.strip())
    if match is None:
        raise NoteParseError(text, ParseErrorKind.INVALID_FORMAT)

    octave = match.group("octave")
    return Note(
        letter=NoteLetter[match.group("letter")],
        accidental=_ACCIDENTALS[match.group("accidental") or ""],
        octave=int(octave) if octave is not None else DEFAULT_OCTAVE,
    )
