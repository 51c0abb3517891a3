"""
Error taxonomy for the note model.

Two tiers:
- NoteParseError: bad user input, recoverable by the caller.
- InvariantViolation: an internal catalog/logic inconsistency. Behaves like a
  failed assertion and is never caught inside the library.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Why a note string could not be parsed."""

    INVALID_FORMAT = "invalid-format"


class NoteParseError(ValueError):
    """Raised when note text does not match ``<Letter><Accidental?><Octave?>``."""

    def __init__(self, text: str, kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT):
        self.text = text
        self.kind = kind
        super().__init__(f"Invalid note '{text}': {kind.value}")


class InvariantViolation(AssertionError):
    """Raised when the note model reaches a state that should be impossible."""
