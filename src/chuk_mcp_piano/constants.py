"""
Constants and enums for the piano renderer.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class HighlightColor(str, Enum):
    """Named highlight colors and their hex values."""

    RED = "#e74c3c"
    GREEN = "#2ecc71"
    BLUE = "#3498db"
    YELLOW = "#f1c40f"
    ORANGE = "#e67e22"
    PURPLE = "#9b59b6"


class MatchPolicy(str, Enum):
    """
    How a highlighted note is matched against the keys being drawn.

    INTRA_OCTAVE highlights every key with the same pitch class (E4 lights
    up E4 and E5). ABSOLUTE highlights only the key with the same sounding
    pitch (E4 lights up E4, and also Fb4).
    """

    INTRA_OCTAVE = "intra_octave"
    ABSOLUTE = "absolute"


# Default render geometry
DEFAULT_WIDTH = 256.0
DEFAULT_NUM_OCTAVES = 2
DEFAULT_START_OCTAVE = 4
DEFAULT_PADDING_X = 10.0
DEFAULT_PADDING_Y = 20.0

# Key proportions, derived from
# https://upload.wikimedia.org/wikipedia/commons/4/48/Pianoteilung.svg
HEIGHT_PER_OCTAVE_RATIO = 0.877  # piano height = width * ratio / octaves
BLACK_KEY_HEIGHT_RATIO = 0.689

# How far left of the next white key each black key starts, as a fraction
# of one octave's width. Keyed by intra-octave semitone value.
BLACK_KEY_OFFSETS: dict[int, float] = {
    1: 0.0518,  # Db
    3: 0.0251,  # Eb
    6: 0.0584,  # Gb
    8: 0.0384,  # Ab
    10: 0.0184,  # Bb
}

WHITE_KEYS_PER_OCTAVE = 7
KEYS_PER_OCTAVE = 12

KEY_STROKE = "black"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'. Expected format like 'C', 'Db4' or 'F##3'."
    INVALID_COLOR = "Invalid color: '{color}'. Use a named color ({names}) or a hex value."
    UNKNOWN_SCALE = "Unknown scale: '{scale}'."
    UNKNOWN_INTERVAL = "Unknown interval: '{interval}'."
