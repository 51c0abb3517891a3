"""
Piano layout - turns a run of notes into key rectangles.

The layout is a single left-to-right pass with a cursor sitting at the left
edge of the next white key:

- A white key is drawn at the cursor, then the cursor moves right by one
  white key width.
- A black key is drawn at the cursor shifted left by a per-key offset, so it
  straddles the white key just drawn and the next one. The cursor stays put.

White and black keys are collected separately so the black keys can be drawn
on top.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from chuk_mcp_piano.constants import (
    BLACK_KEY_HEIGHT_RATIO,
    BLACK_KEY_OFFSETS,
    KEYS_PER_OCTAVE,
    WHITE_KEYS_PER_OCTAVE,
    MatchPolicy,
)
from chuk_mcp_piano.core import InvariantViolation, KeyColor, Note, NoteLetter, Scale, parse_note
from chuk_mcp_piano.drawing.svg import format_coordinate, save_svg
from chuk_mcp_piano.models.piano import PianoConfig, resolve_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightedNote:
    """A note to highlight and its hex fill color."""

    note: Note
    color: str


@dataclass(frozen=True)
class RenderedKey:
    """
    One key's geometry and fill.

    Computed fresh on every layout; x/y are absolute (padding included).
    """

    note: Note
    key_color: KeyColor
    x: float
    y: float
    width: float
    height: float
    fill: str

    def path_data(self) -> str:
        """Closed rectangle path: move to the top-left corner, then draw down, right, up."""
        x, y = format_coordinate(self.x), format_coordinate(self.y)
        h, w = format_coordinate(self.height), format_coordinate(self.width)
        neg_h = format_coordinate(-self.height)
        return f"M{x},{y} l0,{h} l{w},0 l0,{neg_h} z"

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class KeyboardScene:
    """
    A laid-out keyboard.

    width/height are the full bounding box, padding included. White keys are
    meant to be drawn first, black keys on top.
    """

    width: float
    height: float
    white_keys: tuple[RenderedKey, ...]
    black_keys: tuple[RenderedKey, ...]

    @property
    def keys(self) -> tuple[RenderedKey, ...]:
        """All keys in draw order."""
        return self.white_keys + self.black_keys


class PianoLayout:
    """
    Lays out a piano keyboard and colors highlighted keys.

    Examples:
        piano = PianoLayout(PianoConfig(num_octaves=2))
        piano.highlight_note("Fbb")
        piano.highlight_note("E4", "green")
        scene = piano.layout()
    """

    def __init__(self, config: PianoConfig | None = None):
        """
        Initialize the layout engine.

        Args:
            config: Render configuration (defaults apply if omitted)
        """
        self.config = config or PianoConfig()
        self.highlighted: list[HighlightedNote] = [
            HighlightedNote(spec.to_note(), spec.resolve_color())
            for spec in self.config.highlights
        ]

    def highlight_note(self, note: str, color: str = "red") -> Note:
        """
        Highlight a note.

        Args:
            note: Note text, like 'E4' or 'F♭♭'
            color: Named color or hex value

        Returns:
            The parsed note

        Raises:
            NoteParseError: If the note text is invalid
            ValueError: If the color is invalid
        """
        parsed = parse_note(note)
        self.highlighted.append(HighlightedNote(parsed, resolve_color(color)))
        return parsed

    def notes(self) -> list[Note]:
        """The chromatic run drawn on the keyboard, starting at C<start_octave>."""
        first = self.config.start_octave
        notes: list[Note] = []
        for octave in range(first, first + self.config.num_octaves):
            notes.extend(Note(NoteLetter.C, octave=octave).ascending_scale(Scale.CHROMATIC))
        return notes

    def find_highlight(self, note: Note) -> HighlightedNote | None:
        """First highlight matching the note under the configured policy."""
        for highlighted in self.highlighted:
            if self.config.match_policy == MatchPolicy.ABSOLUTE:
                if highlighted.note.enharmonic_equal(note):
                    return highlighted
            elif highlighted.note.same_pitch_class(note):
                return highlighted
        return None

    def resolve_fill(self, note: Note) -> str:
        """Highlight color if the note is highlighted, else the key's own color."""
        highlighted = self.find_highlight(note)
        if highlighted is not None:
            return highlighted.color
        return note.key_color().value

    def black_key_offset(self, note: Note) -> float:
        """
        How far left of the cursor a black key starts.

        Raises:
            InvariantViolation: If the note isn't one of the five black keys
        """
        ratio = BLACK_KEY_OFFSETS.get(note.intra_octave_semitone_value())
        if ratio is None:
            raise InvariantViolation(
                f"Black key {note} has invalid intra-octave semitone value "
                f"{note.intra_octave_semitone_value()}"
            )
        return ratio * self.config.octave_width

    def render_key(self, note: Note, cursor: float) -> RenderedKey:
        """Compute one key's rectangle given the current cursor."""
        config = self.config
        key_color = note.key_color()

        if key_color == KeyColor.WHITE:
            x = cursor
            width = config.width / (WHITE_KEYS_PER_OCTAVE * config.num_octaves)
            height = config.height
        else:
            x = cursor - self.black_key_offset(note)
            width = config.width / (KEYS_PER_OCTAVE * config.num_octaves)
            height = config.height * BLACK_KEY_HEIGHT_RATIO

        return RenderedKey(
            note=note,
            key_color=key_color,
            x=x,
            y=config.padding_y,
            width=width,
            height=height,
            fill=self.resolve_fill(note),
        )

    def layout(self, notes: Sequence[Note] | None = None) -> KeyboardScene:
        """
        Lay out the keyboard.

        Args:
            notes: Notes to draw, in ascending order (defaults to notes())

        Returns:
            The laid-out scene
        """
        config = self.config
        cursor = config.padding_x
        white_keys: list[RenderedKey] = []
        black_keys: list[RenderedKey] = []

        for note in self.notes() if notes is None else notes:
            key = self.render_key(note, cursor)
            if key.key_color == KeyColor.WHITE:
                white_keys.append(key)
                cursor += key.width
            else:
                black_keys.append(key)

        logger.debug(
            f"Laid out {len(white_keys)} white and {len(black_keys)} black keys "
            f"({len(self.highlighted)} highlights, policy={config.match_policy.value})"
        )

        return KeyboardScene(
            width=config.width + 2 * config.padding_x,
            height=config.height + 2 * config.padding_y,
            white_keys=tuple(white_keys),
            black_keys=tuple(black_keys),
        )

    def save(self, path: str | Path) -> None:
        """Lay out the keyboard and write it as SVG."""
        save_svg(self.layout(), path)
