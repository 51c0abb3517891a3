"""
Note primitives - NoteLetter, Accidental, KeyColor and Note.

A Note is a spelled pitch: letter + accidental + octave. Unlike a bare
semitone number, it knows that C#4 and Db4 are different notes that happen to
sound the same, which is what lets intervals be spelled correctly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from .errors import InvariantViolation
from .interval import Interval

if TYPE_CHECKING:
    from .scale import Scale

SEMITONES_PER_OCTAVE = 12

# Intra-octave semitone values of the white and black keys
WHITE_KEY_VALUES: frozenset[int] = frozenset({0, 2, 4, 5, 7, 9, 11})
BLACK_KEY_VALUES: frozenset[int] = frozenset({1, 3, 6, 8, 10})

_LETTER_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


class NoteLetter(IntEnum):
    """
    The 7 note letters, in ascending order from C.

    Arithmetic on letters is what spells interval results: a minor third
    above Db is found by walking up three letters (D, E, F) and then fixing
    the accidental, giving Fb rather than E.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def semitone_offset(self) -> int:
        """Semitones above C within one octave."""
        return _LETTER_OFFSETS[self.value]

    def advance_by(self, number: int) -> tuple[NoteLetter, int]:
        """
        Walk up `number` letters.

        Returns:
            The new letter and how many times the walk wrapped past B.
        """
        octaves, index = divmod(self.value + number, len(NoteLetter))
        return NoteLetter(index), octaves


class Accidental(Enum):
    """An accidental and its semitone offset."""

    NATURAL = 0
    FLAT = -1
    SHARP = 1
    DOUBLE_FLAT = -2
    DOUBLE_SHARP = 2

    @property
    def semitone_offset(self) -> int:
        return int(self.value)

    @property
    def symbol(self) -> str:
        """ASCII spelling ('', 'b', '#', 'bb', '##')."""
        return _ASCII_SYMBOLS[self]

    @property
    def unicode_symbol(self) -> str:
        """Unicode spelling ('', '♭', '♯', '♭♭', '×')."""
        return _UNICODE_SYMBOLS[self]

    @classmethod
    def from_offset(cls, offset: int) -> Accidental:
        """
        Get the accidental that moves a natural note by `offset` semitones.

        Raises:
            InvariantViolation: If the offset is outside a double flat/sharp.
        """
        try:
            return cls(offset)
        except ValueError:
            raise InvariantViolation(
                f"Notes must be within a double flat/sharp of their letter, got offset {offset}"
            ) from None


_ASCII_SYMBOLS: dict[Accidental, str] = {
    Accidental.NATURAL: "",
    Accidental.FLAT: "b",
    Accidental.SHARP: "#",
    Accidental.DOUBLE_FLAT: "bb",
    Accidental.DOUBLE_SHARP: "##",
}
_UNICODE_SYMBOLS: dict[Accidental, str] = {
    Accidental.NATURAL: "",
    Accidental.FLAT: "♭",
    Accidental.SHARP: "♯",
    Accidental.DOUBLE_FLAT: "♭♭",
    Accidental.DOUBLE_SHARP: "×",
}


class KeyColor(str, Enum):
    """Color of the piano key that plays a note."""

    WHITE = "white"
    BLACK = "black"


@dataclass(frozen=True)
class Note:
    """
    A spelled pitch.

    Equality is structural: C#4 != Db4. Ordering is by sounding pitch, so
    C#4 <= Db4 and Db4 <= C#4 both hold. Use enharmonic_equal() to ask
    whether two notes sound the same.

    Examples:
        Note(NoteLetter.F, Accidental.DOUBLE_FLAT) = Fbb4
        Note(NoteLetter.C, octave=5) = C5
    """

    letter: NoteLetter
    accidental: Accidental = Accidental.NATURAL
    octave: int = 4

    def semitone_value(self) -> int:
        """Absolute semitone value; spans octaves (C0 = 0)."""
        return (
            SEMITONES_PER_OCTAVE * self.octave
            + self.letter.semitone_offset
            + self.accidental.semitone_offset
        )

    def intra_octave_semitone_value(self) -> int:
        """Semitone position within one octave (0-11), ignoring the octave."""
        offset = self.letter.semitone_offset + self.accidental.semitone_offset
        return offset % SEMITONES_PER_OCTAVE

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.semitone_value() + SEMITONES_PER_OCTAVE

    def key_color(self) -> KeyColor:
        """Which kind of piano key plays this note."""
        value = self.intra_octave_semitone_value()
        if value in WHITE_KEY_VALUES:
            return KeyColor.WHITE
        if value in BLACK_KEY_VALUES:
            return KeyColor.BLACK
        raise InvariantViolation(f"Semitone value {value} is neither a white nor a black key")

    def semitone_distance(self, other: Note) -> int:
        """Semitones from `other` up to this note."""
        return self.semitone_value() - other.semitone_value()

    def apply_interval(self, interval: Interval) -> Note:
        """
        Move up by `interval` and spell the result.

        The letter is chosen first (interval.number letters up), then the
        accidental is whatever makes up the remaining semitone difference.

        Raises:
            InvariantViolation: If the result would need more than a double
                flat or double sharp.
        """
        letter, octaves = self.letter.advance_by(interval.number)
        natural = Note(letter, Accidental.NATURAL, self.octave + octaves)
        delta = interval.semitones - natural.semitone_distance(self)
        return Note(letter, Accidental.from_offset(delta), natural.octave)

    def ascending_scale(self, scale: Scale) -> list[Note]:
        """Apply each interval of the scale's ascending run to this root."""
        return [self.apply_interval(interval) for interval in scale.ascending]

    def descending_scale(self, scale: Scale) -> list[Note]:
        """
        Notes of the scale from the top down.

        Uses the scale's own descending run when it has one, otherwise the
        ascending notes in reverse.
        """
        if scale.descending is None:
            return list(reversed(self.ascending_scale(scale)))
        return [self.apply_interval(interval) for interval in scale.descending]

    def spelled_equal(self, other: Note) -> bool:
        """Same letter, accidental and octave."""
        return self == other

    def enharmonic_equal(self, other: Note) -> bool:
        """Same sounding pitch, regardless of spelling."""
        return self.semitone_value() == other.semitone_value()

    def same_pitch_class(self, other: Note) -> bool:
        """Same position within the octave, regardless of spelling or octave."""
        return self.intra_octave_semitone_value() == other.intra_octave_semitone_value()

    def spell(self, unicode: bool = False) -> str:
        """Human-readable name, like 'Fb4' or 'F♭4'."""
        accidental = self.accidental.unicode_symbol if unicode else self.accidental.symbol
        return f"{self.letter.name}{accidental}{self.octave}"

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Note({self.spell()})"

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone_value() < other.semitone_value()

    def __le__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone_value() <= other.semitone_value()

    def __gt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone_value() > other.semitone_value()

    def __ge__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone_value() >= other.semitone_value()
