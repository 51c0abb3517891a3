"""
Interval primitives - IntervalQuality and Interval.

An interval is measured twice: in note letters ("number") and in semitones.
Both are needed to spell the destination note correctly; a minor third and an
augmented second are both 3 semitones but land on different letters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class IntervalQuality(str, Enum):
    """Interval quality."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"


@dataclass(frozen=True)
class Interval:
    """
    An ascending interval.

    number is 0-indexed: a unison is 0, a minor second is 1, an octave is 7.
    semitones is the distance in half steps (0-12).

    The name is a display label. Two intervals with the same quality, number
    and semitones are equal even if they are catalogued under different names
    (T9 == M2).

    Immutable and hashable.
    """

    quality: IntervalQuality
    number: int
    semitones: int
    name: str = field(default="", compare=False)

    # Catalog (defined after class)
    PERFECT_UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    AUGMENTED_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Tensions. These stay inside one octave: in jazz a T9 is a color tone,
    # not "something a major ninth away".
    NINTH: ClassVar[Interval]
    FLAT_NINTH: ClassVar[Interval]
    ELEVENTH: ClassVar[Interval]
    SHARP_ELEVENTH: ClassVar[Interval]
    THIRTEENTH: ClassVar[Interval]
    FLAT_THIRTEENTH: ClassVar[Interval]

    def __post_init__(self) -> None:
        if not 0 <= self.number <= 7:
            raise ValueError(f"Interval number must be 0-7, got {self.number}")
        if not 0 <= self.semitones <= 12:
            raise ValueError(f"Interval semitones must be 0-12, got {self.semitones}")

    def __str__(self) -> str:
        return self.name or f"{self.quality.value} ({self.number}, {self.semitones}st)"

    def __repr__(self) -> str:
        if self.name:
            return f"Interval({self.name})"
        return f"Interval({self.quality.value}, {self.number}, {self.semitones})"

    @classmethod
    def catalog(cls) -> dict[str, Interval]:
        """All named intervals, keyed by short name, in ascending order."""
        return dict(_CATALOG)

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Look up an interval by short name, like 'm3', 'P5' or 'T#11'."""
        key = name.strip()
        if key in _CATALOG:
            return _CATALOG[key]
        raise ValueError(f"Unknown interval: {name}")


_P = IntervalQuality.PERFECT
_MAJ = IntervalQuality.MAJOR
_MIN = IntervalQuality.MINOR
_AUG = IntervalQuality.AUGMENTED
_DIM = IntervalQuality.DIMINISHED

Interval.PERFECT_UNISON = Interval(_P, 0, 0, "P1")
Interval.MINOR_SECOND = Interval(_MIN, 1, 1, "m2")
Interval.MAJOR_SECOND = Interval(_MAJ, 1, 2, "M2")
Interval.AUGMENTED_SECOND = Interval(_AUG, 1, 3, "A2")
Interval.MINOR_THIRD = Interval(_MIN, 2, 3, "m3")
Interval.MAJOR_THIRD = Interval(_MAJ, 2, 4, "M3")
Interval.PERFECT_FOURTH = Interval(_P, 3, 5, "P4")
Interval.AUGMENTED_FOURTH = Interval(_AUG, 3, 6, "A4")
Interval.DIMINISHED_FIFTH = Interval(_DIM, 4, 6, "d5")
Interval.PERFECT_FIFTH = Interval(_P, 4, 7, "P5")
Interval.MINOR_SIXTH = Interval(_MIN, 5, 8, "m6")
Interval.MAJOR_SIXTH = Interval(_MAJ, 5, 9, "M6")
Interval.MINOR_SEVENTH = Interval(_MIN, 6, 10, "m7")
Interval.MAJOR_SEVENTH = Interval(_MAJ, 6, 11, "M7")
Interval.OCTAVE = Interval(_P, 7, 12, "P8")

Interval.NINTH = Interval(_MAJ, 1, 2, "T9")
Interval.FLAT_NINTH = Interval(_MIN, 1, 1, "Tb9")
Interval.ELEVENTH = Interval(_P, 3, 5, "T11")
Interval.SHARP_ELEVENTH = Interval(_AUG, 3, 6, "T#11")
Interval.THIRTEENTH = Interval(_MAJ, 5, 9, "T13")
Interval.FLAT_THIRTEENTH = Interval(_MIN, 5, 8, "Tb13")

_CATALOG: dict[str, Interval] = {
    interval.name: interval
    for interval in (
        Interval.PERFECT_UNISON,
        Interval.MINOR_SECOND,
        Interval.MAJOR_SECOND,
        Interval.AUGMENTED_SECOND,
        Interval.MINOR_THIRD,
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FOURTH,
        Interval.AUGMENTED_FOURTH,
        Interval.DIMINISHED_FIFTH,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SIXTH,
        Interval.MAJOR_SIXTH,
        Interval.MINOR_SEVENTH,
        Interval.MAJOR_SEVENTH,
        Interval.OCTAVE,
        Interval.FLAT_NINTH,
        Interval.NINTH,
        Interval.ELEVENTH,
        Interval.SHARP_ELEVENTH,
        Interval.FLAT_THIRTEENTH,
        Interval.THIRTEENTH,
    )
}
