"""
Scale primitives - Scale and the scale catalog.

A scale is an ordered run of intervals measured from an implicit root. The
ascending run includes the root (as a unison). Some scales descend
differently than they ascend; melodic minor is the classic case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .interval import Interval


@dataclass(frozen=True)
class Scale:
    """
    A named interval pattern.

    ascending: intervals from the root, lowest first.
    descending: intervals from the root, highest first. None means the
        descending notes are the ascending notes reversed.

    Immutable and hashable.
    """

    name: str
    ascending: tuple[Interval, ...]
    descending: tuple[Interval, ...] | None = None

    # Catalog (defined after class)
    CHROMATIC: ClassVar[Scale]
    MAJOR: ClassVar[Scale]
    NATURAL_MINOR: ClassVar[Scale]
    MELODIC_MINOR: ClassVar[Scale]
    DORIAN: ClassVar[Scale]
    MIXOLYDIAN: ClassVar[Scale]
    MIXOLYDIAN_FLAT9: ClassVar[Scale]
    MIXOLYDIAN_FLAT13: ClassVar[Scale]
    ALTERED: ClassVar[Scale]

    def __post_init__(self) -> None:
        if not self.ascending:
            raise ValueError(f"Scale '{self.name}' must have at least one interval")
        if self.descending is not None and not self.descending:
            raise ValueError(f"Scale '{self.name}' has an empty descending run")

    @property
    def has_distinct_descent(self) -> bool:
        """True if the scale descends differently than it ascends."""
        return self.descending is not None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Scale.{self.name.upper()}"

    @classmethod
    def catalog(cls) -> dict[str, Scale]:
        """All catalogued scales, keyed by name."""
        return dict(_CATALOG)

    @classmethod
    def parse(cls, name: str) -> Scale:
        """
        Look up a scale by name, like 'mixolydian_flat13' or 'melodic minor'.

        Raises:
            ValueError: If no scale has that name.
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        if key not in _CATALOG:
            raise ValueError(f"Unknown scale: {name}")
        return _CATALOG[key]


_I = Interval

Scale.CHROMATIC = Scale(
    "chromatic",
    (
        _I.PERFECT_UNISON,
        _I.MINOR_SECOND,
        _I.MAJOR_SECOND,
        _I.MINOR_THIRD,
        _I.MAJOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.DIMINISHED_FIFTH,
        _I.PERFECT_FIFTH,
        _I.MINOR_SIXTH,
        _I.MAJOR_SIXTH,
        _I.MINOR_SEVENTH,
        _I.MAJOR_SEVENTH,
    ),
)
Scale.MAJOR = Scale(
    "major",
    (
        _I.PERFECT_UNISON,
        _I.MAJOR_SECOND,
        _I.MAJOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MAJOR_SIXTH,
        _I.MAJOR_SEVENTH,
    ),
)
Scale.NATURAL_MINOR = Scale(
    "natural_minor",
    (
        _I.PERFECT_UNISON,
        _I.MAJOR_SECOND,
        _I.MINOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MINOR_SIXTH,
        _I.MINOR_SEVENTH,
    ),
)
# Classical melodic minor: raised 6 and 7 going up, natural minor coming down
Scale.MELODIC_MINOR = Scale(
    "melodic_minor",
    (
        _I.PERFECT_UNISON,
        _I.MAJOR_SECOND,
        _I.MINOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MAJOR_SIXTH,
        _I.MAJOR_SEVENTH,
    ),
    descending=tuple(reversed(Scale.NATURAL_MINOR.ascending)),
)
Scale.DORIAN = Scale(
    "dorian",
    (
        _I.PERFECT_UNISON,
        _I.MAJOR_SECOND,
        _I.MINOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MAJOR_SIXTH,
        _I.MINOR_SEVENTH,
    ),
)
Scale.MIXOLYDIAN = Scale(
    "mixolydian",
    (
        _I.PERFECT_UNISON,
        _I.MAJOR_SECOND,
        _I.MAJOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MAJOR_SIXTH,
        _I.MINOR_SEVENTH,
    ),
)
Scale.MIXOLYDIAN_FLAT9 = Scale(
    "mixolydian_flat9",
    (
        _I.PERFECT_UNISON,
        _I.MINOR_SECOND,
        _I.MAJOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MAJOR_SIXTH,
        _I.MINOR_SEVENTH,
    ),
)
Scale.MIXOLYDIAN_FLAT13 = Scale(
    "mixolydian_flat13",
    (
        _I.PERFECT_UNISON,
        _I.MAJOR_SECOND,
        _I.MAJOR_THIRD,
        _I.PERFECT_FOURTH,
        _I.PERFECT_FIFTH,
        _I.MINOR_SIXTH,
        _I.MINOR_SEVENTH,
    ),
)
# Seventh mode of melodic minor; G altered is spelled like Ab melodic minor
Scale.ALTERED = Scale(
    "altered",
    (
        _I.PERFECT_UNISON,
        _I.MINOR_SECOND,
        _I.AUGMENTED_SECOND,
        _I.MAJOR_THIRD,
        _I.DIMINISHED_FIFTH,
        _I.MINOR_SIXTH,
        _I.MINOR_SEVENTH,
    ),
)

_CATALOG: dict[str, Scale] = {
    scale.name: scale
    for scale in (
        Scale.CHROMATIC,
        Scale.MAJOR,
        Scale.NATURAL_MINOR,
        Scale.MELODIC_MINOR,
        Scale.DORIAN,
        Scale.MIXOLYDIAN,
        Scale.MIXOLYDIAN_FLAT9,
        Scale.MIXOLYDIAN_FLAT13,
        Scale.ALTERED,
    )
}
