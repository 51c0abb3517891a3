"""
Piano render configuration - what to draw and how big.

These models are the whole configuration surface of the renderer. They
validate note text and colors up front so the layout engine only ever sees
well-formed input.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_piano.constants import (
    DEFAULT_NUM_OCTAVES,
    DEFAULT_PADDING_X,
    DEFAULT_PADDING_Y,
    DEFAULT_START_OCTAVE,
    DEFAULT_WIDTH,
    HEIGHT_PER_OCTAVE_RATIO,
    ErrorMessages,
    HighlightColor,
    MatchPolicy,
)
from chuk_mcp_piano.core import Note, NoteParseError, parse_note

_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def resolve_color(color: str) -> str:
    """
    Resolve a named color or hex string to a hex string.

    Raises:
        ValueError: If the color is neither a known name nor a hex value
    """
    value = color.strip()
    if _HEX_RE.fullmatch(value):
        return value.lower()
    try:
        return HighlightColor[value.upper()].value
    except KeyError:
        names = ", ".join(c.name.lower() for c in HighlightColor)
        raise ValueError(ErrorMessages.INVALID_COLOR.format(color=color, names=names)) from None


class HighlightSpec(BaseModel):
    """A note to highlight and the color to fill its key with."""

    note: str = Field(..., description="Note text (e.g., 'E4', 'F♭♭', 'A##')")
    color: str = Field("red", description="Named color or hex value")

    model_config = {"frozen": True}

    @field_validator("note")
    @classmethod
    def validate_note(cls, v: str) -> str:
        """Ensure the note text parses."""
        try:
            parse_note(v)
        except NoteParseError:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(note=v)) from None
        return v.strip()

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Ensure the color resolves."""
        resolve_color(v)
        return v.strip()

    def to_note(self) -> Note:
        """The parsed note."""
        return parse_note(self.note)

    def resolve_color(self) -> str:
        """The fill color as hex."""
        return resolve_color(self.color)


class PianoConfig(BaseModel):
    """
    Everything the layout engine needs to draw a keyboard.

    The keyboard always starts on C<start_octave> and spans num_octaves
    complete octaves.
    """

    width: float = Field(DEFAULT_WIDTH, gt=0, description="Keyboard width in pixels")
    num_octaves: int = Field(DEFAULT_NUM_OCTAVES, ge=1, le=8, description="Octaves to render")
    start_octave: int = Field(DEFAULT_START_OCTAVE, ge=0, le=8, description="Octave of first C")
    padding_x: float = Field(DEFAULT_PADDING_X, ge=0, description="Left/right padding")
    padding_y: float = Field(DEFAULT_PADDING_Y, ge=0, description="Top/bottom padding")
    match_policy: MatchPolicy = Field(
        MatchPolicy.INTRA_OCTAVE,
        description="How highlighted notes are matched to keys",
    )
    highlights: list[HighlightSpec] = Field(
        default_factory=list, description="Notes to highlight, first match wins"
    )

    @property
    def height(self) -> float:
        """Keyboard height, derived from the width."""
        return self.width * HEIGHT_PER_OCTAVE_RATIO / self.num_octaves

    @property
    def octave_width(self) -> float:
        return self.width / self.num_octaves

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "width": self.width,
            "num_octaves": self.num_octaves,
            "start_octave": self.start_octave,
            "padding": {"x": self.padding_x, "y": self.padding_y},
            "match_policy": self.match_policy.value,
            "highlights": [{"note": h.note, "color": h.color} for h in self.highlights],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> PianoConfig:
        """
        Create from a YAML dictionary.

        Highlights may be a list of {note, color} entries or a mapping of
        note -> color.

        Raises:
            ValueError: If padding or a highlight entry is not a mapping
        """
        padding = data.get("padding") or {}
        if not isinstance(padding, dict):
            raise ValueError(f"padding must be a mapping with x/y, got {padding!r}")

        highlights_data = data.get("highlights") or []
        if isinstance(highlights_data, dict):
            highlights_data = [
                {"note": note, "color": color} for note, color in highlights_data.items()
            ]
        if not isinstance(highlights_data, list):
            raise ValueError(f"highlights must be a list or mapping, got {highlights_data!r}")
        for entry in highlights_data:
            if not isinstance(entry, dict):
                raise ValueError(f"Highlight entries must be mappings with a note, got {entry!r}")

        return cls(
            width=data.get("width", DEFAULT_WIDTH),
            num_octaves=data.get("num_octaves", DEFAULT_NUM_OCTAVES),
            start_octave=data.get("start_octave", DEFAULT_START_OCTAVE),
            padding_x=padding.get("x", DEFAULT_PADDING_X),
            padding_y=padding.get("y", DEFAULT_PADDING_Y),
            match_policy=MatchPolicy(data.get("match_policy", MatchPolicy.INTRA_OCTAVE.value)),
            highlights=[HighlightSpec(**h) for h in highlights_data],
        )
