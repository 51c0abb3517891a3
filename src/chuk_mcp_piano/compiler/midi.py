"""
MIDI export - audition spelled notes.

Spelling is lost on the way out (MIDI only knows note numbers), so this is
for listening to scales and transpositions, not for storing them.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_piano.core import Note


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 90


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def notes_to_events(
    notes: Sequence[Note],
    beats_per_note: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Play notes one after another.

    Args:
        notes: Notes in playing order
        beats_per_note: Length of each note in beats
        velocity: Velocity for every note (0-127)
        ticks_per_beat: Resolution

    Returns:
        One MidiEvent per note

    Raises:
        ValueError: If a note falls outside the MIDI range
    """
    step = beats_to_ticks(beats_per_note, ticks_per_beat)
    return [
        MidiEvent(
            pitch=note.to_midi(),
            start_ticks=i * step,
            duration_ticks=step,
            velocity=velocity,
        )
        for i, note in enumerate(notes)
    ]


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,
                ),
            )
        )

    # note_off before note_on at the same tick so repeated pitches retrigger
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    # Convert to delta times
    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def notes_to_midi(
    notes: Sequence[Note],
    tempo_bpm: int = 120,
    beats_per_note: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
) -> MidiFile:
    """
    Convert notes straight to a MidiFile, one note per beat by default.

    Example:
        root = parse_note("F4")
        notes_to_midi(root.ascending_scale(Scale.MIXOLYDIAN_FLAT13)).save("f.mid")
    """
    events = notes_to_events(notes, beats_per_note=beats_per_note, velocity=velocity)
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat count to ticks."""
    return int(beats * ticks_per_beat)
