"""
MIDI export for note sequences.
"""

from chuk_mcp_piano.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    notes_to_events,
    notes_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "notes_to_events",
    "notes_to_midi",
]
