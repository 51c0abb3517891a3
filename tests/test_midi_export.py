"""
MIDI export tests.

Spelled notes go in, note numbers come out.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_piano.compiler.midi import (
    DEFAULT_VELOCITY,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    notes_to_events,
    notes_to_midi,
)
from chuk_mcp_piano.core import Note, NoteLetter, Scale, parse_note


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_create_valid_event(self) -> None:
        """Can create a valid MIDI event."""
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)
        assert event.pitch == 60
        assert event.channel == 0

    def test_event_validation(self) -> None:
        """Out-of-range values raise."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480, velocity=100)
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=128)
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=16)
        with pytest.raises(ValueError, match="Start ticks"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480, velocity=100)


class TestNotesToEvents:
    """Test notes_to_events."""

    def test_one_beat_each(self) -> None:
        """Notes follow each other one beat apart."""
        notes = [parse_note(n) for n in ("C4", "E4", "G4")]
        events = notes_to_events(notes)

        assert [e.pitch for e in events] == [60, 64, 67]
        assert [e.start_ticks for e in events] == [0, 480, 960]
        assert all(e.duration_ticks == TICKS_PER_BEAT for e in events)
        assert all(e.velocity == DEFAULT_VELOCITY for e in events)

    def test_enharmonic_spellings_share_pitch(self) -> None:
        """Spelling does not survive export."""
        events = notes_to_events([parse_note("Fb4"), parse_note("E4"), parse_note("B#3")])
        assert [e.pitch for e in events] == [64, 64, 60]

    def test_beats_per_note(self) -> None:
        """Note length is configurable."""
        events = notes_to_events([parse_note("C4"), parse_note("D4")], beats_per_note=0.5)
        assert [e.start_ticks for e in events] == [0, 240]
        assert events[0].duration_ticks == 240

    def test_out_of_range_note(self) -> None:
        """Notes below MIDI 0 raise."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            notes_to_events([Note(NoteLetter.C, octave=-2)])


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_multiple_notes_ordering(self) -> None:
        """Notes are properly ordered by time."""
        events = [
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=480, velocity=100),
            MidiEvent(pitch=64, start_ticks=0, duration_ticks=480, velocity=100),
        ]
        note_ons = [msg for msg in events_to_midi(events).tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [64, 60]

    def test_repeated_pitch_retriggers(self) -> None:
        """note_off comes before note_on at the same tick."""
        events = notes_to_events([parse_note("E4"), parse_note("Fb4")])
        messages = [
            msg for msg in events_to_midi(events).tracks[0] if msg.type in ("note_on", "note_off")
        ]
        assert [msg.type for msg in messages] == ["note_on", "note_off", "note_on", "note_off"]

    def test_tempo_setting(self) -> None:
        """Tempo is correctly set in the MIDI file."""
        mid = events_to_midi([], tempo_bpm=140)
        tempo_msgs = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"]
        assert len(tempo_msgs) == 1
        assert tempo_msgs[0].tempo == int(60_000_000 / 140)


class TestNotesToMidi:
    """Test notes_to_midi."""

    def test_scale_round_trip(self, temp_dir: Path) -> None:
        """A saved scale reloads with the same note numbers."""
        notes = parse_note("F4").ascending_scale(Scale.MIXOLYDIAN_FLAT13)
        path = temp_dir / "f_mixolydian_b13.mid"
        notes_to_midi(notes, tempo_bpm=100).save(str(path))

        loaded = MidiFile(str(path))
        pitches = [msg.note for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert pitches == [n.to_midi() for n in notes]
        assert pitches == [65, 67, 69, 70, 72, 73, 75]

    def test_same_notes_same_output(self, temp_dir: Path) -> None:
        """Export is deterministic."""
        notes = parse_note("Db4").ascending_scale(Scale.MAJOR)
        first, second = temp_dir / "a.mid", temp_dir / "b.mid"
        notes_to_midi(notes).save(str(first))
        notes_to_midi(notes).save(str(second))
        assert first.read_bytes() == second.read_bytes()


class TestHelperFunctions:
    """Test utility functions."""

    def test_beats_to_ticks(self) -> None:
        """Beat to tick conversion works correctly."""
        assert beats_to_ticks(0) == 0
        assert beats_to_ticks(1) == TICKS_PER_BEAT
        assert beats_to_ticks(0.5) == TICKS_PER_BEAT // 2
        assert beats_to_ticks(1, ticks_per_beat=96) == 96
