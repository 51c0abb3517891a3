"""
Tests for MCP tools.

Tests the MCP tool implementations for theory lookups, keyboard
rendering and MIDI export.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_piano.constants import HighlightColor
from chuk_mcp_piano.tools import register_piano_tools, register_theory_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def theory_tools():
    """Registered theory tools."""
    return register_theory_tools(MockMCPServer("test"))


@pytest.fixture
def piano_tools(temp_dir: Path):
    """Registered piano tools writing into a temp directory."""
    return register_piano_tools(MockMCPServer("test"), temp_dir / "output")


class TestRegistration:
    """Tools end up on the server."""

    def test_all_tools_registered(self, temp_dir: Path):
        """Every tool is registered with the server."""
        mcp = MockMCPServer("test")
        register_theory_tools(mcp)
        register_piano_tools(mcp, temp_dir)
        assert set(mcp.tools) == {
            "music_apply_interval",
            "music_scale",
            "music_list_intervals",
            "music_list_scales",
            "music_compare_notes",
            "music_piano_layout",
            "music_render_piano",
            "music_export_scale_midi",
        }


class TestTheoryTools:
    """Tests for theory tools."""

    @pytest.mark.asyncio
    async def test_apply_interval(self, theory_tools):
        """Minor third above Db is Fb."""
        data = json.loads(await theory_tools["music_apply_interval"](note="Db4", interval="m3"))
        assert data["status"] == "success"
        assert data["interval"] == "m3"
        assert data["result"]["name"] == "Fb4"
        assert data["result"]["unicode"] == "F♭4"
        assert data["result"]["key_color"] == "white"
        assert data["result"]["midi"] == 64

    @pytest.mark.asyncio
    async def test_apply_interval_double_sharp(self, theory_tools):
        """Major seventh above D# is C##."""
        data = json.loads(await theory_tools["music_apply_interval"](note="D#4", interval="M7"))
        assert data["result"]["name"] == "C##5"
        assert data["result"]["accidental"] == "double_sharp"

    @pytest.mark.asyncio
    async def test_apply_interval_invalid_note(self, theory_tools):
        """Bad notes give an error."""
        data = json.loads(await theory_tools["music_apply_interval"](note="H#", interval="m3"))
        assert data["status"] == "error"
        assert "H#" in data["message"]

    @pytest.mark.asyncio
    async def test_apply_interval_unknown_interval(self, theory_tools):
        """Unknown intervals give an error."""
        data = json.loads(await theory_tools["music_apply_interval"](note="C4", interval="X9"))
        assert data["status"] == "error"
        assert "X9" in data["message"]

    @pytest.mark.asyncio
    async def test_apply_interval_unrepresentable(self, theory_tools):
        """Results needing a triple accidental give an error."""
        data = json.loads(await theory_tools["music_apply_interval"](note="B##4", interval="A2"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_scale(self, theory_tools):
        """F mixolydian b13 is spelled with flats."""
        data = json.loads(await theory_tools["music_scale"](root="F4", scale="mixolydian_flat13"))
        assert data["status"] == "success"
        assert data["notes"] == ["F4", "G4", "A4", "Bb4", "C5", "Db5", "Eb5"]

    @pytest.mark.asyncio
    async def test_scale_descending(self, theory_tools):
        """Melodic minor descends through the natural minor."""
        data = json.loads(
            await theory_tools["music_scale"](
                root="A4", scale="melodic-minor", direction="descending"
            )
        )
        assert data["scale"] == "melodic_minor"
        assert data["notes"] == ["G5", "F5", "E5", "D5", "C5", "B4", "A4"]

    @pytest.mark.asyncio
    async def test_scale_errors(self, theory_tools):
        """Bad root, scale or direction give errors."""
        for kwargs in (
            {"root": "H", "scale": "major"},
            {"root": "C4", "scale": "lydian_dominant_super"},
            {"root": "C4", "scale": "major", "direction": "sideways"},
        ):
            data = json.loads(await theory_tools["music_scale"](**kwargs))
            assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_intervals(self, theory_tools):
        """All named intervals are listed."""
        data = json.loads(await theory_tools["music_list_intervals"]())
        by_name = {i["name"]: i for i in data["intervals"]}
        assert by_name["m3"] == {"name": "m3", "quality": "minor", "number": 2, "semitones": 3}
        assert "T#11" in by_name
        assert "P8" in by_name

    @pytest.mark.asyncio
    async def test_list_scales(self, theory_tools):
        """Scales list their intervals."""
        data = json.loads(await theory_tools["music_list_scales"]())
        by_name = {s["name"]: s for s in data["scales"]}
        assert by_name["major"]["ascending"] == ["P1", "M2", "M3", "P4", "P5", "M6", "M7"]
        assert by_name["major"]["descending"] is None
        assert by_name["melodic_minor"]["descending"] is not None

    @pytest.mark.asyncio
    async def test_compare_notes(self, theory_tools):
        """C#4 and Db4 sound the same but are spelled differently."""
        data = json.loads(await theory_tools["music_compare_notes"](first="C#4", second="Db4"))
        assert data["spelled_equal"] is False
        assert data["enharmonic_equal"] is True
        assert data["same_pitch_class"] is True
        assert data["semitones"] == 0

    @pytest.mark.asyncio
    async def test_compare_notes_distance(self, theory_tools):
        """Distance is measured from first up to second."""
        data = json.loads(await theory_tools["music_compare_notes"](first="C4", second="E5"))
        assert data["enharmonic_equal"] is False
        assert data["same_pitch_class"] is False
        assert data["semitones"] == 16

    @pytest.mark.asyncio
    async def test_compare_notes_invalid(self, theory_tools):
        """Bad notes give an error naming the bad text."""
        data = json.loads(await theory_tools["music_compare_notes"](first="C4", second="Cx"))
        assert data["status"] == "error"
        assert "Cx" in data["message"]


class TestPianoTools:
    """Tests for piano tools."""

    @pytest.mark.asyncio
    async def test_piano_layout(self, piano_tools):
        """Layout returns every key with its fill."""
        data = json.loads(
            await piano_tools["music_piano_layout"](highlights={"Fbb": "red", "E4": "green"})
        )
        assert data["status"] == "success"
        assert len(data["keys"]) == 24
        fills = {k["note"]: k["fill"] for k in data["keys"]}
        assert fills["Eb4"] == HighlightColor.RED.value
        assert fills["E5"] == HighlightColor.GREEN.value
        assert fills["C4"] == "white"

    @pytest.mark.asyncio
    async def test_piano_layout_absolute(self, piano_tools):
        """The absolute policy only matches the given octave."""
        data = json.loads(
            await piano_tools["music_piano_layout"](
                highlights={"E4": "green"}, match_policy="absolute"
            )
        )
        fills = {k["note"]: k["fill"] for k in data["keys"]}
        assert fills["E4"] == HighlightColor.GREEN.value
        assert fills["E5"] == "white"

    @pytest.mark.asyncio
    async def test_piano_layout_errors(self, piano_tools):
        """Bad notes, colors, policies and sizes give errors."""
        for kwargs in (
            {"highlights": {"H#": "red"}},
            {"highlights": {"C4": "chartreuse"}},
            {"match_policy": "nearest"},
            {"num_octaves": 0},
        ):
            data = json.loads(await piano_tools["music_piano_layout"](**kwargs))
            assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_render_piano(self, piano_tools, temp_dir: Path):
        """Render writes an SVG file."""
        data = json.loads(
            await piano_tools["music_render_piano"](
                highlights={"A##": "#ff00ff"}, num_octaves=1, output_name="chord"
            )
        )
        assert data["status"] == "success"
        assert data["keys"] == 12
        assert data["highlighted"] == ["B4"]

        path = Path(data["path"])
        assert path == temp_dir / "output" / "chord.svg"
        content = path.read_text(encoding="utf-8")
        assert content.startswith("<svg")
        assert "#ff00ff" in content

    @pytest.mark.asyncio
    async def test_export_scale_midi(self, piano_tools, temp_dir: Path):
        """Scale export plays up to the octave and back down."""
        data = json.loads(
            await piano_tools["music_export_scale_midi"](root="A3", scale="melodic_minor")
        )
        assert data["status"] == "success"
        assert len(data["notes"]) == 15
        assert data["notes"][:8] == ["A3", "B3", "C4", "D4", "E4", "F#4", "G#4", "A4"]
        assert data["notes"][8:] == ["G4", "F4", "E4", "D4", "C4", "B3", "A3"]

        path = Path(data["path"])
        assert path.name == "A3_melodic_minor.mid"
        loaded = MidiFile(str(path))
        note_ons = [msg for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert len(note_ons) == 15
        assert note_ons[0].note == 57

    @pytest.mark.asyncio
    async def test_export_scale_midi_errors(self, piano_tools):
        """Bad root or scale give errors."""
        data = json.loads(await piano_tools["music_export_scale_midi"](root="Q", scale="major"))
        assert data["status"] == "error"
        data = json.loads(await piano_tools["music_export_scale_midi"](root="C", scale="bogus"))
        assert data["status"] == "error"
