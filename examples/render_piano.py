#!/usr/bin/env python3
"""
Example: Highlight notes on a piano keyboard.

Double accidentals land on the keys that actually sound: Fbb lights up the
Eb keys and A## lights up the B keys.

Usage:
    python examples/render_piano.py
    # Creates: examples/output/piano.svg
    #          examples/output/f_mixolydian_b13.svg
    #          examples/output/piano.yaml
"""

from pathlib import Path

from chuk_mcp_piano.config import load_piano_config, save_piano_config
from chuk_mcp_piano.constants import MatchPolicy
from chuk_mcp_piano.core import Scale, parse_note
from chuk_mcp_piano.drawing import PianoLayout
from chuk_mcp_piano.models import HighlightSpec, PianoConfig


def main() -> None:
    """Render example keyboards."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: double accidentals, highlighted in every octave
    print("Rendering piano.svg...")
    piano = PianoLayout()
    piano.highlight_note("Fbb")
    piano.highlight_note("E4", "green")
    piano.highlight_note("A##", "#ff00ff")
    piano.save(output_dir / "piano.svg")
    print(f"  Created: {output_dir / 'piano.svg'}")

    # Example 2: a scale, only at the octave it is played in
    print("\nRendering f_mixolydian_b13.svg...")
    notes = parse_note("F4").ascending_scale(Scale.MIXOLYDIAN_FLAT13)
    print(f"  Notes: {' '.join(n.spell(unicode=True) for n in notes)}")
    config = PianoConfig(
        width=512,
        match_policy=MatchPolicy.ABSOLUTE,
        highlights=[HighlightSpec(note=str(n), color="blue") for n in notes],
    )
    PianoLayout(config).save(output_dir / "f_mixolydian_b13.svg")
    print(f"  Created: {output_dir / 'f_mixolydian_b13.svg'}")

    # Example 3: keep the settings in YAML and load them back
    print("\nSaving piano.yaml...")
    config_path = save_piano_config(config, output_dir / "piano.yaml")
    reloaded = load_piano_config(config_path)
    print(f"  Created: {config_path} ({len(reloaded.highlights)} highlights)")

    print("\nDone! Open the SVG files in a browser to see them.")


if __name__ == "__main__":
    main()
