#!/usr/bin/env python3
"""
Async Piano MCP Server using chuk-mcp-server

This server provides MCP tools for spelling notes and drawing keyboards.
Interval results are spelled the way a musician would write them (a minor
third above Db is Fb, not E), and any set of notes can be highlighted on a
rendered piano keyboard.

The server provides tools for:
- Applying intervals and comparing notes
- Generating ascending and descending scales
- Laying out and rendering highlighted keyboards to SVG
- Exporting scales to MIDI files
"""

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_piano.tools import register_piano_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# SVG and MIDI files land here unless the server is started with --output-dir
DEFAULT_OUTPUT_DIR = Path.cwd() / "output"


def create_server(
    output_dir: Path = DEFAULT_OUTPUT_DIR,
) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create the MCP server and register every tool.

    Args:
        output_dir: Directory rendered SVG and MIDI files are written to

    Returns:
        The server and a dictionary of its tool functions
    """
    server = ChukMCPServer("chuk-mcp-piano")
    tools = {**register_theory_tools(server), **register_piano_tools(server, output_dir)}
    logger.info(f"CHUK Piano MCP Server initialized ({len(tools)} tools, output: {output_dir})")
    return server, tools


mcp, tools = create_server()

# Export tool functions for direct access
music_apply_interval = tools["music_apply_interval"]
music_scale = tools["music_scale"]
music_list_intervals = tools["music_list_intervals"]
music_list_scales = tools["music_list_scales"]
music_compare_notes = tools["music_compare_notes"]

music_piano_layout = tools["music_piano_layout"]
music_render_piano = tools["music_render_piano"]
music_export_scale_midi = tools["music_export_scale_midi"]
