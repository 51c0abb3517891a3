#!/usr/bin/env python3
"""
Command-line entry point for the CHUK Piano MCP Server.

    chuk-mcp-piano                          # stdio, files in ./output
    chuk-mcp-piano --transport http --port 8080
    chuk-mcp-piano --output-dir ~/diagrams  # where SVG/MIDI files go
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(
        description="CHUK Piano MCP Server - spelled intervals and keyboard diagrams"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for rendered SVG and MIDI files (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, build the server and run it on the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Imported late so --debug covers tool registration
    from chuk_mcp_piano.async_server import DEFAULT_OUTPUT_DIR, create_server

    output_dir = (args.output_dir or DEFAULT_OUTPUT_DIR).expanduser()
    mcp, _ = create_server(output_dir)

    if args.transport == "stdio":
        logger.info(f"Starting CHUK Piano MCP Server (stdio, output: {output_dir})")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Piano MCP Server (http:{args.port}, output: {output_dir})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
