"""
Tests for the server command line.
"""

from pathlib import Path

import pytest

from chuk_mcp_piano.server import build_parser


class TestBuildParser:
    """Tests for command-line parsing."""

    def test_defaults(self) -> None:
        """stdio transport, no output override."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.output_dir is None
        assert args.debug is False

    def test_output_dir(self) -> None:
        """--output-dir is parsed as a path."""
        args = build_parser().parse_args(["--output-dir", "diagrams/svg"])
        assert args.output_dir == Path("diagrams/svg")

    def test_http_transport(self) -> None:
        """HTTP transport takes a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9001", "--debug"])
        assert args.transport == "http"
        assert args.port == 9001
        assert args.debug is True

    def test_invalid_transport(self) -> None:
        """Unknown transports are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])
