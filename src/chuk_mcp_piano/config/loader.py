"""
Piano config loader - reads and writes render configs as YAML.

Example file:

    width: 512
    num_octaves: 2
    padding: {x: 10, y: 20}
    match_policy: intra_octave
    highlights:
      - {note: Fbb, color: red}
      - {note: E4, color: green}
      - {note: "A##", color: "#ff00ff"}
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from chuk_mcp_piano.models.piano import PianoConfig

logger = logging.getLogger(__name__)


def load_piano_config(path: Path) -> PianoConfig:
    """
    Load a piano config from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        The validated config

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file isn't a YAML mapping or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Piano config not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Piano config must be a mapping: {path}")

    config = PianoConfig.from_yaml_dict(data)
    logger.debug(f"Loaded piano config from {path} ({len(config.highlights)} highlights)")
    return config


def save_piano_config(config: PianoConfig, path: Path) -> Path:
    """
    Save a piano config as YAML.

    Args:
        config: The config to save
        path: Destination file

    Returns:
        The path written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(
            config.to_yaml_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True
        )

    logger.debug(f"Saved piano config to {path}")
    return path
