"""
Render configuration files.
"""

from chuk_mcp_piano.config.loader import load_piano_config, save_piano_config

__all__ = [
    "load_piano_config",
    "save_piano_config",
]
