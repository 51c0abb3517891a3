"""
SVG output for laid-out keyboards.

SVG paints in document order, so the white-key group is written before the
black-key group.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import TYPE_CHECKING

from chuk_mcp_piano.constants import KEY_STROKE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chuk_mcp_piano.drawing.layout import KeyboardScene, RenderedKey

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_coordinate(value: float) -> str:
    """
    Format a coordinate for SVG attributes.

    Fixed point to a thousandth of a pixel, trailing zeros trimmed, so large
    keyboards never fall into exponent notation.

    Examples:
        format_coordinate(50.5) = '50.5'
        format_coordinate(1234567.0) = '1234567'
    """
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _key_group(keys: Iterable[RenderedKey], group_id: str) -> ElementTree.Element:
    group = ElementTree.Element("g", {"id": group_id})
    for key in keys:
        ElementTree.SubElement(
            group,
            "path",
            {
                "fill": key.fill,
                "stroke": KEY_STROKE,
                "d": key.path_data(),
                "data-note": str(key.note),
            },
        )
    return group


def scene_to_element(scene: KeyboardScene) -> ElementTree.Element:
    """Build the <svg> element for a scene."""
    width, height = format_coordinate(scene.width), format_coordinate(scene.height)
    root = ElementTree.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "viewBox": f"0 0 {width} {height}",
        },
    )
    root.append(_key_group(scene.white_keys, "white-keys"))
    root.append(_key_group(scene.black_keys, "black-keys"))
    return root


def scene_to_svg(scene: KeyboardScene) -> str:
    """Serialize a scene to an SVG document string."""
    return ElementTree.tostring(scene_to_element(scene), encoding="unicode")


def save_svg(scene: KeyboardScene, path: str | Path) -> Path:
    """
    Write a scene to an SVG file.

    Args:
        scene: The laid-out keyboard
        path: Destination file

    Returns:
        The path written
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(scene_to_svg(scene))

    logger.info(f"Wrote piano SVG to {path} ({len(scene.keys)} keys)")
    return path
