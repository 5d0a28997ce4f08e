"""
SVG to PNG rasterization.

Uses CairoSVG to draw the card at a caller-chosen width; the height follows
from the document's own aspect ratio.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Tuple

from .errors import RasterizeEncodeFailure, RasterizeParseFailure

logger = logging.getLogger("repocard.rasterizer")

DEFAULT_WIDTH = 1200

_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


@dataclass(frozen=True)
class Bitmap:
    """PNG-encoded raster image."""
    width: int
    height: int
    data: bytes


def intrinsic_size(document: str) -> Tuple[float, float]:
    """
    Read the canvas size declared on the root ``<svg>`` element.

    ``width``/``height`` win; the ``viewBox`` is used when either is missing
    or not a plain pixel length.

    Raises:
        RasterizeParseFailure: If the document is not well-formed SVG or
            declares no usable size
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise RasterizeParseFailure(f"Failed to parse SVG: {e}") from e

    if root.tag.rsplit("}", 1)[-1] != "svg":
        raise RasterizeParseFailure(f"Failed to parse SVG: root element is <{root.tag}>")

    width = _length(root.get("width"))
    height = _length(root.get("height"))
    if width is None or height is None:
        parts = (root.get("viewBox") or "").replace(",", " ").split()
        if len(parts) == 4:
            try:
                width, height = float(parts[2]), float(parts[3])
            except ValueError:
                width = height = None

    if not width or not height or width <= 0 or height <= 0:
        raise RasterizeParseFailure("Failed to parse SVG: missing canvas size")
    return width, height


def rasterize(document: str, width: int = DEFAULT_WIDTH) -> Bitmap:
    """
    Render an SVG document to PNG at ``width`` pixels wide.

    Args:
        document: SVG markup
        width: Target bitmap width in pixels

    Returns:
        Bitmap holding the PNG bytes and its pixel size

    Raises:
        RasterizeParseFailure: If the document cannot be parsed
        RasterizeEncodeFailure: If drawing or PNG encoding fails
    """
    svg_width, svg_height = intrinsic_size(document)
    if width <= 0:
        raise RasterizeEncodeFailure(f"Failed to create pixmap: invalid width {width}")

    scale = width / svg_width
    height = max(int(round(svg_height * scale)), 1)
    logger.debug("Rasterizing %sx%s SVG to %dx%d PNG", svg_width, svg_height, width, height)

    try:
        import cairosvg
    except (ImportError, OSError) as e:
        logger.error("Rasterizer backend unavailable: %s", e)
        raise RasterizeEncodeFailure(f"Failed to encode PNG: rasterizer backend unavailable: {e}") from e

    try:
        data = cairosvg.svg2png(
            bytestring=document.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except ET.ParseError as e:
        raise RasterizeParseFailure(f"Failed to parse SVG: {e}") from e
    except Exception as e:
        logger.error("PNG encoding failed: %s", e)
        raise RasterizeEncodeFailure(f"Failed to encode PNG: {e}") from e

    if not data:
        raise RasterizeEncodeFailure("Failed to encode PNG: renderer returned no data")
    return Bitmap(width=width, height=height, data=data)


def _length(value):
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    return float(match.group(1)) if match else None
