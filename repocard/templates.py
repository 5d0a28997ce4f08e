"""
Card Template Module

This module renders the repository social card as an SVG document. Three
variants share one 1200x630 canvas; each is a pure function of the metadata
and style options, so identical input always yields byte-identical output.
"""

import enum
import logging
from typing import Callable, Dict, List, Optional, Sequence, Union

from . import svg
from .errors import UnknownTemplateVariant
from .formatting import (
    ATTRIBUTION_TEXT,
    format_count,
    language_color,
    truncate,
)
from .models import RepositoryMetadata
from .svg import el, group, text, translate

logger = logging.getLogger("repocard.templates")

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 630

MAX_TOPICS = 5
BADGE_CHAR_WIDTH = 8
BADGE_PADDING = 20
BADGE_GUTTER = 10
BADGE_HEIGHT = 28

NO_DESCRIPTION = "No description provided"
UNKNOWN_LANGUAGE = "Unknown"

STAR_ICON = (
    "M8 0C3.58 0 0 3.58 0 8s3.58 8 8 8 8-3.58 8-8-3.58-8-8-8zm0 14.5c-3.59 "
    "0-6.5-2.91-6.5-6.5S4.41 1.5 8 1.5s6.5 2.91 6.5 6.5-2.91 6.5-6.5 6.5z"
)
STAR_INNER_ICON = "M8 3.5l1.5 3 3.5.5-2.5 2.5.5 3.5L8 11l-3 2 .5-3.5L3 7l3.5-.5z"
FORK_ICON = (
    "M5 5.372v.878c0 .414.336.75.75.75h4.5a.75.75 0 0 0 .75-.75v-.878a2.25 2.25 "
    "0 1 0-1.5 0v.878H6.25v-.878a2.25 2.25 0 1 0-1.5 0ZM8 1.25a1.25 1.25 0 1 1 "
    "0 2.5 1.25 1.25 0 0 1 0-2.5ZM5 4a1.25 1.25 0 1 1 0-2.5A1.25 1.25 0 0 1 5 "
    "4Zm6 0a1.25 1.25 0 1 1 0-2.5A1.25 1.25 0 0 1 11 4Z"
)


class TemplateVariant(enum.Enum):
    """The closed set of card layouts."""
    MODERN = "modern"
    MINIMAL = "minimal"
    GRADIENT = "gradient"

    @classmethod
    def parse(cls, value: Union["TemplateVariant", str]) -> "TemplateVariant":
        """
        Resolve a variant from its identifier.

        Raises:
            UnknownTemplateVariant: If ``value`` names no known variant
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownTemplateVariant(str(value)) from None

    @classmethod
    def ids(cls) -> List[str]:
        return [variant.value for variant in cls]


def render(
    metadata: RepositoryMetadata,
    variant: Union[TemplateVariant, str],
    include_attribution: bool,
    primary_color: Optional[str] = None,
    secondary_color: Optional[str] = None,
) -> str:
    """
    Render the social card for a repository.

    Args:
        metadata: Repository metadata to draw
        variant: Layout to use, as a TemplateVariant or its string id
        include_attribution: Whether to draw the attribution line
        primary_color: Background color override, embedded verbatim
        secondary_color: Accent color override, embedded verbatim

    Returns:
        The SVG document as a string

    Raises:
        UnknownTemplateVariant: If the variant id is not recognised
    """
    resolved = TemplateVariant.parse(variant)
    builder = _BUILDERS[resolved]
    document = builder(metadata, include_attribution, primary_color, secondary_color)
    logger.debug("Rendered %s card for %s", resolved.value, metadata.full_name)
    return svg.serialize(document)


def badge_width(topic: str) -> int:
    return len(topic) * BADGE_CHAR_WIDTH + BADGE_PADDING


def topic_badges(
    topics: Sequence[str],
    max_topics: int = MAX_TOPICS,
    badge_fill: str = "#30363d",
    label_fill: str = "#8b949e",
    overflow_fill: str = "#6e7681",
) -> List[svg.Element]:
    """
    Pack topic badges left to right.

    Each badge is ``len(topic) * 8 + 20`` wide and the next one starts a
    10-unit gutter after it. Topics past ``max_topics`` collapse into a
    single "+N more" label at the next offset.
    """
    badges: List[svg.Element] = []
    x_offset = 0
    for topic in topics[:max_topics]:
        width = badge_width(topic)
        badges.append(group(
            el("rect", width=width, height=BADGE_HEIGHT, rx=BADGE_HEIGHT // 2, fill=badge_fill),
            text(topic, 12, label_fill, x=width // 2, y=19, text_anchor="middle"),
            transform=translate(x_offset, 0),
        ))
        x_offset += width + BADGE_GUTTER

    if len(topics) > max_topics:
        badges.append(group(
            text(f"+{len(topics) - max_topics} more", 12, overflow_fill, y=19),
            transform=translate(x_offset, 0),
        ))
    return badges


def _frogprints(opacity: str, fill: Optional[str] = None) -> svg.Element:
    return group(
        el("circle", cx=1140, cy=600, r=4),
        el("circle", cx=1152, cy=608, r=3),
        el("circle", cx=1160, cy=598, r=3),
        opacity=opacity,
        fill=fill,
    )


def _attribution(y: int, font_size: int, fill: str) -> svg.Element:
    return text(ATTRIBUTION_TEXT, font_size, fill, x=CANVAS_WIDTH // 2, y=y, text_anchor="middle")


def _description(metadata: RepositoryMetadata, budget: int) -> str:
    return truncate(metadata.description or NO_DESCRIPTION, budget)


def _build_modern(
    metadata: RepositoryMetadata,
    include_attribution: bool,
    primary_color: Optional[str],
    secondary_color: Optional[str],
) -> svg.SvgDocument:
    """Dark card with avatar initial, icon stats, topic badges and URL footer."""
    primary = primary_color or "#0d1117"
    secondary = secondary_color or "#161b22"
    login = metadata.owner.login
    initial = login[:1].upper() or "?"

    doc = svg.SvgDocument(CANVAS_WIDTH, CANVAS_HEIGHT)
    doc.defs.append(el("clipPath", el("circle", cx=80, cy=80, r=40), id="avatar-clip"))
    doc.defs.append(el(
        "filter",
        el("feDropShadow", dx=0, dy=4, stdDeviation=8, flood_opacity="0.25"),
        id="shadow", x="-20%", y="-20%", width="140%", height="140%",
    ))

    doc.section(
        "Background",
        el("rect", width=CANVAS_WIDTH, height=CANVAS_HEIGHT, fill=primary),
        el("rect", x=40, y=40, width=1120, height=550, rx=16, fill=secondary, filter="url(#shadow)"),
    )
    doc.section("Frogprints Easter Egg", _frogprints("0.03"))
    doc.section("Header", group(
        el("circle", cx=40, cy=40, r=40, fill="#30363d"),
        text(initial, 24, "#8b949e", x=40, y=48, text_anchor="middle"),
        text(login, 32, "#f0f6fc", x=100, y=30, font_weight="bold"),
        text(f"/ {metadata.name}", 28, "#8b949e", x=100, y=65),
        transform=translate(80, 80),
    ))
    doc.section("Description", text(_description(metadata, 100), 20, "#c9d1d9", x=80, y=200))
    doc.section("Stats", group(
        group(
            el("path", d=STAR_ICON, fill="#f0f6fc", transform="scale(1.2)"),
            el("path", d=STAR_INNER_ICON, fill="#f0f6fc", transform="scale(1.2)"),
            text(format_count(metadata.stargazers_count), 16, "#f0f6fc", x=28, y=14),
            transform=translate(0, 0),
        ),
        group(
            el("path", d=FORK_ICON, fill="#f0f6fc", transform="scale(1.2)"),
            text(format_count(metadata.forks_count), 16, "#f0f6fc", x=28, y=14),
            transform=translate(120, 0),
        ),
        group(
            el("circle", cx=8, cy=8, r=6, fill=language_color(metadata.language)),
            text(metadata.language or UNKNOWN_LANGUAGE, 16, "#f0f6fc", x=24, y=14),
            transform=translate(240, 0),
        ),
        transform=translate(80, 280),
    ))
    doc.section("Topics", group(*topic_badges(metadata.topics), transform=translate(80, 360)))
    doc.section("Footer", group(
        text(metadata.html_url, 14, "#6e7681"),
        transform=translate(80, 520),
    ))
    if include_attribution:
        doc.section("Attribution", group(
            _attribution(y=40, font_size=10, fill="#6e7681"),
            transform=translate(0, 570),
        ))
    return doc


def _build_minimal(
    metadata: RepositoryMetadata,
    include_attribution: bool,
    primary_color: Optional[str],
    secondary_color: Optional[str],
) -> svg.SvgDocument:
    """Light, text-first card. The secondary color is not used."""
    primary = primary_color or "#ffffff"
    bold = {"font_weight": "bold", "fill": "#111827"}

    doc = svg.SvgDocument(CANVAS_WIDTH, CANVAS_HEIGHT)
    doc.section("Background", el("rect", width=CANVAS_WIDTH, height=CANVAS_HEIGHT, fill=primary))
    doc.section("Frogprints Easter Egg", _frogprints("0.025", fill="#000000"))
    doc.section("Content", group(
        el(
            "text",
            el("tspan", metadata.owner.login, fill="#6b7280"),
            el("tspan", f" / {metadata.name}", fill="#111827"),
            font_size=48, font_weight="bold", fill="#111827", font_family=svg.FONT_FAMILY,
        ),
        text(_description(metadata, 80), 24, "#4b5563", y=80),
        group(
            el(
                "text",
                el("tspan", format_count(metadata.stargazers_count), **bold),
                " stars ",
                el("tspan", format_count(metadata.forks_count), dx=40, **bold),
                " forks ",
                el("tspan", format_count(metadata.open_issues_count), dx=40, **bold),
                " issues",
                font_size=20, fill="#6b7280", font_family=svg.FONT_FAMILY,
            ),
            transform=translate(0, 160),
        ),
        group(
            el("rect", width=120, height=32, rx=16, fill="#f3f4f6"),
            el("circle", cx=20, cy=16, r=6, fill=language_color(metadata.language)),
            text(metadata.language or UNKNOWN_LANGUAGE, 14, "#374151", x=36, y=21),
            transform=translate(0, 220),
        ),
        transform=translate(100, 180),
    ))
    if include_attribution:
        doc.section("Attribution", _attribution(y=600, font_size=11, fill="#9ca3af"))
    return doc


def _build_gradient(
    metadata: RepositoryMetadata,
    include_attribution: bool,
    primary_color: Optional[str],
    secondary_color: Optional[str],
) -> svg.SvgDocument:
    """Diagonal gradient with a glass content card and pill-shaped stats."""
    primary = primary_color or "#667eea"
    secondary = secondary_color or "#764ba2"
    glass = "rgba(255,255,255,0.2)"
    lang_color = language_color(metadata.language) if metadata.language else "#ffffff"
    license_name = metadata.license.name if metadata.license else "No License"

    doc = svg.SvgDocument(CANVAS_WIDTH, CANVAS_HEIGHT)
    doc.defs.append(el(
        "linearGradient",
        el("stop", offset="0%", style=f"stop-color:{primary};stop-opacity:1"),
        el("stop", offset="100%", style=f"stop-color:{secondary};stop-opacity:1"),
        id="bg-gradient", x1="0%", y1="0%", x2="100%", y2="100%",
    ))
    doc.defs.append(el(
        "filter",
        el("feGaussianBlur", stdDeviation=2, result="coloredBlur"),
        el("feMerge", el("feMergeNode", in_="coloredBlur"), el("feMergeNode", in_="SourceGraphic")),
        id="glow", x="-20%", y="-20%", width="140%", height="140%",
    ))

    def pill(label: str, width: int, x: int, dot: Optional[str] = None) -> svg.Element:
        if dot is None:
            label_node = text(label, 16, "#ffffff", x=width // 2, y=27, text_anchor="middle", font_weight="bold")
        else:
            label_node = text(label, 16, "#ffffff", x=44, y=27, font_weight="bold")
        return group(
            el("rect", width=width, height=40, rx=20, fill=glass),
            el("circle", cx=24, cy=20, r=8, fill=dot) if dot else None,
            label_node,
            transform=translate(x, 0) if x else None,
        )

    doc.section("Gradient Background", el("rect", width=CANVAS_WIDTH, height=CANVAS_HEIGHT, fill="url(#bg-gradient)"))
    doc.section("Frogprints Easter Egg", _frogprints("0.04", fill="#ffffff"))
    doc.section(
        "Decorative Elements",
        el("circle", cx=100, cy=100, r=200, fill="rgba(255,255,255,0.05)"),
        el("circle", cx=1100, cy=530, r=250, fill="rgba(255,255,255,0.05)"),
    )
    doc.section("Content Card", el(
        "rect", x=80, y=120, width=1040, height=400, rx=24,
        fill="rgba(255,255,255,0.1)", stroke=glass, stroke_width=1,
    ))
    doc.section("Content", group(
        text(metadata.full_name, 56, "#ffffff", font_weight="bold", filter="url(#glow)"),
        text(_description(metadata, 70), 22, "rgba(255,255,255,0.9)", y=80),
        group(
            pill(f"★ {format_count(metadata.stargazers_count)}", 100, 0),
            pill(f"⑂ {format_count(metadata.forks_count)}", 100, 120),
            pill(metadata.language or UNKNOWN_LANGUAGE, 140, 240, dot=lang_color),
            transform=translate(0, 160),
        ),
        group(
            text(f"{license_name} • Updated {metadata.updated_date}", 14, "rgba(255,255,255,0.7)"),
            transform=translate(0, 230),
        ),
        transform=translate(140, 180),
    ))
    if include_attribution:
        doc.section("Attribution", _attribution(y=600, font_size=11, fill="rgba(255,255,255,0.7)"))
    return doc


_BUILDERS: Dict[TemplateVariant, Callable[..., svg.SvgDocument]] = {
    TemplateVariant.MODERN: _build_modern,
    TemplateVariant.MINIMAL: _build_minimal,
    TemplateVariant.GRADIENT: _build_gradient,
}
