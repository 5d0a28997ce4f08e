"""
Formatting helpers shared by the card templates and markdown generators.

All functions here are pure and total: they never raise on string or
integer input.
"""

from types import MappingProxyType
from typing import Mapping, Optional

ATTRIBUTION_TEXT = "Generated with RepoCard Studio — LAZYFROG (KZ) — kindware.dev"
CARD_SIGNATURE = "<!-- KZ: LAZYFROG :: frogprints -->"
README_SIGNATURE = "<!-- KZ signature: LAZYFROG -->"

DEFAULT_LANGUAGE_COLOR = "#6e7681"

# Keys are lower-case; aliases share a color.
LANGUAGE_COLORS: Mapping[str, str] = MappingProxyType({
    "javascript": "#f1e05a",
    "typescript": "#3178c6",
    "python": "#3572A5",
    "rust": "#dea584",
    "go": "#00ADD8",
    "java": "#b07219",
    "c++": "#f34b7d",
    "cpp": "#f34b7d",
    "c#": "#178600",
    "csharp": "#178600",
    "ruby": "#701516",
    "php": "#4F5D95",
    "swift": "#F05138",
    "kotlin": "#A97BFF",
    "dart": "#00B4AB",
    "vue": "#41b883",
    "html": "#e34c26",
    "css": "#563d7c",
    "shell": "#89e051",
    "bash": "#89e051",
    "c": "#555555",
})

_MARKUP_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def format_count(count: int) -> str:
    """
    Abbreviate a counter for display.

    Examples:
        999 -> "999", 1500 -> "1.5K", 1_000_000 -> "1.0M"
    """
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K"
    return str(count)


def escape_markup(text: str) -> str:
    """Escape the five XML special characters, ampersand first."""
    for raw, entity in _MARKUP_ESCAPES:
        text = text.replace(raw, entity)
    return text


def truncate(text: str, max_len: int) -> str:
    """
    Shorten ``text`` to at most ``max_len`` UTF-8 bytes, ending in "...".

    Length is measured in encoded bytes. A multi-byte character that would be
    split by the cut is dropped whole, so the result is always valid text.
    """
    encoded = text.encode("utf-8", errors="surrogatepass")
    if len(encoded) <= max_len:
        return text
    if max_len < 3:
        return "..."[:max(max_len, 0)]
    head = encoded[:max_len - 3].decode("utf-8", errors="ignore")
    return f"{head}..."


def encodable(text: str) -> str:
    """
    Replace lone surrogates with U+FFFD so ``text`` encodes as UTF-8.

    Surrogate pairs held as two code points are joined into one character.
    """
    return text.encode("utf-16-le", errors="surrogatepass").decode("utf-16-le", errors="replace")


def language_color(language: Optional[str]) -> str:
    """Return the palette color for a language, or the neutral gray."""
    if not language:
        return DEFAULT_LANGUAGE_COLOR
    return LANGUAGE_COLORS.get(language.lower(), DEFAULT_LANGUAGE_COLOR)
