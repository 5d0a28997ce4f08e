"""
Structured SVG document builder.

Card templates assemble a small tree of :class:`Element`, :class:`Text` and
:class:`Comment` nodes; :func:`serialize` is the only place that turns the
tree into markup. Every text node and attribute value is escaped there, so
a template cannot embed an unescaped user field by accident.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

from .formatting import CARD_SIGNATURE, escape_markup

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
FONT_FAMILY = "system-ui, -apple-system, sans-serif"

# Children of these elements are written on one line so that whitespace
# does not leak into rendered text.
INLINE_TAGS = frozenset({"text", "tspan"})


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = ()


Node = Union[Element, Text, Comment]


def el(tag: str, *children: Union[Node, str, None], **attrs) -> Element:
    """
    Build an element. Keyword names map to attributes with ``_`` turned into
    ``-`` (``font_size`` -> ``font-size``); a trailing ``_`` is dropped.
    ``None`` attributes and ``None`` children are skipped; plain strings
    become text nodes.
    """
    pairs = tuple(
        (_attr_name(name), _attr_value(value))
        for name, value in attrs.items()
        if value is not None
    )
    nodes = tuple(
        Text(child) if isinstance(child, str) else child
        for child in children
        if child is not None
    )
    return Element(tag, pairs, nodes)


def text(content: str, font_size, fill: str, **attrs) -> Element:
    """A ``<text>`` element in the card font."""
    return el("text", content, font_size=font_size, fill=fill, font_family=FONT_FAMILY, **attrs)


def group(*children: Union[Node, None], **attrs) -> Element:
    return el("g", *children, **attrs)


def translate(x, y) -> str:
    return f"translate({x}, {y})"


@dataclass
class SvgDocument:
    """A fixed-size SVG canvas with its ``<defs>`` and body nodes."""
    width: int
    height: int
    defs: List[Element] = field(default_factory=list)
    body: List[Node] = field(default_factory=list)

    def add(self, *nodes: Union[Node, None]) -> "SvgDocument":
        self.body.extend(node for node in nodes if node is not None)
        return self

    def section(self, label: str, *nodes: Union[Node, None]) -> "SvgDocument":
        """Append a labelled block: a comment followed by its nodes."""
        self.body.append(Comment(label))
        return self.add(*nodes)

    def to_element(self) -> Element:
        children: List[Node] = []
        if self.defs:
            children.append(Element("defs", (), tuple(self.defs)))
        children.extend(self.body)
        return el(
            "svg",
            *children,
            width=self.width,
            height=self.height,
            viewBox=f"0 0 {self.width} {self.height}",
            xmlns=SVG_NAMESPACE,
        )


def serialize(document: SvgDocument) -> str:
    """Write the document as markup, preceded by the card signature line."""
    lines = [CARD_SIGNATURE]
    _write(document.to_element(), 0, lines)
    return "\n".join(lines)


def _write(node: Node, depth: int, lines: List[str]) -> None:
    indent = "  " * depth
    if isinstance(node, Element) and node.children and node.tag not in INLINE_TAGS:
        lines.append(f"{indent}<{node.tag}{_format_attrs(node.attrs)}>")
        for child in node.children:
            _write(child, depth + 1, lines)
        lines.append(f"{indent}</{node.tag}>")
    else:
        lines.append(indent + _inline(node))


def _inline(node: Node) -> str:
    if isinstance(node, Text):
        return escape_markup(node.content)
    if isinstance(node, Comment):
        return f"<!-- {node.content} -->"
    attrs = _format_attrs(node.attrs)
    if not node.children:
        return f"<{node.tag}{attrs}/>"
    inner = "".join(_inline(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def _format_attrs(attrs: Sequence[Tuple[str, str]]) -> str:
    return "".join(f' {name}="{escape_markup(value)}"' for name, value in attrs)


def _attr_name(name: str) -> str:
    return name.rstrip("_").replace("_", "-")


def _attr_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
