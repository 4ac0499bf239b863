"""
Document Nodes

Layout primitives of the document-content tree handed to the PDF renderer.

Each node kind is its own frozen dataclass with a to_dict() that emits the
renderer's wire format. Child sequences are tuples so a compiled tree cannot
be mutated after it is returned.
"""

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

Margin = Union[Tuple[float, float, float, float], Tuple[float, float], float]


def _margin_to_wire(margin: Optional[Margin]) -> Any:
    if margin is None or isinstance(margin, (int, float)):
        return margin
    return list(margin)


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class TextRun:
    """Styled inline run inside a TextNode."""

    text: str
    bold: Optional[bool] = None
    italics: Optional[bool] = None
    color: Optional[str] = None
    link: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "text": self.text,
                "bold": self.bold,
                "italics": self.italics,
                "color": self.color,
                "link": self.link,
            }
        )


InlineText = Union[str, TextRun]


@dataclass(frozen=True)
class TextNode:
    """
    Text paragraph.

    Attributes:
        text: Plain string or a sequence of plain strings and styled runs
        style: Style role name (must exist in the document styles)
        link: Target URL when the whole paragraph is a link
        margin: Renderer margin
    """

    text: Union[str, Tuple[InlineText, ...]]
    style: Optional[str] = None
    link: Optional[str] = None
    margin: Optional[Margin] = None

    @property
    def plain_text(self) -> str:
        """Text content with run styling dropped."""
        if isinstance(self.text, str):
            return self.text
        return "".join(run if isinstance(run, str) else run.text for run in self.text)

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.text, str):
            text: Any = self.text
        else:
            text = [run if isinstance(run, str) else run.to_dict() for run in self.text]
        return _drop_none(
            {
                "text": text,
                "style": self.style,
                "link": self.link,
                "margin": _margin_to_wire(self.margin),
            }
        )


@dataclass(frozen=True)
class ListNode:
    """Bulleted list; each child is rendered as one bullet."""

    items: Tuple["ContentNode", ...]
    margin: Optional[Margin] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {"ul": [item.to_dict() for item in self.items], "margin": _margin_to_wire(self.margin)}
        )


@dataclass(frozen=True)
class TableNode:
    """Table of content nodes. Part of the renderer vocabulary; no builder emits it yet."""

    widths: Tuple[Union[str, float], ...]
    body: Tuple[Tuple["ContentNode", ...], ...]
    layout: Optional[str] = None
    margin: Optional[Margin] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "table": {
                    "widths": list(self.widths),
                    "body": [[cell.to_dict() for cell in row] for row in self.body],
                },
                "layout": self.layout,
                "margin": _margin_to_wire(self.margin),
            }
        )


@dataclass(frozen=True)
class CanvasLine:
    """Straight vector line in canvas coordinates."""

    x1: float
    y1: float
    x2: float
    y2: float
    line_width: Optional[float] = None
    line_color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "type": "line",
                "x1": self.x1,
                "y1": self.y1,
                "x2": self.x2,
                "y2": self.y2,
                "lineWidth": self.line_width,
                "lineColor": self.line_color,
            }
        )


@dataclass(frozen=True)
class CanvasNode:
    """Vector drawing; only used for section divider lines."""

    canvas: Tuple[CanvasLine, ...]
    margin: Optional[Margin] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "canvas": [line.to_dict() for line in self.canvas],
                "margin": _margin_to_wire(self.margin),
            }
        )


@dataclass(frozen=True)
class StackNode:
    """Vertical stack of child nodes."""

    stack: Tuple["ContentNode", ...]
    style: Optional[str] = None
    margin: Optional[Margin] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "stack": [child.to_dict() for child in self.stack],
                "style": self.style,
                "margin": _margin_to_wire(self.margin),
            }
        )


ContentNode = Union[TextNode, ListNode, TableNode, CanvasNode, StackNode]


@dataclass(frozen=True)
class TextStyle:
    """
    Typographic role in the document style sheet.

    Attributes:
        font_size: Size in points
        color: Hex color
        bold: Bold weight
        margin: Renderer margin applied wherever the role is used
        line_height: Line height multiplier
        decoration: Text decoration (e.g. "underline")
    """

    font_size: float
    color: str
    bold: Optional[bool] = None
    margin: Optional[Margin] = None
    line_height: Optional[float] = None
    decoration: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "fontSize": self.font_size,
                "bold": self.bold,
                "color": self.color,
                "lineHeight": self.line_height,
                "decoration": self.decoration,
                "margin": _margin_to_wire(self.margin),
            }
        )


@dataclass(frozen=True)
class DocumentModel:
    """
    Complete document definition for the renderer.

    Attributes:
        styles: Style role name -> TextStyle
        content: Top-level content nodes in render order
        page_size: Paper size name
        page_margins: Left, top, right, bottom page margins in points
    """

    styles: Mapping[str, TextStyle]
    content: Tuple[ContentNode, ...]
    page_size: str = "A4"
    page_margins: Tuple[float, float, float, float] = (40, 42, 40, 42)

    def __post_init__(self):
        object.__setattr__(self, "styles", MappingProxyType(dict(self.styles)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageSize": self.page_size,
            "pageMargins": list(self.page_margins),
            "styles": {name: style.to_dict() for name, style in self.styles.items()},
            "content": [node.to_dict() for node in self.content],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def missing_style_refs(self) -> set:
        """Style roles referenced by content but absent from styles (empty when valid)."""
        referenced = {ref for node in self.content for ref in iter_style_refs(node)}
        return referenced - set(self.styles)


def iter_style_refs(node: ContentNode) -> Iterator[str]:
    """Yield every style role name referenced in the subtree rooted at node."""
    if isinstance(node, (TextNode, StackNode)) and node.style:
        yield node.style
    if isinstance(node, StackNode):
        for child in node.stack:
            yield from iter_style_refs(child)
    elif isinstance(node, ListNode):
        for item in node.items:
            yield from iter_style_refs(item)
    elif isinstance(node, TableNode):
        for row in node.body:
            for cell in row:
                yield from iter_style_refs(cell)
