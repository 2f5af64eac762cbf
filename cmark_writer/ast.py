"""Node types describing a CommonMark document tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional


class Alignment(enum.Enum):
    """Column alignment of a table."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Node:
    """Base class of every document node."""

    def __str__(self) -> str:
        from cmark_writer.writer import render

        return render(self)


@dataclass(eq=True)
class ListItem:
    """One item of an ordered or unordered list."""

    content: List[Node] = field(default_factory=list)
    is_task: bool = False
    task_completed: bool = False


@dataclass(eq=True)
class Document(Node):
    """Root of a document, holding block-level children."""

    children: List[Node] = field(default_factory=list)


@dataclass(eq=True)
class Heading(Node):
    """ATX heading of level 1 to 6 with inline content."""

    level: int
    content: List[Node] = field(default_factory=list)


@dataclass(eq=True)
class Paragraph(Node):
    """Paragraph of inline elements."""

    content: List[Node] = field(default_factory=list)


@dataclass(eq=True)
class BlockQuote(Node):
    """Block quote holding block-level elements."""

    content: List[Node] = field(default_factory=list)


@dataclass(eq=True)
class CodeBlock(Node):
    """Fenced code block with an optional language tag."""

    content: str
    language: Optional[str] = None


@dataclass(eq=True)
class UnorderedList(Node):
    """Bulleted list."""

    items: List[ListItem] = field(default_factory=list)


@dataclass(eq=True)
class OrderedList(Node):
    """Numbered list starting at ``start``."""

    items: List[ListItem] = field(default_factory=list)
    start: int = 1


@dataclass(eq=True)
class ThematicBreak(Node):
    """Horizontal rule."""


@dataclass(eq=True)
class Table(Node):
    """Pipe table with a header row, body rows and column alignments."""

    headers: List[Node] = field(default_factory=list)
    rows: List[List[Node]] = field(default_factory=list)
    alignments: List[Alignment] = field(default_factory=list)


@dataclass(eq=True)
class Link(Node):
    """Inline link."""

    url: str
    content: List[Node] = field(default_factory=list)
    title: Optional[str] = None


@dataclass(eq=True)
class Image(Node):
    """Inline image."""

    url: str
    alt: str = ""
    title: Optional[str] = None


@dataclass(eq=True)
class Emphasis(Node):
    """Emphasised (italic) inline content."""

    content: List[Node] = field(default_factory=list)


@dataclass(eq=True)
class Strong(Node):
    """Strongly emphasised (bold) inline content."""

    content: List[Node] = field(default_factory=list)


@dataclass(eq=True)
class InlineCode(Node):
    """Code span."""

    content: str


@dataclass(eq=True)
class Text(Node):
    """Plain text, escaped on output."""

    content: str


@dataclass(eq=True)
class Html(Node):
    """Raw HTML, written verbatim."""

    content: str


@dataclass(eq=True)
class SoftBreak(Node):
    """Soft line break."""


@dataclass(eq=True)
class HardBreak(Node):
    """Hard line break."""