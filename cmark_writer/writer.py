"""Serialisation of document trees to CommonMark text."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from cmark_writer.ast import (
    Alignment,
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    HardBreak,
    Heading,
    Html,
    Image,
    InlineCode,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    SoftBreak,
    Strong,
    Table,
    Text,
    ThematicBreak,
    UnorderedList,
)

_INLINE_TYPES = (Text, Emphasis, Strong, InlineCode, Link, Image)
_BREAK_TYPES = (SoftBreak, HardBreak)
_LIST_TYPES = (OrderedList, UnorderedList)

_ALIGNMENT_CELLS = {
    Alignment.NONE: " --- |",
    Alignment.LEFT: " :--- |",
    Alignment.CENTER: " :---: |",
    Alignment.RIGHT: " ---: |",
}

_TEXT_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "*": "\\*",
        "_": "\\_",
        "[": "\\[",
        "]": "\\]",
        "<": "\\<",
        ">": "\\>",
        "`": "\\`",
    }
)


class WriterError(ValueError):
    """Raised when a node cannot be written as CommonMark."""


@dataclass
class WriterOptions:
    """Formatting options for :class:`CommonMarkWriter`."""

    strict: bool = True
    hard_break_spaces: bool = True
    indent_spaces: int = 4


class CommonMarkWriter:
    """Accumulates CommonMark text for the nodes written to it."""

    def __init__(self, options: Optional[WriterOptions] = None) -> None:
        self.options = options if options is not None else WriterOptions()
        self._parts: List[str] = []
        self._indent_level = 0

    def write(self, node: Node) -> None:
        """Append the CommonMark form of ``node``."""
        match node:
            case Document(children=children):
                self._write_document(children)
            case Heading(level=level, content=content):
                self._write_heading(level, content)
            case Paragraph(content=content):
                self._write_paragraph(content)
            case BlockQuote(content=content):
                self._write_blockquote(content)
            case CodeBlock(content=content, language=language):
                self._write_code_block(language, content)
            case UnorderedList(items=items):
                self._write_list(items, lambda _: "- ")
            case OrderedList(items=items, start=start):
                self._write_list(items, lambda i: f"{start + i}. ")
            case ThematicBreak():
                self._emit("---")
            case Table(headers=headers, rows=rows, alignments=alignments):
                self._write_table(headers, rows, alignments)
            case Link(url=url, content=content, title=title):
                self._emit("[")
                self._write_all(content)
                self._emit("](", url)
                self._write_title(title)
                self._emit(")")
            case Image(url=url, alt=alt, title=title):
                self._emit("![", alt, "](", url)
                self._write_title(title)
                self._emit(")")
            case Emphasis(content=content):
                self._emit("*")
                self._write_all(content)
                self._emit("*")
            case Strong(content=content):
                self._emit("**")
                self._write_all(content)
                self._emit("**")
            case InlineCode(content=content):
                self._emit("`", content, "`")
            case Text(content=content):
                self._emit(content.translate(_TEXT_ESCAPES))
            case Html(content=content):
                self._emit(content)
            case SoftBreak():
                self._emit("\n")
            case HardBreak():
                self._emit("  \n" if self.options.hard_break_spaces else "\\\n")
            case _:
                raise TypeError(f"cannot write object of type {type(node).__name__}")

    def into_string(self) -> str:
        """Return the text written so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.into_string()

    def _emit(self, *texts: str) -> None:
        self._parts.extend(texts)

    def _indent(self, extra: int = 0) -> str:
        return " " * (self._indent_level * self.options.indent_spaces + extra)

    @contextmanager
    def _nested(self) -> Iterator[None]:
        self._indent_level += 1
        try:
            yield
        finally:
            self._indent_level -= 1

    def _write_all(self, nodes: Sequence[Node]) -> None:
        for node in nodes:
            self.write(node)

    def _write_title(self, title: Optional[str]) -> None:
        if title is not None:
            self._emit(' "', title, '"')

    def _write_document(self, children: Sequence[Node]) -> None:
        for i, child in enumerate(children):
            if i:
                self._emit("\n\n")
            self.write(child)

    def _write_heading(self, level: int, content: Sequence[Node]) -> None:
        if not 1 <= level <= 6:
            raise WriterError(f"heading level must be between 1 and 6, got {level}")
        self._emit("#" * level, " ")
        last = len(content) - 1
        for i, node in enumerate(content):
            self.write(node)
            if i < last and not isinstance(node, _BREAK_TYPES):
                self._emit(" ")

    def _write_paragraph(self, content: Sequence[Node]) -> None:
        prev_is_inline = False
        for i, node in enumerate(content):
            is_inline = isinstance(node, _INLINE_TYPES)
            if i > 0 and not (prev_is_inline and is_inline):
                self._emit("\n", self._indent())
            self.write(node)
            prev_is_inline = is_inline

    def _write_blockquote(self, content: Sequence[Node]) -> None:
        with self._nested():
            for i, node in enumerate(content):
                if i:
                    self._emit("\n> \n")
                self._emit("> ")
                self.write(node)

    def _write_code_block(self, language: Optional[str], content: str) -> None:
        self._emit("```", language or "", "\n", content)
        if not content.endswith("\n"):
            self._emit("\n")
        self._emit("```")

    def _write_list(self, items: Sequence[ListItem], prefix_for) -> None:
        for i, item in enumerate(items):
            if i:
                self._emit("\n")
            self._write_list_item(item, prefix_for(i))

    def _write_list_item(self, item: ListItem, prefix: str) -> None:
        self._emit(self._indent(), prefix)
        if item.is_task:
            self._emit("[x] " if item.task_completed else "[ ] ")

        continuation = len(prefix) + (4 if item.is_task else 0)
        with self._nested():
            prev_is_inline = False
            for i, node in enumerate(item.content):
                if isinstance(node, _LIST_TYPES):
                    if i:
                        self._emit("\n")
                    self.write(node)
                    prev_is_inline = False
                    continue

                is_inline = isinstance(node, _INLINE_TYPES)
                if i > 0 and not (prev_is_inline and is_inline):
                    self._emit("\n", self._indent(continuation))
                self.write(node)
                prev_is_inline = is_inline

    def _write_table(
        self,
        headers: Sequence[Node],
        rows: Sequence[Sequence[Node]],
        alignments: Sequence[Alignment],
    ) -> None:
        self._write_row(headers)
        self._emit("|", *(_ALIGNMENT_CELLS[a] for a in alignments), "\n")
        for row in rows:
            self._write_row(row)

    def _write_row(self, cells: Sequence[Node]) -> None:
        self._emit("|")
        for cell in cells:
            self._emit(" ")
            self.write(cell)
            self._emit(" |")
        self._emit("\n")


def render(node: Node, options: Optional[WriterOptions] = None) -> str:
    """Return the CommonMark text for ``node``."""
    writer = CommonMarkWriter(options)
    writer.write(node)
    return writer.into_string()