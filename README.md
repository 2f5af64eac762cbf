# cmark-writer

You build a CommonMark document as a tree of Python objects. This package
turns that tree into CommonMark text.

## Installation

```
pip install .
```

## Building a document

Every node type is a dataclass in `cmark_writer.ast`. They all derive from
`Node`.

| Node | Fields |
| --- | --- |
| `Document` | `children` |
| `Heading` | `level`, `content` |
| `Paragraph` | `content` |
| `BlockQuote` | `content` |
| `CodeBlock` | `content`, `language=None` |
| `UnorderedList` | `items` |
| `OrderedList` | `items`, `start=1` |
| `ThematicBreak` | none |
| `Table` | `headers`, `rows`, `alignments` |
| `Link` | `url`, `content`, `title=None` |
| `Image` | `url`, `alt=""`, `title=None` |
| `Emphasis` | `content` |
| `Strong` | `content` |
| `InlineCode` | `content` |
| `Text` | `content` |
| `Html` | `content` |
| `SoftBreak` | none |
| `HardBreak` | none |

List entries are `ListItem(content, is_task=False, task_completed=False)`
objects. A task item is written as `[ ] ` when unchecked and `[x] ` when
checked.

Table columns are aligned with the `Alignment` enum. Its members and the
delimiter cell each one produces:

| Member | Delimiter cell |
| --- | --- |
| `NONE` | `---` |
| `LEFT` | `:---` |
| `CENTER` | `:---:` |
| `RIGHT` | `---:` |

Nodes compare equal when their fields are equal. Calling `str(node)` returns
the node's CommonMark text, written with the default options.

## Writing it out

The `cmark_writer.writer` module provides `CommonMarkWriter`, `WriterOptions`,
`WriterError` and `render`.

- `CommonMarkWriter(options=None)` creates a writer.
- `CommonMarkWriter.write(node)` appends a node's text to the writer's output.
- `CommonMarkWriter.into_string()` returns the text written so far. `str(writer)`
  returns the same text.
- `render(node, options=None)` writes one node and returns its text.

`WriterOptions` is a dataclass with three settings:

| Setting | Default | Effect |
| --- | --- | --- |
| `hard_break_spaces` | `True` | When true, a `HardBreak` is written as two spaces and a newline. When false, it is written as a backslash and a newline. |
| `indent_spaces` | `4` | The number of spaces per nesting level, used for nested lists and continuation lines. |
| `strict` | `True` | Stored with the options. It does not change the output. |

### Output rules

- Document children are separated by a blank line.
- A heading's inline children are joined by single spaces, except after a
  `SoftBreak` or `HardBreak`.
- Consecutive inline nodes in a paragraph or list item are joined directly.
  The inline nodes are `Text`, `Emphasis`, `Strong`, `InlineCode`, `Link` and
  `Image`. Any other child starts on a new, indented line.
- Code blocks are fenced with three backticks. A trailing newline is added to
  the content if it has none.
- Plain text is escaped. A backslash, `*`, `_`, `[`, `]`, `<`, `>` or `` ` ``
  gets a backslash in front of it.
- `Html` and `InlineCode` content is written verbatim.

### Errors

- A heading level outside 1–6 raises `WriterError`, a subclass of `ValueError`.
- Passing an object that is not a node raises `TypeError`.

## Example

```python
from cmark_writer.ast import Document, Heading, Paragraph, Strong, Text
from cmark_writer.writer import CommonMarkWriter, WriterOptions, render

doc = Document([
    Heading(1, [Text("Title")]),
    Paragraph([
        Text("Regular text "),
        Strong([Text("bold text")]),
        Text(" regular text"),
    ]),
])

writer = CommonMarkWriter()
writer.write(doc)
print(writer.into_string())
# # Title
#
# Regular text **bold text** regular text

print(render(doc, WriterOptions(hard_break_spaces=False)))
```

## What it does not do

The package only writes CommonMark. It does not parse Markdown text into a
tree, and it has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```