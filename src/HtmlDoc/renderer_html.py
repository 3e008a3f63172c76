from __future__ import annotations

from html import escape
from typing import Iterable, Sequence

from .model import (
    Block,
    Blockquote,
    Body,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    Inline,
    Italic,
    List,
    ListItem,
    ListKind,
    Paragraph,
    Text,
    ThematicBreak,
)

INLINE_TAGS = {
    Bold: "strong",
    Italic: "em",
    Code: "code",
}


def render(doc: Document, *, stylesheets: Sequence[str] = (), title: str | None = None) -> str:
    """Render a document as a standalone HTML page."""
    buf: list[str] = []
    buf.append("<!doctype html>\n")
    buf.append("<html lang='en'>\n")
    _render_head(buf, stylesheets, title)
    _render_body(buf, doc.body)
    buf.append("</html>\n")
    return "".join(buf)


def render_blocks(blocks: Iterable[Block]) -> str:
    """Render a block sequence without the surrounding page shell."""
    buf: list[str] = []
    for block in blocks:
        _render_block(buf, block)
    return "".join(buf)


def _render_head(buf: list[str], stylesheets: Sequence[str], title: str | None) -> None:
    buf.append("<head>\n")
    buf.append("  <meta charset='utf-8'>\n")
    if title is not None:
        buf.append(f"  <title>{escape(title)}</title>\n")
    for href in stylesheets:
        buf.append(f"  <link rel='stylesheet' href='{escape(href)}'>\n")
    buf.append("</head>\n")


def _render_body(buf: list[str], body: Body) -> None:
    buf.append("<body>\n<main>\n<article>\n")
    for block in body.blocks:
        _render_block(buf, block)
    buf.append("</article>\n</main>\n</body>\n")


def _render_block(buf: list[str], block: Block) -> None:
    if isinstance(block, Heading):
        tag = f"h{int(block.level)}"
        buf.append(f"<{tag}>")
        _render_inlines(buf, block.inlines)
        buf.append(f"</{tag}>\n")
    elif isinstance(block, Paragraph):
        buf.append("<p>")
        _render_inlines(buf, block.inlines)
        buf.append("</p>\n")
    elif isinstance(block, List):
        _render_list(buf, block)
    elif isinstance(block, Blockquote):
        buf.append("<blockquote>\n")
        for child in block.blocks:
            _render_block(buf, child)
        buf.append("</blockquote>\n")
    elif isinstance(block, ThematicBreak):
        buf.append("<hr/>\n")
    elif isinstance(block, CodeBlock):
        buf.append("<pre><code>")
        _render_inlines(buf, block.inlines)
        buf.append("</code></pre>\n")
    else:
        raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _render_list(buf: list[str], block: List) -> None:
    tag = "ol" if block.kind is ListKind.ORDERED else "ul"
    buf.append(f"<{tag}>\n")
    for item in block.items:
        _render_list_item(buf, item)
    buf.append(f"</{tag}>\n")


def _render_list_item(buf: list[str], item: ListItem) -> None:
    buf.append("<li>\n")
    for child in item.blocks:
        _render_block(buf, child)
    buf.append("</li>\n")


def _render_inlines(buf: list[str], inlines: Iterable[Inline]) -> None:
    for inline in inlines:
        if isinstance(inline, Text):
            buf.append(escape(inline.text))
            continue
        tag = INLINE_TAGS.get(type(inline))
        if tag is None:
            raise TypeError(f"Unsupported inline type: {type(inline).__name__}")
        buf.append(f"<{tag}>")
        _render_inlines(buf, inline.inlines)
        buf.append(f"</{tag}>")
