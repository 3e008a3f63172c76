from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .model import (
    Blockquote,
    Body,
    Bold,
    Code,
    CodeBlock,
    CodeLang,
    Document,
    Heading,
    HeadingLevel,
    Italic,
    List,
    ListItem,
    ListKind,
    Meta,
    Paragraph,
    Text,
    ThematicBreak,
)

logger = logging.getLogger(__name__)

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
INLINE_TAGS = {"a", "code", "em", "strong", "i", "b"}
EMPHASIS_TYPES = {
    "em": Italic,
    "i": Italic,
    "strong": Bold,
    "b": Bold,
    "code": Code,
}


class ConversionError(RuntimeError):
    """Raised when the converter's own mode bookkeeping is broken."""


class ModeKind(Enum):
    BLOCKS = "blocks"
    INLINES = "inlines"
    LIST_ITEMS = "list items"


@dataclass
class Mode:
    """An accumulation frame: what the enclosing construct is collecting."""

    kind: ModeKind
    items: list = field(default_factory=list)


def convert(tree: Tag, origin_url: str, *, wrap_root_inlines: bool = False) -> Document:
    body = body_from_tree(tree, wrap_root_inlines=wrap_root_inlines)
    return Document(meta=Meta(origin_url=origin_url), body=body)


def body_from_tree(tree: Tag, *, wrap_root_inlines: bool = False) -> Body:
    """Walk a parsed tree and return its top-level blocks.

    The root collects blocks but, unless ``wrap_root_inlines`` is set, does not
    regroup loose inline content into paragraphs: bare text or emphasis sitting
    directly at the root is dropped. When a whole page is passed in, the
    regrouping applies to the children of its ``<body>``.
    """
    mode = Mode(ModeKind.BLOCKS)
    if wrap_root_inlines:
        _walk_block_children(_content_root(tree), mode)
    else:
        _walk(tree, mode)
    _expect(mode, ModeKind.BLOCKS)
    logger.debug("Converted tree into %d top-level blocks", len(mode.items))
    return Body(blocks=tuple(mode.items))


def _content_root(tree: Tag) -> Tag:
    if tree.name in ("[document]", "html"):
        body = tree.find("body")
        if body is not None:
            return body
    return tree


def _expect(mode: Mode, kind: ModeKind) -> None:
    if mode.kind is not kind:
        raise ConversionError(f"expected {kind.value} mode, found {mode.kind.value}")


def _collect(node: Tag, kind: ModeKind, walker: Callable[[Tag, Mode], None] | None = None) -> tuple:
    """Walk ``node``'s children into a fresh frame of ``kind`` and return what it gathered."""
    mode = Mode(kind)
    (walker or _walk_children)(node, mode)
    _expect(mode, kind)
    return tuple(mode.items)


def _walk(node: PageElement, mode: Mode) -> None:
    if isinstance(node, NavigableString):
        if not isinstance(node, PreformattedString):
            _handle_text(node, mode)
        return
    if not isinstance(node, Tag):
        return

    name = node.name
    if name == "p":
        _handle_paragraph(node, mode)
    elif name in HEADING_TAGS:
        _handle_heading(node, mode, name)
    elif name == "ol":
        _handle_list(node, mode, ListKind.ORDERED)
    elif name == "ul":
        _handle_list(node, mode, ListKind.UNORDERED)
    elif name == "li":
        _handle_list_item(node, mode)
    elif name == "blockquote":
        _handle_blockquote(node, mode)
    elif name == "hr":
        _handle_thematic_break(node, mode)
    elif name == "pre":
        _handle_pre(node, mode)
    elif name in EMPHASIS_TYPES:
        _handle_emphasis(node, mode, name)
    else:
        # div is transparent for now, like any unrecognized element
        _walk_children(node, mode)


def _walk_children(node: Tag, mode: Mode) -> None:
    for child in node.children:
        _walk(child, mode)


def _walk_block_children(node: Tag, mode: Mode) -> None:
    """Walk the children of a block-only container, wrapping loose inlines.

    HTML lets list items, blockquotes and the root hold text and inline
    elements directly, while the model only allows blocks there. Runs of
    inline-bearing children are gathered and emitted as a paragraph that has
    no counterpart in the source.
    """
    _expect(mode, ModeKind.BLOCKS)
    pending: list = []

    for child in node.children:
        if _is_inline_bearing(child):
            pending.extend(_collect_single(child))
        elif isinstance(child, Tag):
            if pending:
                mode.items.append(Paragraph(inlines=tuple(pending)))
                pending = []
            _walk(child, mode)

    if pending:
        mode.items.append(Paragraph(inlines=tuple(pending)))


def _collect_single(node: PageElement) -> list:
    mode = Mode(ModeKind.INLINES)
    _walk(node, mode)
    _expect(mode, ModeKind.INLINES)
    return mode.items


def _is_inline_bearing(node: PageElement) -> bool:
    if isinstance(node, Tag):
        return node.name in INLINE_TAGS
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return bool(node.strip())
    return False


def _mismatch(node: Tag, mode: Mode) -> None:
    logger.debug("Dropping <%s> wrapper in %s mode", node.name, mode.kind.value)
    _walk_children(node, mode)


def _handle_text(node: NavigableString, mode: Mode) -> None:
    if mode.kind is ModeKind.INLINES:
        mode.items.append(Text(str(node)))
    elif node.strip():
        logger.debug("Dropping text outside inline context: %r", str(node)[:40])


def _handle_paragraph(node: Tag, mode: Mode) -> None:
    if mode.kind is not ModeKind.BLOCKS:
        _mismatch(node, mode)
        return
    inlines = _collect(node, ModeKind.INLINES)
    mode.items.append(Paragraph(inlines=inlines))


def _handle_heading(node: Tag, mode: Mode, name: str) -> None:
    try:
        level = HeadingLevel(int(name[1:]))
    except ValueError as e:
        raise ConversionError(f"unexpected heading tag {name!r}") from e
    if mode.kind is not ModeKind.BLOCKS:
        _mismatch(node, mode)
        return
    inlines = _collect(node, ModeKind.INLINES)
    mode.items.append(Heading(inlines=inlines, level=level))


def _handle_list(node: Tag, mode: Mode, kind: ListKind) -> None:
    if mode.kind is not ModeKind.BLOCKS:
        _mismatch(node, mode)
        return
    items = _collect(node, ModeKind.LIST_ITEMS)
    mode.items.append(List(kind=kind, items=items))


def _handle_list_item(node: Tag, mode: Mode) -> None:
    if mode.kind is not ModeKind.LIST_ITEMS:
        _mismatch(node, mode)
        return
    blocks = _collect(node, ModeKind.BLOCKS, walker=_walk_block_children)
    mode.items.append(ListItem(blocks=blocks))


def _handle_blockquote(node: Tag, mode: Mode) -> None:
    if mode.kind is not ModeKind.BLOCKS:
        _mismatch(node, mode)
        return
    blocks = _collect(node, ModeKind.BLOCKS, walker=_walk_block_children)
    mode.items.append(Blockquote(blocks=blocks))


def _handle_thematic_break(node: Tag, mode: Mode) -> None:
    if mode.kind is ModeKind.BLOCKS:
        mode.items.append(ThematicBreak())
    else:
        logger.debug("Dropping <hr> in %s mode", mode.kind.value)


def _handle_pre(node: Tag, mode: Mode) -> None:
    if mode.kind is not ModeKind.BLOCKS:
        _mismatch(node, mode)
        return
    inlines = _collect(node, ModeKind.INLINES)
    mode.items.append(CodeBlock(lang=CodeLang.UNKNOWN, inlines=inlines))


def _handle_emphasis(node: Tag, mode: Mode, name: str) -> None:
    if mode.kind is not ModeKind.INLINES:
        _mismatch(node, mode)
        return
    inline_type = EMPHASIS_TYPES[name]
    inlines = _collect(node, ModeKind.INLINES)
    mode.items.append(inline_type(inlines=inlines))
