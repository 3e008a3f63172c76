from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


@dataclass(frozen=True)
class Inline:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class Text(Inline):
    text: str


@dataclass(frozen=True)
class Bold(Inline):
    inlines: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Italic(Inline):
    inlines: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Code(Inline):
    inlines: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


class HeadingLevel(IntEnum):
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6


class ListKind(Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


class CodeLang(Enum):
    UNKNOWN = "unknown"
    RUST = "rust"


@dataclass(frozen=True)
class Heading(Block):
    inlines: Tuple[Inline, ...]
    level: HeadingLevel


@dataclass(frozen=True)
class Paragraph(Block):
    inlines: Tuple[Inline, ...]


@dataclass(frozen=True)
class ListItem:
    blocks: Tuple[Block, ...]


@dataclass(frozen=True)
class List(Block):
    kind: ListKind
    items: Tuple[ListItem, ...]


@dataclass(frozen=True)
class Blockquote(Block):
    blocks: Tuple[Block, ...]


@dataclass(frozen=True)
class ThematicBreak(Block):
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class CodeBlock(Block):
    lang: CodeLang
    inlines: Tuple[Inline, ...]


@dataclass(frozen=True)
class Meta:
    origin_url: str


@dataclass(frozen=True)
class Body:
    blocks: Tuple[Block, ...]


@dataclass(frozen=True)
class Document:
    meta: Meta
    body: Body
