from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag
from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".html", ".htm"}
MARKDOWN_SUFFIXES = {".md", ".markdown"}


def parse_html(text: str) -> BeautifulSoup:
    return BeautifulSoup(text, "html.parser")


def markdown_to_html(text: str) -> str:
    """Render Markdown to an HTML fragment the converter can walk."""
    md = MarkdownIt("commonmark")
    return md.render(text)


def select_content(tree: Tag, selector: str | None = None) -> Tag:
    """Return the sub-tree holding the post content.

    Pages usually wrap the article in navigation and footers; a CSS selector
    narrows the walk to the part worth converting.
    """
    if not selector:
        return tree
    node = tree.select_one(selector)
    if node is None:
        raise ValueError(f"Selector {selector!r} matched nothing")
    return node


def load_tree(path: Path, selector: str | None = None) -> Tag:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in MARKDOWN_SUFFIXES:
        logger.debug("Rendering markdown %s to HTML", path)
        text = markdown_to_html(text)
    elif suffix not in HTML_SUFFIXES:
        raise ValueError(f"Unsupported input type: {path.suffix or path.name}")
    logger.debug("Parsing %s (%d chars)", path, len(text))
    return select_content(parse_html(text), selector)
