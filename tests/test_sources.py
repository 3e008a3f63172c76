from pathlib import Path

import pytest

from HtmlDoc import converter, html_source
from HtmlDoc.model import Heading, HeadingLevel, Italic, List, ListItem, ListKind, Paragraph, Text

PAGE = """<!doctype html>
<html><body>
<nav><p>Home</p></nav>
<article class="post"><h2>Post</h2><p>Body <!-- hidden --> text</p></article>
<footer><p>Footer</p></footer>
</body></html>
"""


def test_select_content_narrows_tree():
    tree = html_source.parse_html(PAGE)
    article = html_source.select_content(tree, "article.post")
    blocks = converter.convert(article, "u").body.blocks
    assert blocks == (
        Heading(inlines=(Text("Post"),), level=HeadingLevel.H2),
        Paragraph(inlines=(Text("Body "), Text(" text"))),
    )


def test_select_content_without_selector_returns_tree():
    tree = html_source.parse_html(PAGE)
    assert html_source.select_content(tree) is tree
    assert len(converter.convert(tree, "u").body.blocks) == 4


def test_select_content_missing_match():
    tree = html_source.parse_html(PAGE)
    with pytest.raises(ValueError, match="matched nothing"):
        html_source.select_content(tree, "main")


def test_markdown_source_goes_through_html(tmp_path: Path):
    source = tmp_path / "post.md"
    source.write_text("# Title\n\nSome *text*\n\n- one\n- two\n", encoding="utf-8")
    tree = html_source.load_tree(source)
    blocks = converter.convert(tree, "u").body.blocks
    assert blocks == (
        Heading(inlines=(Text("Title"),), level=HeadingLevel.H1),
        Paragraph(inlines=(Text("Some "), Italic(inlines=(Text("text"),)))),
        List(
            kind=ListKind.UNORDERED,
            items=(
                ListItem(blocks=(Paragraph(inlines=(Text("one"),)),)),
                ListItem(blocks=(Paragraph(inlines=(Text("two"),)),)),
            ),
        ),
    )


def test_load_tree_html_with_selector(tmp_path: Path):
    source = tmp_path / "page.html"
    source.write_text(PAGE, encoding="utf-8")
    node = html_source.load_tree(source, "footer")
    assert node.name == "footer"


def test_load_tree_rejects_unknown_suffix(tmp_path: Path):
    source = tmp_path / "notes.txt"
    source.write_text("hello", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported input type"):
        html_source.load_tree(source)


def test_load_tree_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        html_source.load_tree(tmp_path / "missing.html")
