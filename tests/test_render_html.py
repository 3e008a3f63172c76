from bs4 import BeautifulSoup

from HtmlDoc import converter, renderer_html
from HtmlDoc.assets import AssetDirs
from HtmlDoc.model import (
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


def _document(*blocks) -> Document:
    return Document(meta=Meta(origin_url="https://example.com/post"), body=Body(blocks=tuple(blocks)))


def test_nested_emphasis_round_trips():
    tree = BeautifulSoup("<p><strong>a<em>b</em></strong></p>", "html.parser")
    document = converter.convert(tree, "https://example.com/post")
    assert renderer_html.render_blocks(document.body.blocks) == "<p><strong>a<em>b</em></strong></p>\n"


def test_text_is_escaped():
    html = renderer_html.render_blocks([Paragraph(inlines=(Text("a < b & \"c\" 'd' >"),))])
    assert html == "<p>a &lt; b &amp; &quot;c&quot; &#x27;d&#x27; &gt;</p>\n"
    assert "<" not in html[3:-5]


def test_block_mapping():
    html = renderer_html.render_blocks(
        [
            Heading(inlines=(Text("Title"),), level=HeadingLevel.H2),
            List(
                kind=ListKind.ORDERED,
                items=(ListItem(blocks=(Paragraph(inlines=(Text("one"),)),)),),
            ),
            List(kind=ListKind.UNORDERED, items=(ListItem(blocks=()),)),
            Blockquote(blocks=(Paragraph(inlines=(Italic(inlines=(Text("q"),)),)),)),
            ThematicBreak(),
            CodeBlock(lang=CodeLang.UNKNOWN, inlines=(Text("x = 1 < 2"),)),
            Paragraph(inlines=(Code(inlines=(Bold(inlines=(Text("c"),)),)),)),
        ]
    )
    assert html == (
        "<h2>Title</h2>\n"
        "<ol>\n<li>\n<p>one</p>\n</li>\n</ol>\n"
        "<ul>\n<li>\n</li>\n</ul>\n"
        "<blockquote>\n<p><em>q</em></p>\n</blockquote>\n"
        "<hr/>\n"
        "<pre><code>x = 1 &lt; 2</code></pre>\n"
        "<p><code><strong>c</strong></code></p>\n"
    )


def test_page_shell():
    document = _document(Paragraph(inlines=(Text("hello"),)))
    html = renderer_html.render(
        document,
        stylesheets=AssetDirs(css_dir="static/css").stylesheets(),
        title="Tom & Jerry",
    )
    assert html.startswith("<!doctype html>\n<html lang='en'>\n<head>\n  <meta charset='utf-8'>\n")
    assert "  <title>Tom &amp; Jerry</title>\n" in html
    assert "<link rel='stylesheet' href='static/css/reset.css'>" in html
    assert html.index("reset.css") < html.index("main.css") < html.index("blog.css")
    assert "<body>\n<main>\n<article>\n<p>hello</p>\n</article>\n</main>\n</body>\n</html>\n" in html


def test_page_without_title_or_stylesheets():
    html = renderer_html.render(_document())
    assert "<title>" not in html
    assert "<link" not in html


def test_render_is_idempotent():
    document = _document(
        Heading(inlines=(Text("T"),), level=HeadingLevel.H1),
        Paragraph(inlines=(Text("a & b"),)),
    )
    assert renderer_html.render(document) == renderer_html.render(document)


def test_rendered_html_converts_back_to_same_body():
    source = (
        "<h1>Title</h1><p>Some <strong>bold <em>and</em></strong> text &amp; more</p>"
        "<ul><li><p>one</p></li><li><p>two</p><blockquote><p>q</p></blockquote></li></ul>"
        "<hr><blockquote><h4>inner</h4></blockquote>"
    )
    first = converter.convert(BeautifulSoup(source, "html.parser"), "origin")
    rendered = renderer_html.render(first)
    article = BeautifulSoup(rendered, "html.parser").article
    second = converter.convert(article, "origin")
    assert second.body == first.body
