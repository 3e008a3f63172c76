from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH

from . import docx_format
from .model import (
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    Inline,
    Italic,
    List,
    ListKind,
    Paragraph,
    Text,
    ThematicBreak,
)


@dataclass(frozen=True)
class RunStyle:
    bold: bool = False
    italic: bool = False
    code: bool = False


def render_document(doc: Document, output_path: str | Path) -> None:
    output_path = Path(output_path)
    docx = DocxDocument()
    docx_format.apply_page_layout(docx)

    for block in doc.body.blocks:
        _dispatch_block(docx, block, depth=0)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)


def _dispatch_block(docx: DocxDocument, block: Block, depth: int) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block)
    elif isinstance(block, Paragraph):
        _render_paragraph(docx, block.inlines, depth)
    elif isinstance(block, List):
        _render_list(docx, block, depth)
    elif isinstance(block, Blockquote):
        for child in block.blocks:
            _dispatch_block(docx, child, depth + 1)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, depth)
    elif isinstance(block, ThematicBreak):
        _render_horizontal_rule(docx)
    else:
        raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _render_heading(docx: DocxDocument, heading: Heading) -> None:
    paragraph = docx.add_paragraph()
    for text, style in iter_runs(heading.inlines):
        run = paragraph.add_run(text)
        docx_format.set_run_font(run, bold=True, italic=style.italic, code=style.code)
    docx_format.apply_heading_format(paragraph, int(heading.level))


def _render_paragraph(docx: DocxDocument, inlines: Iterable[Inline], depth: int, prefix: str = "") -> None:
    paragraph = docx.add_paragraph()
    if prefix:
        docx_format.set_run_font(paragraph.add_run(prefix))
    for text, style in iter_runs(inlines):
        run = paragraph.add_run(text)
        docx_format.set_run_font(run, bold=style.bold, italic=style.italic, code=style.code)
    docx_format.apply_body_paragraph_format(paragraph, depth)


def _render_list(docx: DocxDocument, block: List, depth: int) -> None:
    for idx, item in enumerate(block.items, start=1):
        prefix = f"{idx} " if block.kind is ListKind.ORDERED else "– "
        remaining = item.blocks
        if remaining and isinstance(remaining[0], Paragraph):
            _render_paragraph(docx, remaining[0].inlines, depth, prefix)
            remaining = remaining[1:]
        else:
            _render_paragraph(docx, (), depth, prefix)
        for sub_block in remaining:
            _dispatch_block(docx, sub_block, depth + 1)


def _render_code_block(docx: DocxDocument, block: CodeBlock, depth: int) -> None:
    paragraph = docx.add_paragraph()
    text = "".join(text for text, _ in iter_runs(block.inlines)).strip("\n")
    run = paragraph.add_run(text)
    docx_format.set_run_font(run, code=True)
    docx_format.apply_code_format(paragraph, depth)


def _render_horizontal_rule(docx: DocxDocument) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run("-" * 20)
    docx_format.set_run_font(run)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


def iter_runs(inlines: Iterable[Inline], style: RunStyle = RunStyle()) -> Iterator[tuple[str, RunStyle]]:
    """Flatten nested inlines into (text, style) pairs, as Word runs cannot nest."""
    for inline in inlines:
        if isinstance(inline, Text):
            if inline.text:
                yield inline.text, style
        elif isinstance(inline, Bold):
            yield from iter_runs(inline.inlines, RunStyle(True, style.italic, style.code))
        elif isinstance(inline, Italic):
            yield from iter_runs(inline.inlines, RunStyle(style.bold, True, style.code))
        elif isinstance(inline, Code):
            yield from iter_runs(inline.inlines, RunStyle(style.bold, style.italic, True))
