from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import converter, html_source, renderer_docx, renderer_html
from .assets import AssetDirs
from .config import load_config
from .model import Document
from .utils import configure_logging, resolve_output_path, write_text

FORMAT_SUFFIXES = {"html": ".html", "docx": ".docx"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="HtmlDoc",
        description="Convert HTML pages into a typed document model and render them back.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a single HTML or Markdown file")
    convert.add_argument("input", type=str, help="Path to an HTML or Markdown file")
    convert.add_argument("-o", "--output", type=str, help="Output path")
    convert.add_argument("--url", type=str, help="Origin URL recorded in the document metadata")
    convert.add_argument("--selector", type=str, help="CSS selector for the content element")
    convert.add_argument("--title", type=str, help="Page title for HTML output")
    convert.add_argument("--format", choices=sorted(FORMAT_SUFFIXES), default="html")
    convert.add_argument("--css-dir", type=str, default="css", help="Stylesheet directory used in links")
    convert.add_argument(
        "--wrap-root-inlines",
        action="store_true",
        help="Wrap loose text in the content root (the selected element, or <body>) into paragraphs",
    )

    build = subparsers.add_parser("build", help="Convert every post listed in a YAML config")
    build.add_argument("config", type=str, help="Path to the site config")
    build.add_argument("--format", choices=sorted(FORMAT_SUFFIXES), default="html")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    if args.command == "convert":
        _run_convert(args)
    else:
        _run_build(args)


def _run_convert(args: argparse.Namespace) -> None:
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, FORMAT_SUFFIXES[args.format])

    logging.info("Reading %s", input_path)
    tree = html_source.load_tree(input_path, args.selector)

    logging.info("Converting...")
    document = converter.convert(
        tree,
        args.url or input_path.resolve().as_uri(),
        wrap_root_inlines=args.wrap_root_inlines,
    )
    logging.debug("Document has %d top-level blocks", len(document.body.blocks))

    _write(document, output_path, args.format, AssetDirs(Path(args.css_dir)), args.title)
    logging.info("Done. Saved to %s", output_path)


def _run_build(args: argparse.Namespace) -> None:
    config = load_config(Path(args.config).expanduser())
    assets = AssetDirs(config.css_dir)
    suffix = FORMAT_SUFFIXES[args.format]
    logging.info("Building %d posts into %s", len(config.posts), config.output_dir)

    for post in config.posts:
        logging.info("Converting %s", post.url)
        tree = html_source.load_tree(post.source, post.selector)
        document = converter.convert(tree, post.url, wrap_root_inlines=config.wrap_root_inlines)
        output_path = (config.output_dir / post.output_name).with_suffix(suffix)
        _write(document, output_path, args.format, assets, post.title)
        logging.debug("Saved %s", output_path)

    logging.info("Done.")


def _write(document: Document, output_path: Path, fmt: str, assets: AssetDirs, title: str | None) -> None:
    if fmt == "docx":
        logging.info("Rendering DOCX to %s", output_path)
        renderer_docx.render_document(document, output_path)
        return
    logging.info("Rendering HTML to %s", output_path)
    text = renderer_html.render(document, stylesheets=assets.stylesheets(), title=title)
    write_text(output_path, text)


if __name__ == "__main__":
    main()
