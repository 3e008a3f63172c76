from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

import yaml

DEFAULT_OUTPUT_DIR = "dist"


@dataclass
class PostConfig:
    url: str
    source: Path
    selector: str | None = None
    title: str | None = None
    output: str | None = None

    @property
    def output_name(self) -> str:
        return self.output or f"{self.source.stem}.html"


@dataclass
class SiteConfig:
    posts: List[PostConfig] = field(default_factory=list)
    css_dir: Path = Path("css")
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    wrap_root_inlines: bool = False


def load_config(path: str | Path) -> SiteConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return parse_config(path.read_text(encoding="utf-8"), base_dir=path.parent)


def parse_config(text: str, base_dir: Path | None = None) -> SiteConfig:
    """Parse the YAML site config; relative paths resolve against ``base_dir``."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid config YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping.")

    base = Path(base_dir) if base_dir is not None else None
    posts_value = data.get("posts") or []
    if not isinstance(posts_value, list):
        raise ValueError("'posts' must be a list of mappings.")
    posts = [_build_post(entry, idx, base) for idx, entry in enumerate(posts_value)]
    _check_unique_outputs(posts)

    config = SiteConfig(posts=posts, wrap_root_inlines=bool(data.get("wrap_root_inlines", False)))
    if data.get("css_dir"):
        config.css_dir = Path(str(data["css_dir"]))
    config.output_dir = _resolve(Path(str(data.get("output_dir") or DEFAULT_OUTPUT_DIR)), base)
    return config


def _build_post(entry: Any, idx: int, base: Path | None) -> PostConfig:
    if not isinstance(entry, dict):
        raise ValueError(f"Post #{idx} must be a mapping.")
    missing = [key for key in ("url", "source") if not entry.get(key)]
    if missing:
        raise ValueError(f"Post #{idx} is missing {', '.join(missing)}.")
    source = Path(str(entry["source"]))
    return PostConfig(
        url=str(entry["url"]),
        source=_resolve(source, base),
        selector=_optional_str(entry.get("selector")),
        title=_optional_str(entry.get("title")),
        output=_optional_str(entry.get("output")) or _default_output(source),
    )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _default_output(source: Path) -> str:
    """Mirror the source's relative location so ``a/index.html`` and ``b/index.html`` stay apart."""
    if source.is_absolute() or ".." in source.parts:
        return f"{source.stem}.html"
    return source.with_suffix(".html").as_posix()


def _check_unique_outputs(posts: List[PostConfig]) -> None:
    # build swaps the suffix per output format, so compare without it
    seen: dict[Path, int] = {}
    for idx, post in enumerate(posts):
        key = Path(post.output_name).with_suffix("")
        if key in seen:
            raise ValueError(
                f"Posts #{seen[key]} and #{idx} both write to {post.output_name!r}; set 'output' on one of them."
            )
        seen[key] = idx


def _resolve(path: Path, base: Path | None) -> Path:
    if base is None or path.is_absolute():
        return path
    return base / path
