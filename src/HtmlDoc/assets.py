from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

RESET_CSS_FILE = "reset.css"
MAIN_CSS_FILE = "main.css"
BLOG_CSS_FILE = "blog.css"


@dataclass
class AssetDirs:
    css_dir: Path

    def stylesheets(self) -> list[str]:
        """Stylesheet hrefs for the page head, in cascade order."""
        css_dir = Path(self.css_dir)
        return [
            (css_dir / name).as_posix()
            for name in (RESET_CSS_FILE, MAIN_CSS_FILE, BLOG_CSS_FILE)
        ]
