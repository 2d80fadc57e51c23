from __future__ import annotations

from pathlib import Path

import markdown
from pygments.formatters import HtmlFormatter

from .utils import BuildError

MARKDOWN_EXTENSIONS = ["tables", "pymdownx.tilde", "nl2br", "fenced_code", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {
    # Only ~~strike~~; a single ~ stays literal text.
    "pymdownx.tilde": {"subscript": False},
    "codehilite": {"guess_lang": False, "css_class": "codehilite"},
}
HIGHLIGHT_STYLE = "default"


def create_markdown() -> markdown.Markdown:
    # No "toc" extension: headings are rendered without id attributes.
    return markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )


def render_markdown(text: str) -> str:
    md = create_markdown()
    html_content = md.convert(text)
    md.reset()
    return html_content


def highlight_css() -> str:
    return HtmlFormatter(style=HIGHLIGHT_STYLE).get_style_defs(".codehilite")


def ensure_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildError(f"Cannot create output directory {path}: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Cannot write {path}: {exc}") from exc


def write_artifacts(output_dir: Path, artifacts: list[tuple[str, str]]) -> list[Path]:
    ensure_directory(output_dir)
    written = []
    for filename, text in artifacts:
        path = output_dir / filename
        write_text(path, text)
        written.append(path)
    return written
