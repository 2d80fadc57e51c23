from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup

from .utils import BuildError

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"
NO_SUMMARY = "No summary available"
HEADING_MARKER_RE = re.compile(r"^#+(?:\s+|$)")
PARAGRAPH_CLOSE_RE = re.compile(r"</p\s*>", re.IGNORECASE)


def list_sources(posts_dir: Path) -> list[Path]:
    """Non-directory ``*.md`` entries directly inside posts_dir, sorted by filename.

    Broken links are included; read_source reports them.
    """
    if not posts_dir.is_dir():
        raise BuildError(f"Posts directory not found: {posts_dir}")
    try:
        entries = list(posts_dir.iterdir())
    except OSError as exc:
        raise BuildError(f"Cannot list posts directory {posts_dir}: {exc}") from exc
    sources = [path for path in entries if path.name.endswith(MARKDOWN_SUFFIX) and not path.is_dir()]
    return sorted(sources, key=lambda p: p.name)


def read_source(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Cannot read post {path}: {exc}") from exc
    return text.lstrip("\ufeff")


def extract_title(markdown_text: str) -> str:
    lines = markdown_text.splitlines()
    if not lines:
        return ""
    return HEADING_MARKER_RE.sub("", lines[0].strip(), count=1)


def source_offset(text: str, line: int, column: int) -> int:
    # html.parser reports 1-based lines split on "\n" and 0-based columns.
    start = 0
    for _ in range(line - 1):
        start = text.index("\n", start) + 1
    return start + column


def extract_summary(html_text: str) -> str:
    """Inner HTML of the first <p>, copied from html_text unchanged."""
    paragraph = BeautifulSoup(html_text, "html.parser").find("p")
    if paragraph is None:
        return NO_SUMMARY
    if paragraph.sourceline is None:
        return paragraph.decode_contents()
    tag_start = source_offset(html_text, paragraph.sourceline, paragraph.sourcepos)
    start = html_text.index(">", tag_start) + 1
    # A <p> cannot contain another <p>, so the first close tag ends it.
    end = PARAGRAPH_CLOSE_RE.search(html_text, start)
    if end is None:
        return paragraph.decode_contents()
    return html_text[start : end.start()]


def extract_metadata(markdown_text: str, html_text: str) -> tuple[str, str]:
    return extract_title(markdown_text), extract_summary(html_text)


def output_filename(source_name: str) -> str:
    if source_name.endswith(MARKDOWN_SUFFIX):
        source_name = source_name[: -len(MARKDOWN_SUFFIX)]
    return f"{source_name}{HTML_SUFFIX}"
