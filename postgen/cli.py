from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .config import CONFIG_FILES, SiteConfig, find_config, load_config, resolve_config
from .content import extract_metadata, list_sources, output_filename, read_source
from .pages import (
    INDEX_NAME,
    STYLESHEET_NAME,
    render_index_entry,
    render_index_page,
    render_post_page,
    render_stylesheet,
)
from .render import render_markdown, write_artifacts
from .utils import BuildError


def parse_post(md_file: Path) -> dict:
    raw_text = read_source(md_file)
    html_content = render_markdown(raw_text)
    title, summary = extract_metadata(raw_text, html_content)
    filename = output_filename(md_file.name)
    if filename == INDEX_NAME:
        raise BuildError(f"Post would overwrite the index page: {md_file}")
    return {
        "source": md_file,
        "title": title,
        "summary": summary,
        "content": html_content,
        "filename": filename,
    }


def build_posts(config: SiteConfig) -> list[tuple[str, str]]:
    """Read and render every post and compose all pages without writing anything.

    Post pages come first in source order, followed by the index page and
    the stylesheet.
    """
    artifacts = []
    entries = []
    for md_file in list_sources(config.posts_dir):
        post = parse_post(md_file)
        artifacts.append(
            (
                post["filename"],
                render_post_page(post["title"], post["summary"], post["content"], site_name=config.site_name),
            )
        )
        entries.append(
            render_index_entry(
                post["title"],
                post["summary"],
                post["filename"],
                html_content=post["content"],
                inline=config.inline_content,
            )
        )
    index_html = render_index_page("\n".join(entries), site_name=config.site_name, inline=config.inline_content)
    artifacts.append((INDEX_NAME, index_html))
    artifacts.append((STYLESHEET_NAME, render_stylesheet()))
    return artifacts


def build_site(config: SiteConfig) -> list[Path]:
    artifacts = build_posts(config)
    return write_artifacts(config.output_dir, artifacts)


def main() -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Render Markdown posts into a static site. Optional settings are read from the first of "
            f"{', '.join(CONFIG_FILES)} found in the current directory."
        )
    )
    parser.parse_args()
    root = Path.cwd()
    start = time.perf_counter()
    try:
        config_path = find_config(root)
        config = resolve_config(load_config(config_path) if config_path else {}, root)
        written = build_site(config)
    except BuildError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start
    post_count = len(written) - 2
    print(f"Build completed in {elapsed:.2f}s ({post_count} posts).")
    print(f"Site generated in: {config.output_dir}")
