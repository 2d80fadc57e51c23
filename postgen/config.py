from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

from .utils import BuildError, parse_bool

CONFIG_FILES = ("site.toml", "site.yml", "site.yaml", "site.json")
DEFAULT_POSTS_DIR = "posts"
DEFAULT_OUTPUT_DIR = "dist"
DEFAULT_SITE_NAME = "Blog Index"


@dataclass(frozen=True)
class SiteConfig:
    """Everything one build needs. Building one has no side effects."""

    posts_dir: Path = Path(DEFAULT_POSTS_DIR)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    site_name: str = DEFAULT_SITE_NAME
    inline_content: bool = False


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Cannot read config file {path}: {exc}") from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise BuildError(f"Invalid TOML in config file {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise BuildError(f"Invalid YAML in config file {path}: {exc}") from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BuildError(f"Invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise BuildError(f"Config file must contain a mapping: {path}")
    return data


def resolve_config(data: dict, root: Path) -> SiteConfig:
    def cfg_str(key: str, default: str) -> str:
        value = data.get(key)
        return default if value is None else str(value)

    def cfg_dir(key: str, default: str) -> Path:
        path = Path(cfg_str(key, default))
        if not path.is_absolute():
            path = root / path
        return path

    return SiteConfig(
        posts_dir=cfg_dir("posts", DEFAULT_POSTS_DIR),
        output_dir=cfg_dir("output", DEFAULT_OUTPUT_DIR),
        site_name=cfg_str("site_name", DEFAULT_SITE_NAME),
        inline_content=parse_bool(data.get("inline_content")),
    )


def find_config(root: Path) -> Optional[Path]:
    """First of CONFIG_FILES present in root, or None."""
    for name in CONFIG_FILES:
        path = root / name
        if path.is_file():
            return path
    return None
