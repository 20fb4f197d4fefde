"""Front matter written at the top of a new note, one layout per file type."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import yaml
from loguru import logger

from daybook.core.exceptions import ConfigurationError


def _org(title: str, moment: datetime, keywords: list[str], identifier: str) -> str:
    tags = f":{':'.join(keywords)}:" if keywords else ""
    return (
        f"#+title:      {title}\n"
        f"#+date:       [{moment.strftime('%Y-%m-%d %a %H:%M')}]\n"
        f"#+filetags:   {tags}\n"
        f"#+identifier: {identifier}\n"
    )


def _markdown_yaml(title: str, moment: datetime, keywords: list[str], identifier: str) -> str:
    data = {
        "title": title,
        "date": moment.isoformat(timespec="seconds"),
        "tags": list(keywords),
        "identifier": identifier,
    }
    body = yaml.safe_dump(data, default_flow_style=None, sort_keys=False, allow_unicode=True)
    return f"---\n{body}---\n"


def _markdown_toml(title: str, moment: datetime, keywords: list[str], identifier: str) -> str:
    tags = ", ".join(f'"{k}"' for k in keywords)
    escaped = title.replace("\\", "\\\\").replace('"', '\\"')
    return (
        "+++\n"
        f'title      = "{escaped}"\n'
        f"date       = {moment.isoformat(timespec='seconds')}\n"
        f"tags       = [{tags}]\n"
        f'identifier = "{identifier}"\n'
        "+++\n"
    )


def _text(title: str, moment: datetime, keywords: list[str], identifier: str) -> str:
    return (
        f"title:      {title}\n"
        f"date:       {moment.strftime('%Y-%m-%d')}\n"
        f"tags:       {' '.join(keywords)}\n"
        f"identifier: {identifier}\n"
        f"{'-' * 27}\n"
    )


_RENDERERS = {
    "org": _org,
    "markdown-yaml": _markdown_yaml,
    "markdown-toml": _markdown_toml,
    "text": _text,
}


def render_front_matter(
    file_type: str,
    title: str,
    moment: datetime,
    keywords: list[str],
    identifier: str,
) -> str:
    """Render the header block for a new note of ``file_type``."""
    try:
        renderer = _RENDERERS[file_type]
    except KeyError:
        raise ConfigurationError(f"Unknown note file type: {file_type!r}") from None
    return renderer(title, moment, keywords, identifier)


def read_front_matter(path: str | Path) -> dict:
    """Parse the YAML front matter of a markdown note.

    Returns an empty dict for other layouts or unreadable files.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read front matter of {path}: {e}")
        return {}

    if not content.startswith("---"):
        return {}
    parts = content.split("---", 2)
    if len(parts) < 3:
        return {}
    try:
        data = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse front matter in {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}
