"""
File I/O utilities.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding) as f:
        f.write(content)
