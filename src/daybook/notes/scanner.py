"""Directory scanning for note files whose names match a pattern."""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

from daybook.core.types import PathLike


class DirectoryScanner:
    """Non-recursive scan of a single directory.

    Results are regular files whose name matches ``pattern`` anywhere
    (``re.search``), sorted by file name. Hidden files are skipped.
    """

    def scan(self, root: PathLike, pattern: re.Pattern | str) -> list[Path]:
        root = Path(root).expanduser()
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        if not root.is_dir():
            logger.debug(f"Scan root {root} does not exist")
            return []

        matches = [
            entry
            for entry in root.iterdir()
            if not entry.name.startswith(".") and entry.is_file() and pattern.search(entry.name)
        ]
        matches.sort(key=lambda p: p.name)
        logger.debug(f"Scanned {root}: {len(matches)} match(es) for {pattern.pattern!r}")
        return matches
