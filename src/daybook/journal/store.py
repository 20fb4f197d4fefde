"""JournalStore protocol and the note-collection implementation.

Any system that stores dated text entries can implement the protocol.
``NoteJournalStore`` reads journal entries out of a note collection's
journal directory, dating each entry by its file-name identifier.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from daybook.core.exceptions import FileIOError
from daybook.notes.filename import NoteFileName, is_note_filename, parse_identifier
from daybook.notes.frontmatter import read_front_matter

from .config import JournalSettings
from .keywords import keyword_fragment


@runtime_checkable
class JournalStore(Protocol):
    """Protocol for accessing journal entries.

    Implementations provide read-only access to a collection of
    dated text entries.
    """

    def list_entries(
        self,
        start: date | None = None,
        end: date | None = None,
    ) -> list[Path]:
        """Return paths to journal entries in the date range.

        Args:
            start: Earliest date (inclusive). None = no lower bound.
            end: Latest date (inclusive). None = no upper bound.

        Returns:
            List of paths, sorted chronologically.
        """
        ...

    def read_entry(self, path: Path) -> str:
        """Read the text content of an entry.

        Args:
            path: Path returned by ``list_entries``.

        Returns:
            Full text content of the entry.
        """
        ...

    def get_metadata(self, path: Path) -> dict:
        """Extract metadata from an entry (frontmatter, filename date, etc.).

        Args:
            path: Path returned by ``list_entries``.

        Returns:
            Dict with at least ``"date"`` key if parseable from filename.
        """
        ...


class NoteJournalStore:
    """Journal entries of a note collection, read from the journal directory.

    Only note files carrying the journal keywords are listed. Entries with
    the same day are ordered by their full identifier.
    """

    def __init__(self, settings: JournalSettings):
        self.settings = settings
        self._keyword_re = re.compile(keyword_fragment(settings.keywords))

    def _entries(self) -> list[tuple[datetime, Path]]:
        directory = self.settings.journal_directory
        if not directory.is_dir():
            return []

        entries = []
        for path in directory.iterdir():
            if not is_note_filename(path.name) or not self._keyword_re.search(path.name):
                continue
            if not path.is_file():
                continue
            try:
                moment = parse_identifier(NoteFileName.parse(path.name).identifier)
            except ValueError:
                continue
            entries.append((moment, path))
        entries.sort()
        return entries

    def list_entries(self, start: date | None = None, end: date | None = None) -> list[Path]:
        result = []
        for moment, path in self._entries():
            day = moment.date()
            if start is not None and day < start:
                continue
            if end is not None and day > end:
                continue
            result.append(path)
        logger.debug(f"Listed {len(result)} journal entries between {start} and {end}")
        return result

    def read_entry(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f"Cannot read journal entry {path}: {e}") from e

    def get_metadata(self, path: Path) -> dict:
        path = Path(path)
        metadata: dict = {"source": str(path)}
        try:
            name = NoteFileName.parse(path.name)
            moment = parse_identifier(name.identifier)
        except ValueError:
            return metadata

        metadata.update(
            identifier=name.identifier,
            date=moment.date(),
            title=name.title.replace("-", " "),
            keywords=list(name.keywords),
            signature=name.signature,
        )
        front_matter = read_front_matter(path)
        if front_matter:
            metadata["front_matter"] = front_matter
            if front_matter.get("title"):
                metadata["title"] = str(front_matter["title"])
        return metadata
