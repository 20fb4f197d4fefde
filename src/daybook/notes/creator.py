"""Writes new note files following the collection's naming grammar."""

from __future__ import annotations

import itertools
from datetime import date as date_type
from datetime import datetime, time, timedelta
from pathlib import Path

from loguru import logger

from daybook.core.exceptions import ConfigurationError, NoteCreationError
from daybook.core.types import PathLike
from daybook.core.utils.file_io import safe_write

from .filename import (
    DEFAULT_ORDER,
    FILE_TYPES,
    ComponentOrder,
    NoteFileName,
    format_identifier,
    sluggify_keyword,
    sluggify_signature,
    sluggify_title,
)
from .frontmatter import render_front_matter


def _as_datetime(value: date_type | datetime | None) -> datetime:
    if value is None:
        return datetime.now().replace(microsecond=0)
    if isinstance(value, datetime):
        return value.replace(microsecond=0)
    return datetime.combine(value, time())


class FileNoteCreator:
    """Creates note files on the local file system.

    The file name is ``NoteFileName`` rendered in ``order``; the body is the
    front matter for ``file_type`` followed by the template text, if any.

    Example::

        creator = FileNoteCreator(file_type="markdown-yaml")
        path = creator.create("Weekly review", ["review"], directory="~/notes")
    """

    def __init__(self, file_type: str = "org", order: ComponentOrder = DEFAULT_ORDER):
        if file_type not in FILE_TYPES:
            raise ConfigurationError(f"Unknown note file type: {file_type!r}")
        self.file_type = file_type
        self.order = order

    def create(
        self,
        title: str,
        keywords,
        *,
        directory: PathLike,
        identifier: str | None = None,
        signature: str | None = None,
        date: date_type | datetime | None = None,
        template: str | None = None,
    ) -> Path:
        """Write a new note and return its path.

        Args:
            title: Human-readable title; sluggified into the file name.
            keywords: Keywords for the file name and front matter.
            directory: Directory to create the note in (created if missing).
            identifier: Explicit identifier. Derived from ``date`` when None.
            signature: Optional signature segment.
            date: Creation moment. Defaults to now.
            template: Text placed after the front matter.

        Raises:
            NoteCreationError: If the file cannot be written.
        """
        moment = _as_datetime(date)
        directory = Path(directory).expanduser()
        slugs = sorted({sluggify_keyword(k) for k in keywords} - {""})

        try:
            directory.mkdir(parents=True, exist_ok=True)
            identifier = identifier or self._unused_identifier(directory, moment)
        except OSError as e:
            raise NoteCreationError(f"Cannot prepare note directory {directory}: {e}") from e

        name = NoteFileName(
            identifier=identifier,
            title=sluggify_title(title),
            keywords=tuple(slugs),
            signature=sluggify_signature(signature or ""),
            extension=FILE_TYPES[self.file_type],
        )
        path = directory / name.format(self.order)
        if path.exists():
            raise NoteCreationError(f"Note already exists: {path}")

        content = render_front_matter(self.file_type, title, moment, slugs, identifier) + "\n"
        if template:
            content += template
        try:
            safe_write(str(path), content)
        except OSError as e:
            raise NoteCreationError(f"Cannot write note {path}: {e}") from e

        logger.info(f"Created note {path.name} in {directory}")
        return path

    @staticmethod
    def _unused_identifier(directory: Path, moment: datetime) -> str:
        """Free identifier on the day of ``moment``.

        Later seconds are tried first, then earlier ones, so the identifier
        never leaves the calendar day the note was asked for.

        Raises:
            NoteCreationError: If every second of that day is taken.
        """
        taken = set()
        for entry in directory.iterdir():
            try:
                taken.add(NoteFileName.parse(entry.name).identifier)
            except ValueError:
                continue

        start = datetime.combine(moment.date(), time())
        end = start + timedelta(days=1)
        later = (moment + timedelta(seconds=s) for s in range(int((end - moment).total_seconds())))
        earlier = (moment - timedelta(seconds=s) for s in range(1, int((moment - start).total_seconds()) + 1))
        for candidate in itertools.chain(later, earlier):
            identifier = format_identifier(candidate)
            if identifier not in taken:
                return identifier
        raise NoteCreationError(f"No free identifier left on {moment:%Y-%m-%d} in {directory}")
