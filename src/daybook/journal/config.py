"""Immutable journal settings.

Built once from a ``Config`` (or directly in code and tests) and handed to
the resolver. Nothing in the resolver mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from daybook.core.exceptions import ConfigurationError
from daybook.notes.filename import DEFAULT_ORDER, FILE_TYPES, ComponentOrder

from .keywords import JournalKeywordSet
from .titles import PresetStyle, TitleFormat, parse_title_format


@dataclass(frozen=True)
class JournalSettings:
    """Settings for journal resolution.

    Attributes:
        notes_directory: Root of the note collection.
        keywords: Keywords every journal entry carries.
        directory: Journal sub-directory. None = the collection root.
        title_format: How new entry titles are produced.
        templates: Named templates; ``"journal"`` is used for new entries.
        components_order: File-name segment order of the collection.
        file_type: Note file type for new entries.
    """

    notes_directory: Path
    keywords: JournalKeywordSet = field(default_factory=lambda: JournalKeywordSet(("journal",)))
    directory: Path | None = None
    title_format: TitleFormat = PresetStyle("day-date-month-year-24h")
    templates: dict[str, str] = field(default_factory=dict)
    components_order: ComponentOrder = DEFAULT_ORDER
    file_type: str = "org"

    def __post_init__(self):
        object.__setattr__(self, "notes_directory", Path(self.notes_directory).expanduser())
        if self.directory is not None:
            object.__setattr__(self, "directory", Path(self.directory).expanduser())
        if self.file_type not in FILE_TYPES:
            raise ConfigurationError(f"Unknown note file type: {self.file_type!r}")

    @property
    def journal_directory(self) -> Path:
        return self.directory or self.notes_directory

    def ensure_directory(self) -> Path:
        """Return the journal directory, creating it (with parents) if absent."""
        path = self.journal_directory
        if not path.is_dir():
            logger.info(f"Creating journal directory {path}")
            path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def from_config(cls, config) -> JournalSettings:
        """Build settings from a ``daybook.core.config.Config``.

        Raises:
            ConfigurationError: If the configuration does not validate.
        """
        validated = config.validated()
        notes, journal = validated.notes, validated.journal
        return cls(
            notes_directory=notes.directory,
            keywords=JournalKeywordSet.from_config(journal.keyword),
            directory=journal.directory,
            title_format=parse_title_format(journal.title_format),
            templates=dict(journal.templates),
            components_order=ComponentOrder.from_names(notes.components_order),
            file_type=notes.file_type,
        )
