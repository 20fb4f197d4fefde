"""Journal entry resolution.

For a calendar day, find the journal entry in the journal directory or
create it:

- no match: create one entry and return ``Created``
- one match: return ``Found``
- several matches: return ``Ambiguous`` with the candidates in scan order

The new entry's name is built so that the same day's pattern finds it on
the next call. Scans are never cached; the directory may change between
calls. Creation is not guarded against concurrent writers.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path

from loguru import logger

from daybook.core.exceptions import EntrySelectionError
from daybook.notes.creator import FileNoteCreator
from daybook.notes.filename import is_note_filename
from daybook.notes.scanner import DirectoryScanner

from .collaborators import Interaction, NoteCreator, NoteScanner, TemplateLookup
from .config import JournalSettings
from .keywords import keyword_fragment
from .models import Ambiguous, Created, Found, ResolutionResult
from .patterns import date_pattern
from .templates import JOURNAL_TEMPLATE_KEY, TemplateRegistry
from .titles import render_title


class JournalResolver:
    """Locates or creates the journal entry for a day.

    Example::

        settings = JournalSettings(notes_directory="~/notes", directory="~/notes/journal")
        resolver = JournalResolver(settings)
        result = resolver.locate_or_create()
        if isinstance(result, Ambiguous):
            ...  # let a human pick one of result.candidates
    """

    def __init__(
        self,
        settings: JournalSettings,
        creator: NoteCreator | None = None,
        scanner: NoteScanner | None = None,
        templates: TemplateLookup | None = None,
        interaction: Interaction | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.settings = settings
        self.interaction = interaction
        self.creator = creator or FileNoteCreator(settings.file_type, settings.components_order)
        self.scanner = scanner or DirectoryScanner()
        if templates is None:
            choose = interaction.choose_template if interaction is not None else None
            templates = TemplateRegistry(settings.templates, choose=choose)
        self.templates = templates
        self._clock = clock
        self._keyword_re = re.compile(keyword_fragment(settings.keywords))

    # -- resolution ------------------------------------------------------------

    def locate_or_create(self, day: date | datetime | None = None) -> ResolutionResult:
        """Return the entry for ``day`` (default: now), creating it if none exists."""
        day = day or self._clock()
        pattern = date_pattern(day, self.settings.keywords, self.settings.components_order)
        directory = self.settings.ensure_directory()

        matches = self.scanner.scan(directory, pattern)
        logger.debug(f"Journal scan of {directory} for {pattern.pattern!r}: {len(matches)} match(es)")

        if not matches:
            return Created(self.new_entry(day))
        if len(matches) == 1:
            logger.debug(f"Found journal entry {matches[0].name}")
            return Found(matches[0])

        logger.info(f"{len(matches)} journal entries for {day:%Y-%m-%d}")
        return Ambiguous(tuple(matches))

    def new_entry(self, day: date | datetime | None = None) -> Path:
        """Create a journal entry for ``day`` without looking for an existing one."""
        day = day or self._clock()
        title = render_title(self.settings.title_format, day, prompt=self._prompt)
        template = self.templates.lookup(JOURNAL_TEMPLATE_KEY)

        path = self.creator.create(
            title,
            list(self.settings.keywords),
            directory=self.settings.ensure_directory(),
            identifier=None,
            date=day,
            template=template,
        )
        logger.info(f"Created journal entry {path}")
        return path

    def path_for(self, day: date | datetime | None = None) -> Path:
        """Path of the entry for ``day``, asking the interaction to settle ties.

        Raises:
            EntrySelectionError: If the entry is ambiguous and no interaction is
                available, or the choice is not one of the candidates or no
                longer exists.
        """
        result = self.locate_or_create(day)
        if not isinstance(result, Ambiguous):
            return result.path

        if self.interaction is None:
            raise EntrySelectionError(f"{len(result.candidates)} journal entries match and no way to choose one")

        choice = Path(self.interaction.choose_entry(list(result.candidates)))
        if choice not in result.candidates:
            raise EntrySelectionError(f"Not one of the matching journal entries: {choice}")
        if not choice.is_file():
            raise EntrySelectionError(f"Journal entry no longer exists: {choice}")
        return choice

    def _prompt(self, default: str) -> str:
        if self.interaction is None:
            return default
        return self.interaction.prompt_title(default)

    # -- classification ----------------------------------------------------------

    def is_journal_filename(self, name) -> bool:
        """Whether a bare file name is a journal entry name. The file need not exist."""
        if not isinstance(name, str) or not is_note_filename(name):
            return False
        return self._keyword_re.search(name) is not None

    def is_journal_entry(self, path) -> bool:
        """Whether ``path`` is an existing note file named as a journal entry."""
        try:
            path = Path(path)
            return path.is_file() and self.is_journal_filename(path.name)
        except (TypeError, OSError):
            return False
