"""Journal entries in a note collection.

Builds file-name patterns for a calendar day, finds the day's entry in the
journal directory, and creates it when it is missing.
"""

from .config import JournalSettings
from .dates import parse_date
from .keywords import JournalKeywordSet, keyword_fragment
from .models import Ambiguous, Created, Found, ResolutionOutcome, ResolutionResult
from .patterns import date_pattern, identifier_fragment
from .resolver import JournalResolver
from .store import JournalStore, NoteJournalStore
from .titles import CustomFormat, PresetStyle, PromptForTitle, parse_title_format, render_title

__all__ = [
    "Ambiguous",
    "Created",
    "CustomFormat",
    "Found",
    "JournalKeywordSet",
    "JournalResolver",
    "JournalSettings",
    "JournalStore",
    "NoteJournalStore",
    "PresetStyle",
    "PromptForTitle",
    "ResolutionOutcome",
    "ResolutionResult",
    "date_pattern",
    "identifier_fragment",
    "keyword_fragment",
    "parse_date",
    "parse_title_format",
    "render_title",
]
