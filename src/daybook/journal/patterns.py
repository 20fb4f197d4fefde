"""Date pattern builder.

Turns a calendar day into a regular expression over note file names. The
time of day is a wildcard: only one entry per day is expected, but the
moment it was created is not known in advance.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from daybook.notes.filename import DEFAULT_ORDER, DELIMITERS, ComponentOrder

from .keywords import JournalKeywordSet, keyword_fragment

TIME_WILDCARD = "T[0-9]{6}"


def identifier_fragment(day: date | datetime | None = None) -> str:
    """``YYYYMMDD`` of ``day`` followed by a wildcard time, e.g. ``20231019T[0-9]{6}``."""
    day = day or datetime.now()
    return day.strftime("%Y%m%d") + TIME_WILDCARD


def date_pattern(
    day: date | datetime | None,
    keywords: JournalKeywordSet,
    order: ComponentOrder = DEFAULT_ORDER,
) -> re.Pattern:
    """Pattern matching journal file names for ``day`` under ``order``.

    Use with ``re.search``. When the keywords come before the identifier the
    identifier is introduced by its ``@@`` delimiter; anything may sit
    between the two (extra keywords, a title, a signature).
    """
    ident = identifier_fragment(day)
    kw = keyword_fragment(keywords)
    if order.identifier_precedes_keywords():
        return re.compile(ident + ".*?" + kw)
    return re.compile(kw + ".*?" + re.escape(DELIMITERS["identifier"]) + ident)
