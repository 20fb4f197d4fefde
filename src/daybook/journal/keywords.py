"""Keyword matching for journal files.

A journal file carries every configured journal keyword, in sorted order, as
one contiguous run inside its keyword segment. The run may follow other
keywords (``__daily_journal``) and must end where a keyword ends, so
``__journalism`` is not a journal file. Keywords that another tool reordered
inside the file name are not recognized.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from daybook.core.exceptions import ConfigurationError
from daybook.notes.filename import KEYWORD_SEPARATOR, sluggify_keyword


@dataclass(frozen=True)
class JournalKeywordSet:
    """Sorted, non-empty set of journal keywords.

    Keywords are stored in the slug form note creation writes into file
    names, so a configured ``"Daily Log"`` is matched as ``dailylog``.
    """

    keywords: tuple[str, ...]

    def __post_init__(self):
        if not self.keywords:
            raise ConfigurationError("At least one journal keyword is required")
        if any(not isinstance(k, str) or not k for k in self.keywords):
            raise ConfigurationError(f"Journal keywords must be non-empty strings: {list(self.keywords)}")

    @classmethod
    def from_config(cls, value: str | list[str] | tuple[str, ...]) -> JournalKeywordSet:
        """Build from a single keyword or a list of keywords.

        Raises:
            ConfigurationError: If no usable keyword remains.
        """
        raw = [value] if isinstance(value, str) else list(value or [])
        slugs = []
        for keyword in raw:
            slug = sluggify_keyword(keyword) if isinstance(keyword, str) else ""
            if not slug:
                raise ConfigurationError(f"Invalid journal keyword: {keyword!r}")
            slugs.append(slug)
        return cls(tuple(sorted(set(slugs))))

    def __iter__(self):
        return iter(self.keywords)

    def __len__(self) -> int:
        return len(self.keywords)


# A keyword ends at the next keyword, another component's delimiter, the
# extension or the end of the name.
_KEYWORD_END = r"(?=[_.@=-]|$)"


def keyword_fragment(keywords: JournalKeywordSet) -> str:
    """Regex fragment matching the sorted journal keyword run, e.g. ``_journal_work``.

    The run starts after a keyword separator, which is also the last character
    of the ``__`` segment delimiter.
    """
    escaped = [re.escape(k) for k in sorted(keywords)]
    return KEYWORD_SEPARATOR + KEYWORD_SEPARATOR.join(escaped) + _KEYWORD_END
