"""Parsing of caller-supplied date text."""

from __future__ import annotations

from datetime import datetime, timedelta

from daybook.core.exceptions import InvalidDateError

_RELATIVE_DAYS = {"today": 0, "yesterday": -1, "tomorrow": 1}
_EXTRA_FORMATS = ("%Y-%m-%d %H:%M", "%Y%m%d", "%Y%m%dT%H%M%S")


def parse_date(text: str | None, now: datetime | None = None) -> datetime:
    """Validate date text and return a datetime.

    Accepts ISO-8601 dates and datetimes, ``YYYY-MM-DD HH:MM``, compact
    ``YYYYMMDD`` and note identifiers, and the words ``today``,
    ``yesterday`` and ``tomorrow``. Empty text means now.

    Raises:
        InvalidDateError: If the text is not a recognizable date.
    """
    now = now or datetime.now()
    if text is None or not text.strip():
        return now

    text = text.strip()
    offset = _RELATIVE_DAYS.get(text.lower())
    if offset is not None:
        return now + timedelta(days=offset)

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _EXTRA_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise InvalidDateError(f"Not a valid date: {text!r}")
