"""Title formats for new journal entries.

A title format is one of three variants:

- ``PresetStyle``: one of the named calendar styles in ``PRESET_FORMATS``.
- ``CustomFormat``: an arbitrary ``strftime`` format used verbatim.
- ``PromptForTitle``: ask the user, offering the ISO date as the default.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from daybook.core.exceptions import ConfigurationError

# %-d is not portable; {day} is substituted before strftime runs.
PRESET_FORMATS = {
    "day": "%A",
    "day-date-month-year": "%A {day} %B %Y",
    "day-date-month-year-24h": "%A {day} %B %Y %H:%M",
    "day-date-month-year-12h": "%A {day} %B %Y %I:%M %p",
}

PROMPT_DEFAULT_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class PresetStyle:
    style: str

    def __post_init__(self):
        if self.style not in PRESET_FORMATS:
            raise ConfigurationError(f"Unknown title style {self.style!r}, expected one of {sorted(PRESET_FORMATS)}")


@dataclass(frozen=True)
class CustomFormat:
    fmt: str


@dataclass(frozen=True)
class PromptForTitle:
    pass


TitleFormat = PresetStyle | CustomFormat | PromptForTitle


def parse_title_format(value: str | None) -> TitleFormat:
    """Map a configured value to its variant: blank prompts, a preset name is a preset."""
    if not value:
        return PromptForTitle()
    if value in PRESET_FORMATS:
        return PresetStyle(value)
    return CustomFormat(value)


def _strftime(moment: datetime, fmt: str) -> str:
    return moment.strftime(fmt.replace("{day}", str(moment.day)))


def render_title(
    title_format: TitleFormat,
    moment: date | datetime,
    prompt: Callable[[str], str] | None = None,
) -> str:
    """Produce the title of a journal entry for ``moment``.

    Args:
        title_format: The configured variant.
        moment: Date (or datetime) of the entry.
        prompt: Called with the default title when the format asks for input.
            Without it the default is used as is.
    """
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, datetime.min.time())

    if isinstance(title_format, PresetStyle):
        return _strftime(moment, PRESET_FORMATS[title_format.style])
    if isinstance(title_format, CustomFormat):
        return moment.strftime(title_format.fmt)

    default = moment.strftime(PROMPT_DEFAULT_FORMAT)
    if prompt is None:
        return default
    return prompt(default) or default
