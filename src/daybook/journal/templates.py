"""Template lookup for new journal entries."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from loguru import logger

JOURNAL_TEMPLATE_KEY = "journal"


class TemplateRegistry:
    """Named note templates, keyed by symbolic name.

    ``lookup("journal")`` returns the template stored under that key. When
    templates exist but none has the key, ``choose`` picks one by name;
    without ``choose``, or with no templates at all, there is no template.
    """

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        choose: Callable[[list[str]], str] | None = None,
    ):
        self.templates = dict(templates or {})
        self.choose = choose

    def lookup(self, key: str = JOURNAL_TEMPLATE_KEY) -> str | None:
        if key in self.templates:
            return self.templates[key]
        if not self.templates or self.choose is None:
            return None

        names = sorted(self.templates)
        name = self.choose(names)
        if name not in self.templates:
            logger.warning(f"Ignoring unknown template {name!r}")
            return None
        return self.templates[name]
