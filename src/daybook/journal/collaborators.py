"""Protocols for the collaborators the journal resolver depends on.

The resolver only talks to these contracts. Default implementations live in
``daybook.notes`` (creation, scanning), ``daybook.journal.templates`` and
``daybook.core.cli.common`` (interaction).
"""

from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class NoteCreator(Protocol):
    """Writes a note file and returns its final path."""

    def create(
        self,
        title: str,
        keywords,
        *,
        directory: Path,
        identifier: str | None = None,
        signature: str | None = None,
        date: date | datetime | None = None,
        template: str | None = None,
    ) -> Path: ...


@runtime_checkable
class NoteScanner(Protocol):
    """Lists files directly under ``root`` whose names match ``pattern``."""

    def scan(self, root: Path, pattern: re.Pattern) -> list[Path]: ...


@runtime_checkable
class TemplateLookup(Protocol):
    def lookup(self, key: str) -> str | None: ...


@runtime_checkable
class Interaction(Protocol):
    """Human decisions the resolver cannot make on its own."""

    def choose_entry(self, candidates: list[Path]) -> Path:
        """Pick one of several entries for the same day. Order must be kept."""
        ...

    def prompt_title(self, default: str) -> str:
        """Ask for a title, offering ``default``."""
        ...

    def choose_template(self, names: list[str]) -> str:
        """Pick a template by name."""
        ...
