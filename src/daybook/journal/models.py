"""Resolution results for journal lookups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ResolutionOutcome(Enum):
    """How a locate-or-create call ended."""

    FOUND = "found"  # exactly one existing entry
    CREATED = "created"  # no entry, a new one was written
    AMBIGUOUS = "ambiguous"  # several entries, caller must choose


@dataclass(frozen=True)
class Found:
    path: Path
    outcome = ResolutionOutcome.FOUND


@dataclass(frozen=True)
class Created:
    path: Path
    outcome = ResolutionOutcome.CREATED


@dataclass(frozen=True)
class Ambiguous:
    """Several entries match the same day.

    Attributes:
        candidates: Matching paths in scan order.
    """

    candidates: tuple[Path, ...]
    outcome = ResolutionOutcome.AMBIGUOUS

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self.candidates)
        return f"Ambiguous(candidates=[{names}])"


ResolutionResult = Found | Created | Ambiguous
