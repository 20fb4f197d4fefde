"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``DaybookConfig``
instance.  Dict-based access through ``Config.get`` keeps working.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from daybook.notes.filename import COMPONENTS, FILE_TYPES, REQUIRED_COMPONENTS


def _expand(v: Any) -> Any:
    if isinstance(v, str) and v:
        return Path(v).expanduser()
    if isinstance(v, Path):
        return v.expanduser()
    return v


class NotesConfig(BaseModel):
    """The note collection the journal lives in."""

    directory: Path
    file_type: str = "org"
    components_order: list[str] = ["identifier", "signature", "title", "keywords"]

    @field_validator("directory", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        return _expand(v)

    @field_validator("file_type")
    @classmethod
    def _known_file_type(cls, v: str) -> str:
        if v not in FILE_TYPES:
            raise ValueError(f"unknown file type {v!r}, expected one of {sorted(FILE_TYPES)}")
        return v

    @field_validator("components_order", mode="before")
    @classmethod
    def _split_order(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("components_order")
    @classmethod
    def _known_components(cls, v: list[str]) -> list[str]:
        unknown = [c for c in v if c not in COMPONENTS]
        if unknown:
            raise ValueError(f"unknown file name components: {unknown}")
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate file name components: {v}")
        missing = [c for c in REQUIRED_COMPONENTS if c not in v]
        if missing:
            raise ValueError(f"missing file name components: {missing}")
        return v


class JournalConfig(BaseModel):
    """Journal entry settings."""

    directory: Path | None = None
    keyword: list[str] = ["journal"]
    title_format: str | None = "day-date-month-year-24h"
    templates: dict[str, str] = {}

    @field_validator("directory", mode="before")
    @classmethod
    def _empty_is_unset(cls, v: Any) -> Any:
        if v in ("", None):
            return None
        return _expand(v)

    @field_validator("keyword", mode="before")
    @classmethod
    def _listify(cls, v: Any) -> Any:
        # A bare string (or a comma list from an env var) is allowed
        if isinstance(v, str):
            return [part.strip() for part in v.split(",")]
        return v

    @field_validator("keyword")
    @classmethod
    def _non_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one journal keyword is required")
        if any(not k for k in v):
            raise ValueError("journal keywords must be non-empty strings")
        return v

    @field_validator("title_format", mode="before")
    @classmethod
    def _blank_is_prompt(cls, v: Any) -> Any:
        if v == "":
            return None
        return v


class LoggingConfig(BaseModel):
    """Loguru sink settings."""

    level: str = "WARNING"
    file: str = ""


class DaybookConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    notes: NotesConfig = NotesConfig(directory=Path("~/notes"))
    journal: JournalConfig = JournalConfig()
    logging: LoggingConfig = LoggingConfig()
