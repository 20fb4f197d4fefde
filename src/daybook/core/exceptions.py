"""
Daybook exception hierarchy.

All daybook exceptions inherit from DaybookError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class DaybookError(Exception):
    """Base exception class for all daybook errors."""


class ConfigurationError(DaybookError):
    """Raised for configuration errors (missing keys, invalid values)."""


class InvalidDateError(DaybookError):
    """Raised when caller-supplied date text cannot be parsed."""


class FileIOError(DaybookError):
    """Raised for file I/O errors."""


class NoteCreationError(FileIOError):
    """Raised when a note file cannot be written."""


class EntrySelectionError(DaybookError):
    """Raised when a chosen journal entry is not a valid candidate."""
