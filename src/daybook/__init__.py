"""daybook — journal entries for a plain-file note collection."""

__version__ = "0.1.0"
