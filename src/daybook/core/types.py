"""Shared type aliases used across daybook."""

from pathlib import Path

# Path types
PathLike = str | Path
