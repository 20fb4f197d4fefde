"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from daybook.core.config import Config
from daybook.core.exceptions import DaybookError
from daybook.core.utils.logging import setup_logging

DAYBOOK_DIR = Path.home() / ".daybook"
CONFIG_PATH = DAYBOOK_DIR / "config.yaml"


def load_config(config_file: str | None = None, verbose: bool = False) -> Config:
    """Load config and configure logging from its ``logging`` section."""
    try:
        config = Config(config_file=config_file or str(CONFIG_PATH))
    except DaybookError as e:
        raise click.ClickException(str(e)) from e

    level = "DEBUG" if verbose else config.get("logging.level", "WARNING")
    log_file = config.get("logging.file") or None
    try:
        setup_logging(level=level, log_file=log_file)
    except ValueError as e:
        raise click.ClickException(f"Invalid logging configuration: {e}") from e
    return config


def build_resolver(config: Config, interactive: bool = True):
    """Create a JournalResolver from config, prompting through click when interactive."""
    from daybook.journal import JournalResolver, JournalSettings

    try:
        settings = JournalSettings.from_config(config)
    except DaybookError as e:
        raise click.ClickException(str(e)) from e
    return JournalResolver(settings, interaction=ClickInteraction() if interactive else None)


class ClickInteraction:
    """Terminal prompts for the decisions the resolver leaves to a human."""

    def choose_entry(self, candidates: list[Path]) -> Path:
        click.echo("Several journal entries match:")
        for i, path in enumerate(candidates, start=1):
            click.echo(f"  {i}. {path.name}")
        index = click.prompt("Entry", type=click.IntRange(1, len(candidates)), default=1)
        return candidates[index - 1]

    def prompt_title(self, default: str) -> str:
        return click.prompt("Title", default=default)

    def choose_template(self, names: list[str]) -> str:
        return click.prompt("Template", type=click.Choice(names), default=names[0])
