"""Daybook CLI — entry point for the journal, check and list commands."""

import click

from daybook import __version__


@click.group()
@click.version_option(version=__version__, package_name="daybook")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (YAML or JSON). Defaults to ~/.daybook/config.yaml.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, verbose: bool) -> None:
    """Daybook — one journal note per day in your note collection."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["verbose"] = verbose


# Register subcommands
from .journal_cmd import check, journal, list_entries

main.add_command(journal)
main.add_command(check)
main.add_command(list_entries)
