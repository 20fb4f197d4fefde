"""daybook journal / check / list — journal entry commands."""

from __future__ import annotations

import sys

import click

from daybook.core.exceptions import DaybookError


@click.command()
@click.argument("date", required=False)
@click.option("--new", "force_new", is_flag=True, help="Always create a new entry.")
@click.option("--no-input", is_flag=True, help="Never prompt; fail when entries are ambiguous.")
@click.pass_context
def journal(ctx: click.Context, date: str | None, force_new: bool, no_input: bool) -> None:
    """Print the path of the journal entry for DATE, creating it if needed.

    DATE defaults to today; ISO dates, "yesterday" and "tomorrow" are accepted.
    """
    from daybook.core.cli.common import build_resolver, load_config
    from daybook.journal import parse_date

    config = load_config(ctx.obj.get("config_file"), ctx.obj.get("verbose", False))
    resolver = build_resolver(config, interactive=not no_input)

    try:
        day = parse_date(date)
        path = resolver.new_entry(day) if force_new else resolver.path_for(day)
    except DaybookError as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(path))


@click.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def check(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Tell whether each NAME is a journal entry file name."""
    from daybook.core.cli.common import build_resolver, load_config

    config = load_config(ctx.obj.get("config_file"), ctx.obj.get("verbose", False))
    resolver = build_resolver(config, interactive=False)

    all_journal = True
    for name in names:
        is_journal = resolver.is_journal_filename(name)
        all_journal = all_journal and is_journal
        click.echo(f"{'yes' if is_journal else 'no'}\t{name}")

    if not all_journal:
        sys.exit(1)


@click.command(name="list")
@click.option("--from", "start", default=None, help="Earliest date (inclusive).")
@click.option("--to", "end", default=None, help="Latest date (inclusive).")
@click.pass_context
def list_entries(ctx: click.Context, start: str | None, end: str | None) -> None:
    """List journal entries, oldest first."""
    from daybook.core.cli.common import load_config
    from daybook.journal import JournalSettings, NoteJournalStore, parse_date

    config = load_config(ctx.obj.get("config_file"), ctx.obj.get("verbose", False))
    try:
        store = NoteJournalStore(JournalSettings.from_config(config))
        start_day = parse_date(start).date() if start else None
        end_day = parse_date(end).date() if end else None
    except DaybookError as e:
        raise click.ClickException(str(e)) from e

    for path in store.list_entries(start_day, end_day):
        meta = store.get_metadata(path)
        click.echo(f"{meta.get('date', '')}\t{meta.get('title', '')}\t{path}")
