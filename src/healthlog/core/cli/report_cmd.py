"""healthlog report — rebuild the static dashboard from all entries."""

from __future__ import annotations

import sys
from datetime import datetime

import click


@click.command()
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Where to write the HTML report.")
@click.pass_context
def report(ctx: click.Context, output: str | None) -> None:
    """Aggregate all entries and write the HTML dashboard."""
    from loguru import logger

    from healthlog.core.cli.common import load_settings
    from healthlog.core.exceptions import FileIOError
    from healthlog.entries.store import DirectoryEntryStore, load_entries
    from healthlog.report.renderer import HtmlRenderer, write_report
    from healthlog.summary.aggregator import aggregate

    settings = load_settings(ctx)
    tz = settings.checker.tzinfo
    entries_dir = settings.paths.entries_dir

    logger.info(f"Loading health data from {entries_dir}...")
    entries = load_entries(DirectoryEntryStore(entries_dir, tz), tz)
    logger.info(f"Loaded {len(entries)} entries")

    aggregation = aggregate(entries)
    if aggregation is None:
        click.echo(f"No data files found in {entries_dir}", err=True)
        sys.exit(1)

    html = HtmlRenderer().render(aggregation, generated_at=datetime.now(tz))
    try:
        path = write_report(output or settings.paths.report_file, html)
    except FileIOError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Dashboard updated at {path} ({aggregation.summary.total_entries} entries)")
