"""healthlog check — is a check-in already logged for this slot?"""

from __future__ import annotations

import json

import click


@click.command()
@click.option("--window", type=click.IntRange(min=0), default=None, help="Duplicate window in minutes.")
@click.option("--now", "now_value", default=None, help="Reference time (ISO 8601) instead of the clock.")
@click.pass_context
def check(ctx: click.Context, window: int | None, now_value: str | None) -> None:
    """Print whether the current slot's check-in can be skipped, as JSON."""
    from loguru import logger

    from healthlog.checkin.window import SlotWindowChecker
    from healthlog.core.cli.common import load_settings, resolve_now
    from healthlog.entries.store import DirectoryEntryStore

    settings = load_settings(ctx)
    tz = settings.checker.tzinfo
    settings.paths.entries_dir.mkdir(parents=True, exist_ok=True)

    store = DirectoryEntryStore(settings.paths.entries_dir, tz)
    checker = SlotWindowChecker(window if window is not None else settings.checker.window_minutes)
    result = checker.check(resolve_now(now_value, tz), store.identifiers())

    logger.info(
        f"{result.slot.value} slot, {result.minutes_from_target:+d} min from target {result.target_time:%H:%M}"
    )
    click.echo(json.dumps(result.to_dict()))
