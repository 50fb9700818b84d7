"""healthlog log — record a new check-in."""

from __future__ import annotations

import sys

import click

from healthlog.entries.models import Slot


@click.command()
@click.option("--slot", type=click.Choice([s.value for s in Slot]), default=None, help="Defaults to the current slot.")
@click.option("--bedtime", default=None, help="Bedtime as HH:MM.")
@click.option("--wake-time", default=None, help="Wake time as HH:MM.")
@click.option("--waking", "wakings", multiple=True, help="A night waking (repeatable).")
@click.option("--coffee/--no-coffee", default=None, help="Whether you had coffee.")
@click.option("--pain", type=click.IntRange(min=0), default=None, help="Pain level, 0-10.")
@click.option("--headache", default=None, help='Headache type, or "none".')
@click.option("--exercise", default=None, help="Exercise note.")
@click.option("--now", "now_value", default=None, help="Entry time (ISO 8601) instead of the clock.")
@click.pass_context
def log(
    ctx: click.Context,
    slot: str | None,
    bedtime: str | None,
    wake_time: str | None,
    wakings: tuple[str, ...],
    coffee: bool | None,
    pain: int | None,
    headache: str | None,
    exercise: str | None,
    now_value: str | None,
) -> None:
    """Save a check-in entry timestamped now."""
    from healthlog.checkin.window import slot_for
    from healthlog.core.cli.common import load_settings, resolve_now
    from healthlog.core.exceptions import EntryError
    from healthlog.entries.models import Entry
    from healthlog.entries.store import DirectoryEntryStore

    settings = load_settings(ctx)
    tz = settings.checker.tzinfo
    now = resolve_now(now_value, tz)

    payload = {
        "timestamp": now.isoformat(timespec="seconds"),
        "slot": slot or slot_for(now).value,
        "bedtime": bedtime,
        "wake_time": wake_time,
        "night_wakings": list(wakings) if wakings else None,
        "coffee": coffee,
        "pain_level": pain,
        "headache_type": headache,
        "exercise": exercise,
    }
    try:
        entry = Entry.from_dict(payload, tz=tz)
        path = DirectoryEntryStore(settings.paths.entries_dir, tz).add(entry)
    except EntryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Saved {path}")
