"""Shared setup logic for CLI commands."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import click

from healthlog.core.config import Config
from healthlog.core.exceptions import ConfigurationError

HEALTHLOG_DIR = Path.home() / ".healthlog"
DEFAULT_CONFIG_PATH = HEALTHLOG_DIR / "config.yaml"


def load_settings(ctx: click.Context):
    """Load and validate config, then configure logging.

    Exits with status 1 on invalid configuration.
    """
    from healthlog.core.utils.logging import setup_logging

    obj = ctx.find_root().obj or {}
    try:
        settings = Config(config_file=obj.get("config_path")).validated()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(level=settings.logging.level, log_file=settings.logging.file, verbose=obj.get("verbose", False))
    return settings


def resolve_now(value: str | None, tz) -> datetime:
    """Current time in ``tz``, or ``value`` (ISO 8601) when given.

    Naive ``value`` strings are taken to be in ``tz``.
    """
    if value is None:
        return datetime.now(tz)
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"not an ISO 8601 datetime: {value!r}", param_hint="--now") from None
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)
