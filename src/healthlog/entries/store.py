"""EntryStore protocol and the flat-directory implementation.

Entries live as ``YYYY-MM-DD-HHmm.json`` files in one directory.  The
identifier (file stem) encodes the local date and time of the check-in.
"""

from __future__ import annotations

import json
import re
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from healthlog.core.exceptions import EntryExistsError, EntryParseError
from healthlog.core.utils.file_io import exclusive_create

from .models import Entry

IDENTIFIER_FORMAT = "%Y-%m-%d-%H%M"
ENTRY_SUFFIX = ".json"

_IDENTIFIER_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(\d{2})(\d{2})$")


def parse_identifier(identifier: str) -> datetime | None:
    """Parse a ``YYYY-MM-DD-HHmm`` identifier into a naive local datetime.

    Returns None for anything that isn't a real date and time.
    """
    match = _IDENTIFIER_RE.match(identifier)
    if not match:
        return None
    year, month, day, hour, minute = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        return None


def format_identifier(moment: datetime) -> str:
    return moment.strftime(IDENTIFIER_FORMAT)


@runtime_checkable
class EntryStore(Protocol):
    """Read access to stored entries.

    Implementations yield ``(identifier, raw bytes)`` pairs; decoding the
    bytes into ``Entry`` objects is left to ``load_entries``.
    """

    def list(self) -> list[tuple[str, bytes]]:
        """Return every stored entry as (identifier, raw payload)."""
        ...


class DirectoryEntryStore:
    """Entries as JSON files in a single directory.

    Example::

        store = DirectoryEntryStore("~/.healthlog/data", ZoneInfo("America/Detroit"))
        store.add(entry)
        entries = load_entries(store, store.tz)
    """

    def __init__(self, directory: str | Path, tz: tzinfo | None = None):
        self.directory = Path(directory).expanduser()
        self.tz = tz

    def path_for(self, identifier: str) -> Path:
        return self.directory / f"{identifier}{ENTRY_SUFFIX}"

    def _files(self) -> list[Path]:
        if not self.directory.is_dir():
            return []
        # Newest identifier first
        return sorted(self.directory.glob(f"*{ENTRY_SUFFIX}"), key=lambda p: p.name, reverse=True)

    def identifiers(self) -> list[str]:
        """Stems of all entry files, newest first. Does not read file bodies."""
        return [path.stem for path in self._files()]

    def list(self) -> list[tuple[str, bytes]]:
        results = []
        for path in self._files():
            try:
                results.append((path.stem, path.read_bytes()))
            except OSError as e:
                logger.warning(f"Error reading {path}: {e}")
        return results

    def add(self, entry: Entry) -> Path:
        """Persist a new entry under the identifier derived from its timestamp.

        Raises:
            EntryExistsError: If an entry with the same identifier exists.
        """
        moment = entry.timestamp.astimezone(self.tz) if self.tz else entry.timestamp
        identifier = format_identifier(moment)
        path = self.path_for(identifier)
        content = json.dumps(entry.to_dict(), indent=2) + "\n"
        try:
            exclusive_create(path, content)
        except FileExistsError:
            raise EntryExistsError(f"An entry for {identifier} already exists: {path}") from None
        logger.info(f"Saved entry {identifier} to {path}")
        return path


def load_entries(store: EntryStore, tz: tzinfo | None = None) -> list[Entry]:
    """Decode every payload in ``store`` into an Entry, in store order.

    Payloads that are not valid JSON or fail validation are logged and
    skipped; they never abort the load.
    """
    entries = []
    for identifier, raw in store.list():
        try:
            data = json.loads(raw)
            fallback = parse_identifier(identifier)
            entries.append(Entry.from_dict(data, tz=tz, fallback_timestamp=fallback))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Error parsing {identifier}: {e}")
        except EntryParseError as e:
            logger.warning(f"Skipping invalid entry {identifier}: {e}")
    return entries
