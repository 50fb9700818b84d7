"""Check-in entries and the stores that hold them."""

from .models import Entry, Slot
from .store import DirectoryEntryStore, EntryStore, format_identifier, load_entries, parse_identifier

__all__ = [
    "DirectoryEntryStore",
    "Entry",
    "EntryStore",
    "Slot",
    "format_identifier",
    "load_entries",
    "parse_identifier",
]
