"""
healthlog exception hierarchy.

All healthlog exceptions inherit from HealthLogError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes.
"""


class HealthLogError(Exception):
    """Base exception class for all healthlog errors."""


class ConfigurationError(HealthLogError):
    """Raised for configuration errors (missing keys, invalid values)."""


class EntryError(HealthLogError):
    """Raised for problems with a single stored entry."""


class EntryParseError(EntryError, ValueError):
    """Raised when an entry payload cannot be turned into an Entry."""


class EntryExistsError(EntryError):
    """Raised when adding an entry whose identifier is already taken."""


class FileIOError(HealthLogError):
    """Raised for file I/O errors."""
