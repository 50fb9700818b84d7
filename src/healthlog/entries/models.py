"""Health check-in entry model.

An ``Entry`` is one persisted check-in.  Raw payloads are loose JSON
objects where every field except the timestamp is optional; ``from_dict``
checks presence and types once so the rest of the package works with
plain attributes instead of dict lookups.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from enum import StrEnum
from typing import Any

from healthlog.core.exceptions import EntryParseError

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

_KNOWN_KEYS = {
    "timestamp",
    "slot",
    "bedtime",
    "wake_time",
    "night_wakings",
    "coffee",
    "pain_level",
    "headache_type",
    "exercise",
}


class Slot(StrEnum):
    MORNING = "morning"
    AFTERNOON = "afternoon"


def parse_clock(value: str) -> tuple[int, int]:
    """Split an ``HH:MM`` string into (hour, minute).

    Raises:
        ValueError: If the value is not a valid 24-hour clock time.
    """
    match = _CLOCK_RE.match(value.strip())
    if not match:
        raise ValueError(f"expected HH:MM, got {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"clock time out of range: {value!r}")
    return hour, minute


@dataclass(frozen=True)
class Entry:
    """A single health check-in.

    Attributes:
        timestamp: When the entry was recorded (timezone-aware).
        slot: Which daily check-in this is, if recorded.
        bedtime: Local bedtime as ``HH:MM``.
        wake_time: Local wake time as ``HH:MM``.
        night_wakings: Wake-up events during the night; only the count is used.
        coffee: Whether coffee was had. ``None`` means not recorded.
        pain_level: Pain on a 0-10+ scale.
        headache_type: Free-text label; ``"none"`` means no headache.
        exercise: Free-text exercise note.
        extra: Payload keys this model does not know about, kept for round trips.
    """

    timestamp: datetime
    slot: Slot | None = None
    bedtime: str | None = None
    wake_time: str | None = None
    night_wakings: tuple[Any, ...] | None = None
    coffee: bool | None = None
    pain_level: int | None = None
    headache_type: str | None = None
    exercise: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def night_waking_count(self) -> int:
        """Number of night wakings; a missing list counts as zero."""
        return len(self.night_wakings) if self.night_wakings is not None else 0

    @classmethod
    def from_dict(
        cls,
        data: Any,
        tz: tzinfo | None = None,
        fallback_timestamp: datetime | None = None,
    ) -> Entry:
        """Build an Entry from a decoded JSON payload.

        Args:
            data: Decoded payload (must be a dict).
            tz: Zone applied to naive timestamps. Defaults to UTC.
            fallback_timestamp: Used when the payload has no ``timestamp``
                (typically the time encoded in the entry identifier).

        Raises:
            EntryParseError: If the payload is not an object or a field has
                the wrong type or format.
        """
        if not isinstance(data, dict):
            raise EntryParseError(f"entry payload must be an object, got {type(data).__name__}")

        tz = tz or timezone.utc
        timestamp = _parse_timestamp(data.get("timestamp"), fallback_timestamp)
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=tz)

        slot = data.get("slot")
        if slot is not None:
            try:
                slot = Slot(slot)
            except ValueError:
                raise EntryParseError(f"unknown slot {slot!r}") from None

        bedtime = _optional_clock(data, "bedtime")
        wake_time = _optional_clock(data, "wake_time")

        night_wakings = data.get("night_wakings")
        if night_wakings is not None:
            if not isinstance(night_wakings, list):
                raise EntryParseError(f"night_wakings must be a list, got {type(night_wakings).__name__}")
            night_wakings = tuple(night_wakings)

        coffee = data.get("coffee")
        if coffee is not None and not isinstance(coffee, bool):
            raise EntryParseError(f"coffee must be true/false, got {coffee!r}")

        pain_level = data.get("pain_level")
        if pain_level is not None and (isinstance(pain_level, bool) or not isinstance(pain_level, int)):
            raise EntryParseError(f"pain_level must be an integer, got {pain_level!r}")

        return cls(
            timestamp=timestamp,
            slot=slot,
            bedtime=bedtime,
            wake_time=wake_time,
            night_wakings=night_wakings,
            coffee=coffee,
            pain_level=pain_level,
            headache_type=_optional_str(data, "headache_type"),
            exercise=_optional_str(data, "exercise"),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to a JSON-ready dict, omitting absent fields."""
        out: dict[str, Any] = {"timestamp": self.timestamp.isoformat()}
        if self.slot is not None:
            out["slot"] = self.slot.value
        if self.bedtime is not None:
            out["bedtime"] = self.bedtime
        if self.wake_time is not None:
            out["wake_time"] = self.wake_time
        if self.night_wakings is not None:
            out["night_wakings"] = list(self.night_wakings)
        if self.coffee is not None:
            out["coffee"] = self.coffee
        if self.pain_level is not None:
            out["pain_level"] = self.pain_level
        if self.headache_type is not None:
            out["headache_type"] = self.headache_type
        if self.exercise is not None:
            out["exercise"] = self.exercise
        out.update(self.extra)
        return out


def _parse_timestamp(value: Any, fallback: datetime | None) -> datetime:
    if value is None:
        if fallback is None:
            raise EntryParseError("entry has no timestamp")
        return fallback
    if not isinstance(value, str):
        raise EntryParseError(f"timestamp must be a string, got {type(value).__name__}")
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise EntryParseError(f"invalid timestamp {value!r}: {e}") from None


def _optional_clock(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise EntryParseError(f"{key} must be an HH:MM string, got {value!r}")
    try:
        parse_clock(value)
    except ValueError as e:
        raise EntryParseError(f"{key}: {e}") from None
    return value.strip()


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise EntryParseError(f"{key} must be a string, got {value!r}")
    return value
