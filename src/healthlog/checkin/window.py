"""Slot window check: is a check-in already logged for the current slot?

The day has two check-in slots, morning and afternoon, split at 13:00
local time.  An existing entry from the same calendar day within
``window_minutes`` of "now" means the current check-in is a duplicate.

The caller supplies "now" (with whatever timezone it wants); nothing here
reads the clock or process-wide timezone settings.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any

from loguru import logger

from healthlog.core.config import DEFAULT_WINDOW_MINUTES
from healthlog.core.exceptions import ConfigurationError
from healthlog.entries.models import Slot
from healthlog.entries.store import format_identifier, parse_identifier

AFTERNOON_START_HOUR = 13

SLOT_TARGETS: dict[Slot, time] = {
    Slot.MORNING: time(9, 30),
    Slot.AFTERNOON: time(16, 30),
}


def slot_for(now: datetime) -> Slot:
    """Morning before 13:00, afternoon from 13:00 on."""
    return Slot.MORNING if now.hour < AFTERNOON_START_HOUR else Slot.AFTERNOON


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a slot window check.

    ``to_dict()`` is the machine-readable record consumed by automation;
    keep its keys and value types stable.
    """

    skip: bool
    slot: Slot
    current_time: datetime
    target_time: time
    recent_entry: str | None = None
    recent_entry_time: datetime | None = None

    @property
    def current_date(self) -> str:
        return self.current_time.strftime("%Y-%m-%d")

    @property
    def minutes_from_target(self) -> int:
        """Signed minutes between now and the slot's target time (positive = late)."""
        target = self.current_time.replace(
            hour=self.target_time.hour, minute=self.target_time.minute, second=0, microsecond=0
        )
        return int((self.current_time - target).total_seconds() // 60)

    def to_dict(self) -> dict[str, Any]:
        return {
            "skip": self.skip,
            "slot": self.slot.value,
            "current_time": self.current_time.strftime("%Y-%m-%d %H:%M"),
            "current_date": self.current_date,
            "target_time": self.target_time.strftime("%H:%M"),
            "recent_entry": self.recent_entry,
        }


class SlotWindowChecker:
    """Decide whether a check-in is already logged near ``now``.

    Example::

        checker = SlotWindowChecker(window_minutes=90)
        result = checker.check(datetime.now(tz), store.identifiers())
        if result.skip:
            ...
    """

    def __init__(self, window_minutes: int = DEFAULT_WINDOW_MINUTES):
        if window_minutes < 0:
            raise ConfigurationError(f"window_minutes must be >= 0, got {window_minutes}")
        self.window_minutes = window_minutes

    def check(self, now: datetime, entries: Iterable[str | datetime]) -> CheckResult:
        """Scan ``entries`` for one on today's date within the window.

        Args:
            now: Reference time. Its date and timezone define "today".
            entries: Entry identifiers (``YYYY-MM-DD-HHmm``) or datetimes.
                Naive values are taken to be in ``now``'s timezone.
                If ``now`` itself is naive it is taken as system local time,
                and aware entries are converted to local time.

        Returns:
            CheckResult with ``skip=True`` and the first matching entry if one
            is found. Which entry is reported when several match depends on
            iteration order; rely on it only for existence.
        """
        slot = slot_for(now)
        today = now.date()

        for item in entries:
            if isinstance(item, datetime):
                identifier = format_identifier(item)
                entry_time = item
            else:
                identifier = item
                entry_time = parse_identifier(item)
                if entry_time is None:
                    logger.debug(f"Ignoring entry with unparseable identifier: {item!r}")
                    continue

            if entry_time.tzinfo is None:
                entry_time = entry_time.replace(tzinfo=now.tzinfo)
            elif now.tzinfo is None:
                entry_time = entry_time.astimezone().replace(tzinfo=None)
            else:
                entry_time = entry_time.astimezone(now.tzinfo)

            # Other days never count, even just across midnight
            if entry_time.date() != today:
                continue

            diff_minutes = abs((now - entry_time).total_seconds()) / 60
            if diff_minutes <= self.window_minutes:
                return CheckResult(
                    skip=True,
                    slot=slot,
                    current_time=now,
                    target_time=SLOT_TARGETS[slot],
                    recent_entry=identifier,
                    recent_entry_time=entry_time,
                )

        return CheckResult(skip=False, slot=slot, current_time=now, target_time=SLOT_TARGETS[slot])
