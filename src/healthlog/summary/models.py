"""Derived summary types.

Everything here is computed per aggregation run and never persisted.
``None`` marks a statistic with no underlying data ("unavailable").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from healthlog.entries.models import Entry


class PainSeverity(StrEnum):
    """Pain level bands used to colour the report."""

    LOW = "low"  # 0-2
    MODERATE = "moderate"  # 3-5
    ELEVATED = "elevated"  # 6-7
    HIGH = "high"  # 8+
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HeadacheCount:
    label: str
    count: int

    def __str__(self) -> str:
        return f"{self.label} ({self.count}x)"


@dataclass(frozen=True)
class SummaryStatistics:
    """Roll-up of all entries in the store.

    Attributes:
        total_entries: Number of entries aggregated.
        avg_sleep_hours: Mean sleep over entries with both bedtime and wake time.
        avg_pain_level: Mean pain over entries that recorded it.
        coffee_ratio: ``"<coffee entries>/<total>"``.
        most_common_headache: Most frequent headache type, ``"none"`` excluded.
        avg_night_wakings: Mean wakings per entry, missing lists counted as 0.
    """

    total_entries: int
    avg_sleep_hours: float | None
    avg_pain_level: float | None
    coffee_ratio: str
    most_common_headache: HeadacheCount | None
    avg_night_wakings: float | None


@dataclass(frozen=True)
class ReportRow:
    """One table row: an entry plus its per-entry derived values."""

    entry: Entry
    date: date
    sleep_hours: float | None
    night_wakings: int
    pain_severity: PainSeverity


@dataclass
class Aggregation:
    """Result of aggregating a non-empty set of entries."""

    summary: SummaryStatistics
    entries: list[Entry] = field(default_factory=list)  # newest first
    rows: list[ReportRow] = field(default_factory=list)
