"""Turn raw entries into summary statistics and display rows.

All functions are pure and read-only over their input.  ``aggregate``
returns None for an empty input so callers can decide whether "no data"
is fatal.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from loguru import logger

from healthlog.entries.models import Entry, parse_clock

from .models import Aggregation, HeadacheCount, PainSeverity, ReportRow, SummaryStatistics

MINUTES_PER_DAY = 24 * 60
NO_HEADACHE = "none"

# (upper bound inclusive, severity); anything above the last bound is HIGH
_PAIN_BANDS: list[tuple[int, PainSeverity]] = [
    (2, PainSeverity.LOW),
    (5, PainSeverity.MODERATE),
    (7, PainSeverity.ELEVATED),
]


def round1(value: float) -> float:
    """Round half-up to one decimal place (6.75 -> 6.8, 6.25 -> 6.3)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def sleep_hours(bedtime: str | None, wake_time: str | None) -> float | None:
    """Hours slept between two ``HH:MM`` clock times.

    A wake time earlier than the bedtime is taken to be the next day, so the
    result is never negative.  Returns None if either time is missing.
    """
    if bedtime is None or wake_time is None:
        return None

    bed_hour, bed_min = parse_clock(bedtime)
    wake_hour, wake_min = parse_clock(wake_time)

    bed_minutes = bed_hour * 60 + bed_min
    wake_minutes = wake_hour * 60 + wake_min
    if wake_minutes < bed_minutes:
        wake_minutes += MINUTES_PER_DAY

    return round1((wake_minutes - bed_minutes) / 60)


def average(values: Iterable[float | int | None]) -> float | None:
    """Mean of the present values, rounded to one decimal; None if there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return round1(sum(present) / len(present))


def coffee_ratio(entries: Sequence[Entry]) -> str:
    coffee_count = sum(1 for e in entries if e.coffee is True)
    return f"{coffee_count}/{len(entries)}"


def most_common_headache(entries: Iterable[Entry]) -> HeadacheCount | None:
    """Most frequent headache type, ignoring missing values and ``"none"``.

    On a tie the type seen first wins, so the result depends on input order.
    """
    counts = Counter(
        e.headache_type for e in entries if e.headache_type is not None and e.headache_type != NO_HEADACHE
    )
    if not counts:
        return None
    # max() keeps the first maximal key; Counter preserves insertion order
    label = max(counts, key=counts.__getitem__)
    return HeadacheCount(label=label, count=counts[label])


def sort_newest_first(entries: Iterable[Entry]) -> list[Entry]:
    """Newest timestamp first; entries with equal timestamps keep their input order."""
    return sorted(entries, key=lambda e: e.timestamp, reverse=True)


def classify_pain(level: int | None) -> PainSeverity:
    if level is None or level < 0:
        return PainSeverity.UNKNOWN
    for upper, severity in _PAIN_BANDS:
        if level <= upper:
            return severity
    return PainSeverity.HIGH


def summarize(entries: Sequence[Entry]) -> SummaryStatistics:
    return SummaryStatistics(
        total_entries=len(entries),
        avg_sleep_hours=average(sleep_hours(e.bedtime, e.wake_time) for e in entries),
        avg_pain_level=average(e.pain_level for e in entries),
        coffee_ratio=coffee_ratio(entries),
        most_common_headache=most_common_headache(entries),
        avg_night_wakings=average(e.night_waking_count for e in entries),
    )


def build_row(entry: Entry) -> ReportRow:
    return ReportRow(
        entry=entry,
        date=entry.timestamp.date(),
        sleep_hours=sleep_hours(entry.bedtime, entry.wake_time),
        night_wakings=entry.night_waking_count,
        pain_severity=classify_pain(entry.pain_level),
    )


def aggregate(entries: Sequence[Entry]) -> Aggregation | None:
    """Summarize ``entries`` and order them newest first for display.

    Returns:
        The Aggregation, or None when there are no entries.
    """
    if not entries:
        logger.info("No entries to aggregate")
        return None

    summary = summarize(entries)
    ordered = sort_newest_first(entries)
    logger.debug(f"Aggregated {summary.total_entries} entries")
    return Aggregation(summary=summary, entries=ordered, rows=[build_row(e) for e in ordered])
