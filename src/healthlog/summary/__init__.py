"""Summary statistics over stored entries."""

from .aggregator import (
    aggregate,
    average,
    classify_pain,
    coffee_ratio,
    most_common_headache,
    sleep_hours,
    sort_newest_first,
)
from .models import Aggregation, HeadacheCount, PainSeverity, ReportRow, SummaryStatistics

__all__ = [
    "Aggregation",
    "HeadacheCount",
    "PainSeverity",
    "ReportRow",
    "SummaryStatistics",
    "aggregate",
    "average",
    "classify_pain",
    "coffee_ratio",
    "most_common_headache",
    "sleep_hours",
    "sort_newest_first",
]
