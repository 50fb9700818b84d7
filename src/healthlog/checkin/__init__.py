"""Duplicate check-in detection for the morning/afternoon slots."""

from .window import SLOT_TARGETS, CheckResult, SlotWindowChecker, slot_for

__all__ = [
    "SLOT_TARGETS",
    "CheckResult",
    "SlotWindowChecker",
    "slot_for",
]
