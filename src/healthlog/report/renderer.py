"""Static HTML dashboard rendering.

The aggregation core hands an ``Aggregation`` to a ``Renderer``; markup
lives entirely in the jinja2 template shipped with this package.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import jinja2
from loguru import logger

from healthlog.core.utils.file_io import atomic_write
from healthlog.summary.models import Aggregation, PainSeverity

DEFAULT_TITLE = "Health Tracking Dashboard"
TEMPLATE_NAME = "dashboard.html"

MISSING = "-"
UNAVAILABLE = "N/A"

TABLE_HEADINGS = [
    "Date",
    "Slot",
    "Bedtime",
    "Wake Time",
    "Sleep Hours",
    "Night Wakings",
    "Coffee",
    "Pain Level",
    "Headache Type",
    "Exercise",
]

PAIN_CLASSES: dict[PainSeverity, str] = {
    PainSeverity.LOW: "bg-green-100 text-green-800",
    PainSeverity.MODERATE: "bg-yellow-100 text-yellow-800",
    PainSeverity.ELEVATED: "bg-orange-100 text-orange-800",
    PainSeverity.HIGH: "bg-red-100 text-red-800",
    PainSeverity.UNKNOWN: "bg-gray-100 text-gray-800",
}

COFFEE_CLASSES: dict[bool, str] = {
    True: "bg-amber-100 text-amber-800",
    False: "bg-gray-100 text-gray-800",
}


@runtime_checkable
class Renderer(Protocol):
    """Turns an aggregation into a static document."""

    def render(self, aggregation: Aggregation, generated_at: datetime) -> str: ...


def _cell(value: Any) -> Any:
    return MISSING if value is None else value


def _stat(value: Any) -> Any:
    return UNAVAILABLE if value is None else value


class HtmlRenderer:
    """Render the dashboard with jinja2.

    Args:
        title: Page and heading title.
        loader: Template loader override (tests, custom themes).
    """

    def __init__(self, title: str = DEFAULT_TITLE, loader: jinja2.BaseLoader | None = None):
        self.title = title
        self._env = jinja2.Environment(
            loader=loader or jinja2.PackageLoader("healthlog.report", "templates"),
            autoescape=jinja2.select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["cell"] = _cell
        self._env.filters["stat"] = _stat

    def render(self, aggregation: Aggregation, generated_at: datetime) -> str:
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            title=self.title,
            summary=aggregation.summary,
            rows=aggregation.rows,
            headings=TABLE_HEADINGS,
            pain_classes=PAIN_CLASSES,
            coffee_classes=COFFEE_CLASSES,
            generated_at=generated_at,
        )


def write_report(path: str | Path, html: str) -> Path:
    """Atomically replace the report file at ``path``."""
    written = atomic_write(path, html)
    logger.info(f"Dashboard updated at {written}")
    return written
