"""Report rendering for aggregated entries."""

from .renderer import HtmlRenderer, Renderer, write_report

__all__ = [
    "HtmlRenderer",
    "Renderer",
    "write_report",
]
