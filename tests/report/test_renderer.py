"""Tests for healthlog.report.renderer."""

import os
from datetime import datetime, timezone

import jinja2

from healthlog.entries.models import Entry, Slot
from healthlog.report.renderer import HtmlRenderer, Renderer, write_report
from healthlog.summary.aggregator import aggregate

GENERATED = datetime(2025, 1, 6, 8, 0, 0, tzinfo=timezone.utc)


def sample_aggregation():
    return aggregate(
        [
            Entry(
                timestamp=datetime(2025, 1, 5, 9, 30, tzinfo=timezone.utc),
                slot=Slot.MORNING,
                bedtime="23:00",
                wake_time="07:00",
                night_wakings=("03:00", "05:10"),
                coffee=True,
                pain_level=7,
                headache_type="migraine",
                exercise="<script>alert(1)</script>",
            ),
            Entry(timestamp=datetime(2025, 1, 5, 16, 30, tzinfo=timezone.utc), slot=Slot.AFTERNOON),
        ]
    )


class TestHtmlRenderer:
    def test_is_renderer(self):
        assert isinstance(HtmlRenderer(), Renderer)

    def test_summary_cards(self):
        html = HtmlRenderer().render(sample_aggregation(), GENERATED)
        assert "<title>Health Tracking Dashboard</title>" in html
        assert "migraine (1x)" in html
        assert "1/2" in html
        assert "8.0" in html
        assert "Last updated: 2025-01-06 08:00:00 UTC" in html

    def test_rows_newest_first(self):
        html = HtmlRenderer().render(sample_aggregation(), GENERATED)
        assert html.index("afternoon") < html.index("morning")

    def test_pain_colour(self):
        html = HtmlRenderer().render(sample_aggregation(), GENERATED)
        assert 'data-severity="elevated"' in html
        assert "bg-orange-100 text-orange-800" in html
        assert 'data-severity="unknown"' in html

    def test_missing_values(self):
        aggregation = aggregate([Entry(timestamp=datetime(2025, 1, 5, 9, 30, tzinfo=timezone.utc))])
        html = HtmlRenderer().render(aggregation, GENERATED)
        assert "N/A" in html
        assert ">None<" in html
        assert ">-<" in html
        assert "No" in html

    def test_escapes_free_text(self):
        html = HtmlRenderer().render(sample_aggregation(), GENERATED)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_custom_loader(self):
        loader = jinja2.DictLoader({"dashboard.html": "{{ title }}: {{ summary.total_entries }}"})
        html = HtmlRenderer(title="Mine", loader=loader).render(sample_aggregation(), GENERATED)
        assert html == "Mine: 2"


class TestWriteReport:
    def test_writes(self, tmp_dir):
        path = os.path.join(tmp_dir, "out", "index.html")
        write_report(path, "<html></html>")
        with open(path) as f:
            assert f.read() == "<html></html>"
