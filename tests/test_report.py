"""
Unit tests for report generation.

Tests section order, labels and the divider layout.
"""

import pytest
from daytrip.catalog import PLACES, Place
from daytrip.config import TripSettings
from daytrip.plan.route import Route
from daytrip.report import DIVIDER, build_report, render_report, render_section


@pytest.fixture
def settings():
    return TripSettings()


class TestBuildReport:
    """Test running every selector."""

    def test_labels_in_order(self, settings):
        results = build_report(PLACES, settings)
        assert [label for label, _ in results] == [
            "MaximizeCount",
            "MaximizeImportance",
            "MaximizeRate",
        ]

    def test_reference_totals(self, settings):
        results = build_report(PLACES, settings)
        totals = [(r.total_time(), r.total_importance(), r.count()) for _, r in results]
        assert totals == [(29, 114, 11), (25, 90, 5), (31.5, 133, 10)]

    def test_independent_routes(self, settings):
        results = build_report(PLACES, settings)
        routes = [route for _, route in results]
        assert len({id(r) for r in routes}) == 3

    def test_empty_catalog(self, settings):
        results = build_report([], settings)
        assert all(route.count() == 0 for _, route in results)


class TestRenderReport:
    """Test report text layout."""

    def test_section(self):
        route = Route()
        route.add_place(Place("Mednyj vsadnik", 1.0, 17))
        assert render_section("MaximizeCount", route) == (
            "\n [ MaximizeCount ] \n"
            "Total time: 1; Total value: 17; Places visited: 1\n"
            " - Mednyj vsadnik (1h, 17)"
        )

    def test_sections_joined_by_divider(self, settings):
        text = render_report(build_report(PLACES, settings))
        sections = text.split(DIVIDER)
        assert len(sections) == 3
        assert sections[0].startswith("\n [ MaximizeCount ] \nTotal time: 29; Total value: 114; Places visited: 11\n")
        assert sections[1].startswith("\n [ MaximizeImportance ] \nTotal time: 25; Total value: 90; Places visited: 5\n")
        assert sections[2].startswith("\n [ MaximizeRate ] \nTotal time: 31.5; Total value: 133; Places visited: 10\n")

    def test_report_ends_with_last_entry(self, settings):
        text = render_report(build_report(PLACES, settings))
        assert text.endswith(" - Zimnij dvorec Petra I (7h, 12)")

    def test_empty_results(self):
        assert render_report([]) == ""
