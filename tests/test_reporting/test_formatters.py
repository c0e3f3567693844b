"""
Tests for sportfit/reporting/formatters.py.

What we test
------------
  - Catalogue listing shows every sport and its criteria.
  - Metric table marks required metrics and leaves somatotype unmarked.
  - Recommendations show rank, score band, reason, insight and tips.
  - Empty recommendation list renders a placeholder.
  - Tracking metrics list keys, names and units.
"""

from __future__ import annotations

from sportfit.recommendations.ranker import rank_sports
from sportfit.reporting.formatters import (
    format_metric_table,
    format_recommendations,
    format_sport_catalogue,
    format_tracking_metrics,
)
from sportfit.taxonomy.sport_catalogue import SPORT_CATALOGUE, SPORT_NAMES
from sportfit.taxonomy.tracking_metrics import metrics_for_sport


class TestCatalogue:
    def test_lists_every_sport(self):
        text = format_sport_catalogue(SPORT_CATALOGUE)
        assert "Sport Catalogue (10 sports)" in text
        for name in SPORT_NAMES:
            assert name in text
        assert "Speed Index" in text
        assert "3.5" in text


class TestMetricTable:
    def test_required_marker(self):
        lines = format_metric_table().splitlines()
        vo2 = next(l for l in lines if "vo2max" in l)
        soma = next(l for l in lines if l.strip().startswith("somatotype"))
        assert vo2.lstrip().startswith("*")
        assert not soma.lstrip().startswith("*")


class TestRecommendations:
    def test_content(self, sprinter_snapshot):
        text = format_recommendations(rank_sports(sprinter_snapshot), "Sam", "Summary here.")
        assert "Sport Recommendations: Sam" in text
        assert "Summary here." in text
        assert "Sprint Running" in text
        assert "[EXCELLENT]" in text
        assert "Reason:  Strong Speed Index (100% match)" in text
        assert "top match based on current metrics." in text
        assert "Tips:" in text

    def test_empty(self):
        assert "(no recommendations requested)" in format_recommendations([], "Sam")


class TestTrackingMetrics:
    def test_units(self):
        text = format_tracking_metrics("Swimming", metrics_for_sport("Swimming"))
        assert "Tracking Metrics: Swimming" in text
        assert "Lap Time (sec)" in text

    def test_unitless(self):
        text = format_tracking_metrics("Curling", metrics_for_sport("Curling"))
        assert "Notes: Training notes" in text
