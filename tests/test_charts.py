"""
Tests for chart synthesis from extracted metrics.
"""

import pytest

from pitchcraft.core.charts import (
    ChartIntent,
    default_series,
    round_half_up,
    synthesize_chart,
)
from pitchcraft.schemas.business import Metric, MetricType
from pitchcraft.schemas.presentation import ChartKind


def _metric(metric_type, value, position=0):
    return Metric(context=f"{value} {metric_type.value}", value=value, type=metric_type, position=position)


class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value, decimals, expected",
        [
            (2.5, 0, 3),
            (3.5, 0, 4),
            (0.25, 1, 0.3),
            (11.399999999999999, 1, 11.4),
            (1300.0000000000002, 0, 1300),
        ],
    )
    def test_rounding(self, value, decimals, expected):
        assert round_half_up(value, decimals) == pytest.approx(expected)


class TestGrowthCharts:

    def test_users_recipe(self):
        series = synthesize_chart([_metric(MetricType.users, 1000)], ChartIntent.growth)
        assert series.chart_kind == ChartKind.area
        assert series.labels == ["Q1", "Q2", "Q3", "Q4", "Q5", "Q6"]
        assert series.values == [400, 600, 800, 1000, 1300, 1700]

    def test_traction_recipe(self):
        series = synthesize_chart([_metric(MetricType.traction, 2000)], "growth")
        assert series.chart_kind == ChartKind.line
        assert series.labels == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
        assert series.values == [600, 1000, 1400, 1800, 2000, 2400]

    def test_users_preferred_over_traction(self):
        metrics = [_metric(MetricType.traction, 50, 0), _metric(MetricType.users, 100, 10)]
        assert synthesize_chart(metrics, ChartIntent.growth).chart_kind == ChartKind.area

    def test_earliest_mention_is_the_base(self):
        metrics = [_metric(MetricType.users, 9000, 40), _metric(MetricType.users, 1000, 5)]
        assert synthesize_chart(metrics, ChartIntent.growth).values[3] == 1000

    def test_default_growth_series(self):
        series = synthesize_chart([_metric(MetricType.revenue, 1e6)], ChartIntent.growth)
        assert series == default_series(ChartIntent.growth)
        assert series.values == [1200, 2800, 4500, 7200, 11500, 18000]


class TestFinancialCharts:

    def test_revenue_recipe(self):
        series = synthesize_chart([_metric(MetricType.revenue, 3_000_000)], ChartIntent.financial)
        assert series.chart_kind == ChartKind.bar
        assert series.labels == ["Year 1", "Year 2", "Year 3", "Year 4", "Year 5"]
        assert series.values == [3.0, 6.3, 11.4, 18.6, 28.5]

    def test_funding_recipe(self):
        series = synthesize_chart([_metric(MetricType.funding, 10_000_000)], ChartIntent.financial)
        assert series.labels == ["Seed", "Series A", "Series B", "Series C", "IPO"]
        assert series.values == [2.0, 6.0, 10.0, 25.0, 50.0]

    def test_revenue_preferred_over_funding(self):
        metrics = [_metric(MetricType.funding, 1e6, 0), _metric(MetricType.revenue, 2e6, 3)]
        assert synthesize_chart(metrics, ChartIntent.financial).labels[0] == "Year 1"

    def test_default_financial_series(self):
        series = synthesize_chart([], ChartIntent.financial)
        assert series.chart_kind == ChartKind.bar
        assert series.values == [0.5, 2.1, 5.8, 12.4, 24.7]

    def test_wire_shape(self):
        series = synthesize_chart([_metric(MetricType.revenue, 1_000_000)], ChartIntent.financial)
        data = series.model_dump(mode="json", by_alias=True)
        assert data["type"] == "bar"
        assert data["data"][0] == {"name": "Year 1", "value": 1.0}
