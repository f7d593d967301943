"""
Synthesized chart series for decks built without ground-truth time series.

A single extracted figure (users, downloads, revenue, funding) is scaled by a
fixed multiplier ladder into a short, monotonically structured series.  When
no usable metric exists a fixed default series is returned instead.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple

from pitchcraft.schemas.business import Metric, MetricType, first_metric
from pitchcraft.schemas.presentation import ChartKind, ChartPoint, ChartSeries


class ChartIntent(str, Enum):
    growth = "growth"
    financial = "financial"


class ChartRecipe(NamedTuple):
    source: MetricType
    chart_kind: ChartKind
    labels: tuple[str, ...]
    multipliers: tuple[float, ...]
    # Divide the base value by this before scaling (1e6 -> "millions")
    scale: float
    decimals: int


RECIPES: dict[ChartIntent, tuple[ChartRecipe, ...]] = {
    ChartIntent.growth: (
        ChartRecipe(
            MetricType.users,
            ChartKind.area,
            ("Q1", "Q2", "Q3", "Q4", "Q5", "Q6"),
            (0.4, 0.6, 0.8, 1.0, 1.3, 1.7),
            1,
            0,
        ),
        ChartRecipe(
            MetricType.traction,
            ChartKind.line,
            ("Jan", "Feb", "Mar", "Apr", "May", "Jun"),
            (0.3, 0.5, 0.7, 0.9, 1.0, 1.2),
            1,
            0,
        ),
    ),
    ChartIntent.financial: (
        ChartRecipe(
            MetricType.revenue,
            ChartKind.bar,
            ("Year 1", "Year 2", "Year 3", "Year 4", "Year 5"),
            (1.0, 2.1, 3.8, 6.2, 9.5),
            1_000_000,
            1,
        ),
        ChartRecipe(
            MetricType.funding,
            ChartKind.bar,
            ("Seed", "Series A", "Series B", "Series C", "IPO"),
            (0.2, 0.6, 1.0, 2.5, 5.0),
            1_000_000,
            1,
        ),
    ),
}

DEFAULT_SERIES: dict[ChartIntent, tuple[ChartKind, tuple[tuple[str, float], ...]]] = {
    ChartIntent.growth: (
        ChartKind.area,
        (("Q1", 1200), ("Q2", 2800), ("Q3", 4500), ("Q4", 7200), ("Q5", 11500), ("Q6", 18000)),
    ),
    ChartIntent.financial: (
        ChartKind.bar,
        (("Year 1", 0.5), ("Year 2", 2.1), ("Year 3", 5.8), ("Year 4", 12.4), ("Year 5", 24.7)),
    ),
}


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round like ``Math.round``: halves go up, not to the nearest even digit."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def _apply_recipe(recipe: ChartRecipe, base_value: float) -> ChartSeries:
    base = base_value / recipe.scale
    points = []
    for label, multiplier in zip(recipe.labels, recipe.multipliers):
        value = round_half_up(base * multiplier, recipe.decimals)
        if recipe.decimals == 0:
            value = int(value)
        points.append(ChartPoint(name=label, value=value))
    return ChartSeries(chart_kind=recipe.chart_kind, points=points)


def default_series(intent: ChartIntent) -> ChartSeries:
    chart_kind, points = DEFAULT_SERIES[intent]
    return ChartSeries(
        chart_kind=chart_kind,
        points=[ChartPoint(name=name, value=value) for name, value in points],
    )


def synthesize_chart(metrics: list[Metric], intent: ChartIntent | str) -> ChartSeries:
    """Build a chart series for *intent* from the first usable metric.

    Growth prefers ``users`` then ``traction``; financial prefers ``revenue``
    then ``funding``.  The earliest mention of the preferred type is the base
    value.
    """
    intent = ChartIntent(intent)
    for recipe in RECIPES[intent]:
        metric = first_metric(metrics, recipe.source)
        if metric is not None:
            return _apply_recipe(recipe, metric.value)
    return default_series(intent)
