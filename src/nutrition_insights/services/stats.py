"""Statistics service building the dashboard view-model."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from nutrition_insights.domain.ranges import RangeMode, RangeSelection
from nutrition_insights.domain.stats import StatisticsDashboard, StatisticsSummary
from nutrition_insights.services.macros import compute_macro_distribution
from nutrition_insights.services.ranges import resolve_range
from nutrition_insights.services.trends import (
    WeekdayFormatter,
    build_trend_series,
    english_weekday,
)

_logger = logging.getLogger(__name__)


class StatisticsProvider(Protocol):
    """Remote service returning aggregated nutrition statistics."""

    async def get_statistics(
        self, period: str, start: str, end: str
    ) -> dict[str, object] | None:
        """Return averages, streaks, insights and the daily breakdown."""


@dataclass
class StatisticsService:
    """Service that fetches statistics for a range and shapes them for display."""

    provider: StatisticsProvider
    weekday_formatter: WeekdayFormatter = english_weekday

    async def get_dashboard(
        self, selection: RangeSelection, today: date, locale: str
    ) -> StatisticsDashboard:
        """Return the resolved range, summary, calorie trend and macro split."""
        resolved = resolve_range(selection, today)
        period = RangeMode.parse(selection.mode).value
        raw = await self.provider.get_statistics(period, resolved.start, resolved.end)
        summary = StatisticsSummary.model_validate(raw or {})

        trend = build_trend_series(
            summary.daily_breakdown, locale, self.weekday_formatter
        )
        macros = compute_macro_distribution(
            summary.average_protein_daily,
            summary.average_carbs_daily,
            summary.average_fats_daily,
        )
        if trend is None or macros is None:
            _logger.info(
                "Statistics without chart data: period=%s start=%s end=%s",
                period,
                resolved.start,
                resolved.end,
            )
        return StatisticsDashboard(
            resolved_range=resolved,
            summary=summary,
            trend=trend,
            macros=macros,
        )
