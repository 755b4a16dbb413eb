"""Daily calorie trend series for the statistics chart."""

from collections.abc import Callable, Sequence
from datetime import date

from nutrition_insights.domain.stats import DailyNutritionRecord, TrendSeries

TREND_DAYS = 7

WeekdayFormatter = Callable[[date, str], str]

_WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def english_weekday(day: date, locale: str) -> str:
    """Default formatter: English weekday abbreviation, locale ignored."""
    return _WEEKDAY_ABBREVIATIONS[day.weekday()]


def build_trend_series(
    records: Sequence[DailyNutritionRecord],
    locale: str,
    formatter: WeekdayFormatter = english_weekday,
) -> TrendSeries | None:
    """Return the last seven days as weekday labels and calorie values.

    Records are expected in ascending date order and keep that order. A missing
    calorie value charts as 0. Returns None when there is nothing to chart.
    """
    if not records:
        return None
    window = records[-TREND_DAYS:]
    return TrendSeries(
        labels=[formatter(record.day, locale) for record in window],
        values=[record.calories or 0 for record in window],
    )
