"""Tests for the calorie trend series."""

from datetime import date

from nutrition_insights.services.trends import build_trend_series, english_weekday
from tests.conftest import make_records


def test_trend_keeps_last_seven_days_in_order() -> None:
    calories = [1800, 1900, 2000, 1700, 2100, 1950, 1850, 2200, 1800, 1750]
    records = make_records(calories, start=date(2026, 10, 7))

    series = build_trend_series(records, "en")

    assert series is not None
    assert series.values == [1700, 2100, 1950, 1850, 2200, 1800, 1750]
    assert len(series.labels) == 7
    assert series.labels == [english_weekday(r.day, "en") for r in records[-7:]]
    assert series.labels[0] == "Sat"


def test_trend_with_short_input_uses_all_records() -> None:
    records = make_records([1500, 1600], start=date(2026, 10, 15))

    series = build_trend_series(records, "en")

    assert series is not None
    assert series.values == [1500, 1600]
    assert series.labels == ["Thu", "Fri"]


def test_trend_charts_missing_calories_as_zero() -> None:
    records = make_records([1500, None, 1600], start=date(2026, 10, 14))

    series = build_trend_series(records, "en")

    assert series is not None
    assert series.values == [1500, 0, 1600]


def test_trend_uses_injected_formatter() -> None:
    records = make_records([1500, 1600], start=date(2026, 10, 15))
    seen: list[str] = []

    def formatter(day: date, locale: str) -> str:
        seen.append(locale)
        return f"{locale}:{day.day}"

    series = build_trend_series(records, "he", formatter)

    assert series is not None
    assert series.labels == ["he:15", "he:16"]
    assert seen == ["he", "he"]


def test_trend_does_not_mutate_input() -> None:
    records = make_records([1] * 9, start=date(2026, 10, 1))
    snapshot = list(records)

    build_trend_series(records, "en")

    assert records == snapshot


def test_trend_of_empty_input_is_none() -> None:
    assert build_trend_series([], "en") is None
