"""Resolution of symbolic statistics ranges into concrete date windows."""

from datetime import date, datetime, timedelta

from nutrition_insights.domain.ranges import RangeMode, RangeSelection, ResolvedRange

WEEK_LOOKBACK_DAYS = 7
MONTH_LOOKBACK_DAYS = 30


def resolve_range(selection: RangeSelection, now: date) -> ResolvedRange:
    """Return the start/end window for a range selection.

    Week and month look back 7 and 30 days from ``now``, so the inclusive spans
    are 8 and 31 days. Custom bounds are returned verbatim without parsing or
    ordering checks; unknown modes resolve like a week.
    """
    if isinstance(now, datetime):
        now = now.date()
    mode = RangeMode.parse(selection.mode)
    end = now.isoformat()

    if mode is RangeMode.TODAY:
        return ResolvedRange(start=end, end=end)
    if mode is RangeMode.MONTH:
        return ResolvedRange(start=_days_before(now, MONTH_LOOKBACK_DAYS), end=end)
    if mode is RangeMode.CUSTOM:
        return ResolvedRange(start=selection.custom_start, end=selection.custom_end)
    return ResolvedRange(start=_days_before(now, WEEK_LOOKBACK_DAYS), end=end)


def _days_before(day: date, days: int) -> str:
    return (day - timedelta(days=days)).isoformat()
