"""Domain models for nutrition statistics."""

from dataclasses import dataclass
from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from nutrition_insights.domain.fields import (
    OneInt,
    TextList,
    ZeroFloat,
    ZeroInt,
    default_if_none,
)
from nutrition_insights.domain.ranges import ResolvedRange


class DailyNutritionRecord(BaseModel):
    """One calendar day of nutrition totals as delivered by the provider.

    Every numeric field may be absent; consumers decide the default where they
    read the record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: date = Field(alias="date")
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    fluids: float | None = None


BreakdownList = Annotated[list[DailyNutritionRecord], default_if_none(list)]


class StatisticsSummary(BaseModel):
    """Aggregated statistics for a resolved range."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    average_calories_daily: ZeroFloat = 0.0
    average_protein_daily: ZeroFloat = 0.0
    average_carbs_daily: ZeroFloat = 0.0
    average_fats_daily: ZeroFloat = 0.0
    average_fiber_daily: ZeroFloat = 0.0
    average_sugar_daily: ZeroFloat = 0.0
    average_sodium_daily: ZeroFloat = 0.0
    average_fluids_daily: ZeroFloat = 0.0
    calorie_goal_achievement_percent: ZeroFloat = 0.0
    current_streak: ZeroInt = Field(default=0, alias="currentStreak")
    weekly_streak: ZeroInt = Field(default=0, alias="weeklyStreak")
    perfect_days: ZeroInt = Field(default=0, alias="perfectDays")
    level: OneInt = 1
    current_xp: ZeroInt = Field(default=0, alias="currentXP")
    insights: TextList = Field(default_factory=list)
    daily_breakdown: BreakdownList = Field(
        default_factory=list, alias="dailyBreakdown"
    )


@dataclass(frozen=True)
class TrendSeries:
    """Chart-ready labels and values, positionally paired."""

    labels: list[str]
    values: list[float]


@dataclass(frozen=True)
class MacroSlice:
    """One macro's share of macro-derived calories."""

    name: str
    percentage: int
    color_tag: str


@dataclass(frozen=True)
class StatisticsDashboard:
    """View-model for the statistics screen."""

    resolved_range: ResolvedRange
    summary: StatisticsSummary
    trend: TrendSeries | None
    macros: list[MacroSlice] | None
