"""Domain models for the food scanner."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from nutrition_insights.domain.fields import (
    EmptyText,
    TextList,
    ZeroFloat,
    default_if_none,
)


class CompatibilityBand(str, Enum):
    """Display band for a compatibility score."""

    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"

    @property
    def color(self) -> str:
        """Color tag rendered for the band."""
        return _BAND_COLORS[self]


_BAND_COLORS = {
    CompatibilityBand.GOOD: "#10b981",
    CompatibilityBand.MODERATE: "#f59e0b",
    CompatibilityBand.POOR: "#ef4444",
}


class MealTiming(str, Enum):
    """Meal slot a scanned product is logged under."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


class NutritionPer100g(BaseModel):
    """Label nutrition normalized to 100 grams."""

    calories: ZeroFloat = 0.0
    protein: ZeroFloat = 0.0
    carbs: ZeroFloat = 0.0
    fat: ZeroFloat = 0.0
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


class ScannedProduct(BaseModel):
    """Product resolved from a barcode or label image."""

    barcode: str | None = None
    name: str
    brand: str | None = None
    category: EmptyText = ""
    nutrition_per_100g: Annotated[
        NutritionPer100g, default_if_none(NutritionPer100g)
    ] = Field(default_factory=NutritionPer100g)
    ingredients: TextList = Field(default_factory=list)
    allergens: TextList = Field(default_factory=list)
    labels: TextList = Field(default_factory=list)
    health_score: float | None = None
    image_url: str | None = None


class DailyContribution(BaseModel):
    """Share of the user's daily targets covered by the product."""

    calories_percent: ZeroFloat = 0.0
    protein_percent: ZeroFloat = 0.0
    carbs_percent: ZeroFloat = 0.0
    fat_percent: ZeroFloat = 0.0


class CompatibilityAnalysis(BaseModel):
    """Per-user analysis returned alongside a scanned product."""

    compatibility_score: ZeroFloat
    daily_contribution: Annotated[
        DailyContribution, default_if_none(DailyContribution)
    ] = Field(default_factory=DailyContribution)
    alerts: TextList = Field(default_factory=list)
    recommendations: TextList = Field(default_factory=list)
    health_assessment: EmptyText = ""


class ScanResult(BaseModel):
    """Product plus compatibility analysis for one scan."""

    product: ScannedProduct
    analysis: CompatibilityAnalysis = Field(
        validation_alias=AliasChoices(
            "analysis", "user_analysis", "compatibility_analysis"
        )
    )


class ScanHistoryEntry(BaseModel):
    """Previously scanned product as listed by the provider."""

    model_config = ConfigDict(frozen=True)

    product_name: EmptyText = ""
    scanned_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("scanned_at", "created_at")
    )

    @model_validator(mode="before")
    @classmethod
    def _fall_back_to_name(cls, data: object) -> object:
        if isinstance(data, dict) and not data.get("product_name"):
            return {**data, "product_name": data.get("name") or ""}
        return data


@dataclass(frozen=True)
class ScanView:
    """View-model for a scan result card."""

    product: ScannedProduct
    analysis: CompatibilityAnalysis
    band: CompatibilityBand
    color: str
