"""Pydantic request bodies for the view-model API."""

from pydantic import BaseModel, Field, field_validator

from nutrition_insights.domain.scanner import MealTiming, ScannedProduct


class CustomMenuRequest(BaseModel):
    """Free-text menu generation request."""

    request: str
    days: int = Field(default=7, ge=1, le=30)
    meals_per_day: str = "3_main"
    budget: float | None = Field(default=None, ge=0)

    @field_validator("request")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("request must not be blank")
        return value.strip()


class BarcodeScanRequest(BaseModel):
    """Barcode typed or scanned by the user."""

    barcode: str = Field(min_length=1)


class ImageScanRequest(BaseModel):
    """Label photo encoded as base64."""

    image_base64: str = Field(min_length=1)


class AddToLogRequest(BaseModel):
    """Scanned product to add to the meal log."""

    product: ScannedProduct
    quantity: float = Field(gt=0)
    meal_timing: MealTiming = MealTiming.SNACK
