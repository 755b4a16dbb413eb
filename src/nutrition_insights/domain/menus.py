"""Domain models for recommended menus."""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from nutrition_insights.domain.fields import (
    EmptyText,
    OneInt,
    ZeroFloat,
    ZeroInt,
    default_if_none,
)

ActiveFlag = Annotated[bool, default_if_none(lambda: True)]


class MenuIngredient(BaseModel):
    """Ingredient line of a menu meal."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="ingredient_id")
    name: str
    quantity: ZeroFloat = 0.0
    unit: EmptyText = ""
    category: str | None = None
    estimated_cost: float | None = None


class MenuMeal(BaseModel):
    """Single meal inside a multi-day menu."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="meal_id")
    name: str
    meal_type: EmptyText = ""
    day_number: OneInt = 1
    calories: ZeroFloat = 0.0
    protein: ZeroFloat = 0.0
    carbs: ZeroFloat = 0.0
    fat: ZeroFloat = 0.0
    fiber: float | None = None
    prep_time_minutes: int | None = None
    cooking_method: str | None = None
    instructions: str | None = None
    ingredients: Annotated[list[MenuIngredient], default_if_none(list)] = Field(
        default_factory=list
    )


class MenuAggregate(BaseModel):
    """Multi-day meal plan with summed nutrition totals."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="menu_id")
    title: str
    description: str | None = None
    total_calories: ZeroFloat = 0.0
    total_protein: float | None = None
    total_carbs: float | None = None
    total_fat: float | None = None
    total_fiber: float | None = None
    days_count: ZeroInt = 0
    category: str | None = Field(default=None, alias="dietary_category")
    estimated_cost: float | None = None
    prep_time_minutes: int | None = None
    difficulty_level: OneInt = 1
    is_active: ActiveFlag = True
    created_at: datetime | None = None
    meals: Annotated[list[MenuMeal], default_if_none(list)] = Field(
        default_factory=list
    )

    @property
    def meal_count(self) -> int:
        """Number of meals in the plan."""
        return len(self.meals)


@dataclass(frozen=True)
class MenuCard:
    """Summary shown for each menu in the browser."""

    menu: MenuAggregate
    avg_calories_per_day: int
    avg_protein_per_day: int
    meal_count: int
    sample_meals: list[MenuMeal]
