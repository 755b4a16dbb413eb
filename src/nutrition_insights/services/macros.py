"""Macro-nutrient calorie distribution."""

import math

from nutrition_insights.domain.stats import MacroSlice

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

PROTEIN_COLOR = "#3b82f6"
CARBS_COLOR = "#10b981"
FAT_COLOR = "#f59e0b"


def compute_macro_distribution(
    protein_g: float, carbs_g: float, fat_g: float
) -> list[MacroSlice] | None:
    """Return protein, carbs and fat shares of macro calories in percent.

    Each share is rounded on its own, so the three may sum to 98..102. Returns
    None when the macros carry no calories.
    """
    protein_kcal = protein_g * PROTEIN_KCAL_PER_G
    carbs_kcal = carbs_g * CARBS_KCAL_PER_G
    fat_kcal = fat_g * FAT_KCAL_PER_G
    total = protein_kcal + carbs_kcal + fat_kcal
    if total == 0:
        return None

    return [
        MacroSlice("protein", _percent(protein_kcal, total), PROTEIN_COLOR),
        MacroSlice("carbs", _percent(carbs_kcal, total), CARBS_COLOR),
        MacroSlice("fat", _percent(fat_kcal, total), FAT_COLOR),
    ]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def _percent(part: float, total: float) -> int:
    return round_half_up(part / total * 100)
