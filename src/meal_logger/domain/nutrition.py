"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


class NutritionProvider(StrEnum):
    """Supported nutrition-facts providers."""

    CALORIENINJAS = "calorieninjas"
    NUTRITIONIX = "nutritionix"


@dataclass(frozen=True)
class ResolvedFoodItem:
    """Canonical nutrition record for one resolved food.

    When ``found`` is False every numeric field is None and should be shown as
    missing data rather than zero.
    """

    name: str
    found: bool
    calories: float | None = None
    protein_g: float | None = None
    fat_total_g: float | None = None
    carbohydrates_total_g: float | None = None
    sugar_g: float | None = None
    fiber_g: float | None = None
    sodium_mg: float | None = None
    potassium_mg: float | None = None
    cholesterol_mg: float | None = None
    serving_size_g: float | None = None


@dataclass(frozen=True)
class Totals:
    """Macro totals for the current set of resolved items."""

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
