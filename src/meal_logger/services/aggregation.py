"""Macro totals for resolved food items."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from meal_logger.domain.nutrition import ResolvedFoodItem, Totals

_ONE_DECIMAL = Decimal("0.1")
_ZERO = Decimal(0)


def aggregate(items: Iterable[ResolvedFoodItem]) -> Totals:
    """Sum macros of found items, each total rounded half-up to one decimal."""
    calories = protein = fat = carbs = _ZERO
    for item in items:
        if not item.found:
            continue
        calories += _decimal(item.calories)
        protein += _decimal(item.protein_g)
        fat += _decimal(item.fat_total_g)
        carbs += _decimal(item.carbohydrates_total_g)
    return Totals(
        calories=_round_one_decimal(calories),
        protein=_round_one_decimal(protein),
        fat=_round_one_decimal(fat),
        carbs=_round_one_decimal(carbs),
    )


def _decimal(value: float | None) -> Decimal:
    # repr gives the shortest decimal that round-trips, so 0.35 stays 0.35.
    if value is None:
        return _ZERO
    return Decimal(repr(value))


def _round_one_decimal(value: Decimal) -> float:
    return float(value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
