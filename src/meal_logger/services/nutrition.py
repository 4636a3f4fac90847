"""Nutrition lookups normalized across providers."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from meal_logger.adapters.calorieninjas_client import CalorieNinjasClient
from meal_logger.adapters.nutritionix_client import NutritionixClient
from meal_logger.domain.errors import ProviderUnavailable
from meal_logger.domain.extraction import ParsedItem
from meal_logger.domain.nutrition import NutritionProvider, ResolvedFoodItem
from meal_logger.domain.workflow import WorkflowConfig
from meal_logger.services.credentials import require_provider_credentials

# Canonical field -> Nutritionix field.
_NUTRITIONIX_FIELDS = {
    "calories": "nf_calories",
    "protein_g": "nf_protein",
    "fat_total_g": "nf_total_fat",
    "carbohydrates_total_g": "nf_total_carbohydrate",
    "sugar_g": "nf_sugars",
    "fiber_g": "nf_dietary_fiber",
    "sodium_mg": "nf_sodium",
    "potassium_mg": "nf_potassium",
    "cholesterol_mg": "nf_cholesterol",
    "serving_size_g": "serving_weight_grams",
}

_CALORIENINJAS_FIELDS = {name: name for name in _NUTRITIONIX_FIELDS}

_PROVIDER_LABELS = {
    NutritionProvider.CALORIENINJAS: "CalorieNinjas",
    NutritionProvider.NUTRITIONIX: "Nutritionix",
}

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Resolves parsed items through the configured nutrition provider."""

    calorieninjas_client: CalorieNinjasClient
    nutritionix_client: NutritionixClient

    async def resolve(
        self, items: Sequence[ParsedItem], config: WorkflowConfig
    ) -> list[ResolvedFoodItem]:
        """Look up all items in one batched request.

        Records come back in the provider's order and count; they are not
        matched to the requested items.
        """
        require_provider_credentials(config)
        if not items:
            return []
        query = build_query(items)
        provider = config.nutrition_provider
        try:
            if provider == NutritionProvider.NUTRITIONIX:
                payload = await self.nutritionix_client.natural_nutrients(
                    query,
                    app_id=config.nutritionix_app_id,
                    app_key=config.nutritionix_app_key,
                )
                resolved = normalize_nutritionix(payload)
            else:
                payload = await self.calorieninjas_client.nutrition(
                    query, api_key=config.nutrition_api_key
                )
                resolved = normalize_calorieninjas(payload)
        except (httpx.HTTPError, ValueError) as exc:
            status_code = _status_code_from_exception(exc)
            _logger.warning(
                "Nutrition lookup failed (provider=%s, status=%s): %s",
                provider,
                status_code,
                exc,
            )
            raise ProviderUnavailable(
                f"Failed to fetch nutrition data from {_PROVIDER_LABELS[provider]} "
                f"({_describe_failure(exc, status_code)}). "
                "Please check your API key and try again."
            ) from exc
        _logger.info(
            "Nutrition lookup: provider=%s requested=%s returned=%s",
            provider,
            len(items),
            len(resolved),
        )
        return resolved


def build_query(items: Sequence[ParsedItem]) -> str:
    """Join items into one natural-language query, e.g. ``2 egg, 1 cup coffee``."""
    return ", ".join(f"{item.quantity} {item.item_name}".strip() for item in items)


def normalize_calorieninjas(payload: object) -> list[ResolvedFoodItem]:
    """Map a CalorieNinjas ``items`` payload to canonical records."""
    return [
        _to_resolved(entry, name_field="name", fields=_CALORIENINJAS_FIELDS)
        for entry in _entries(payload, "items")
    ]


def normalize_nutritionix(payload: object) -> list[ResolvedFoodItem]:
    """Map a Nutritionix ``foods`` payload to canonical records."""
    return [
        _to_resolved(entry, name_field="food_name", fields=_NUTRITIONIX_FIELDS)
        for entry in _entries(payload, "foods")
    ]


def _entries(payload: object, key: str) -> list[dict[str, object]]:
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    entries = payload.get(key) or []
    if not isinstance(entries, list):
        return []
    return [entry for entry in entries if isinstance(entry, dict)]


def _to_resolved(
    entry: dict[str, object], *, name_field: str, fields: dict[str, str]
) -> ResolvedFoodItem:
    values = {
        canonical: _number(entry.get(source)) for canonical, source in fields.items()
    }
    return ResolvedFoodItem(name=str(entry.get(name_field, "")), found=True, **values)


def _number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    return None


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _describe_failure(exc: Exception, status_code: str) -> str:
    if status_code != "n/a":
        return f"HTTP {status_code}"
    if isinstance(exc, httpx.HTTPError):
        return "no response"
    return "unexpected response body"
