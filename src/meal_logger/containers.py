"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_logger.adapters.calorieninjas_client import HttpxCalorieNinjasClient
from meal_logger.adapters.nutritionix_client import HttpxNutritionixClient
from meal_logger.adapters.openai_extraction_client import OpenAIExtractionClient
from meal_logger.config import Settings
from meal_logger.domain.workflow import Session
from meal_logger.services.extraction import ExtractionService
from meal_logger.services.nutrition import NutritionService
from meal_logger.services.sessions import SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    extraction_service = ExtractionService(
        client=OpenAIExtractionClient.create(),
        model=resolved_settings.openai_model,
    )
    calorieninjas_client = HttpxCalorieNinjasClient.create(
        base_url=resolved_settings.calorieninjas_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    nutritionix_client = HttpxNutritionixClient.create(
        base_url=resolved_settings.nutritionix_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    nutrition_service = NutritionService(
        calorieninjas_client=calorieninjas_client,
        nutritionix_client=nutritionix_client,
    )
    session_service = SessionService(
        extraction_service=extraction_service,
        nutrition_service=nutrition_service,
        session=Session(config=resolved_settings.workflow_config()),
    )

    async def close_resources() -> None:
        await calorieninjas_client.close()
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        close_resources=close_resources,
    )
