"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from meal_logger.adapters.calorieninjas_client import CalorieNinjasClient
from meal_logger.adapters.nutritionix_client import NutritionixClient
from meal_logger.config import Settings
from meal_logger.containers import AppContainer
from meal_logger.domain.workflow import Session, WorkflowConfig
from meal_logger.services.extraction import ExtractionClient, ExtractionService
from meal_logger.services.nutrition import NutritionService
from meal_logger.services.sessions import SessionService

EGG_AND_COFFEE = [
    {"item_name": "egg", "quantity": "2"},
    {"item_name": "coffee", "quantity": "1 cup"},
]


@dataclass
class FakeExtractionClient(ExtractionClient):
    """Fake LLM returning a fixed raw text."""

    output: str = field(default_factory=lambda: json.dumps(EGG_AND_COFFEE))
    calls: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def complete(
        self, *, api_key: str, model: str, system_prompt: str, text: str
    ) -> str:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.output


@dataclass
class FakeCalorieNinjasClient(CalorieNinjasClient):
    """Fake CalorieNinjas client recording queries."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "items": [
                {
                    "name": "egg",
                    "calories": 147.0,
                    "serving_size_g": 100.0,
                    "fat_total_g": 9.9,
                    "fat_saturated_g": 3.1,
                    "protein_g": 12.6,
                    "sodium_mg": 139,
                    "potassium_mg": 198,
                    "cholesterol_mg": 371,
                    "carbohydrates_total_g": 0.8,
                    "fiber_g": 0.0,
                    "sugar_g": 0.4,
                },
                {
                    "name": "coffee",
                    "calories": 2.4,
                    "serving_size_g": 236.6,
                    "fat_total_g": 0.1,
                    "fat_saturated_g": 0.0,
                    "protein_g": 0.3,
                    "sodium_mg": 5,
                    "potassium_mg": 116,
                    "cholesterol_mg": 0,
                    "carbohydrates_total_g": 0.0,
                    "fiber_g": 0.0,
                    "sugar_g": 0.0,
                },
            ]
        }
    )
    queries: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def nutrition(self, query: str, api_key: str) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client recording queries."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "food_name": "egg",
                    "serving_weight_grams": 100,
                    "nf_calories": 143,
                    "nf_total_fat": 9.5,
                    "nf_cholesterol": 372,
                    "nf_sodium": 142,
                    "nf_total_carbohydrate": 0.7,
                    "nf_dietary_fiber": 0,
                    "nf_sugars": 0.4,
                    "nf_protein": 12.6,
                    "nf_potassium": 138,
                }
            ]
        }
    )
    queries: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def natural_nutrients(
        self, query: str, app_id: str, app_key: str
    ) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


CALORIENINJAS_CONFIG = WorkflowConfig(llm_api_key="llm-key", nutrition_api_key="cn-key")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        llm_api_key="llm-key",
        nutrition_api_key="cn-key",
        environment="test",
    )


@pytest.fixture
def extraction_client() -> FakeExtractionClient:
    return FakeExtractionClient()


@pytest.fixture
def calorieninjas_client() -> FakeCalorieNinjasClient:
    return FakeCalorieNinjasClient()


@pytest.fixture
def nutritionix_client() -> FakeNutritionixClient:
    return FakeNutritionixClient()


@pytest.fixture
def session_service(
    extraction_client: FakeExtractionClient,
    calorieninjas_client: FakeCalorieNinjasClient,
    nutritionix_client: FakeNutritionixClient,
) -> SessionService:
    return SessionService(
        extraction_service=ExtractionService(
            client=extraction_client, model="gpt-3.5-turbo"
        ),
        nutrition_service=NutritionService(
            calorieninjas_client=calorieninjas_client,
            nutritionix_client=nutritionix_client,
        ),
        session=Session(config=CALORIENINJAS_CONFIG),
    )


@pytest.fixture
def container(settings: Settings, session_service: SessionService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_service=session_service,
        close_resources=close_resources,
    )
