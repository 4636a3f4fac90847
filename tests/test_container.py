"""Tests for container wiring."""

import asyncio

from meal_logger.containers import build_container
from meal_logger.domain.nutrition import NutritionProvider
from meal_logger.domain.workflow import Step


def test_build_container_seeds_session_from_settings(settings) -> None:
    container = build_container(settings)
    session = container.session_service.session

    assert session.step is Step.INPUT
    assert session.config.llm_api_key == "llm-key"
    assert session.config.nutrition_api_key == "cn-key"
    assert session.config.nutrition_provider is NutritionProvider.CALORIENINJAS
    asyncio.run(container.close_resources())
