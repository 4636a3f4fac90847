"""Credential checks shared by the workflow and the collaborators."""

from meal_logger.domain.errors import MissingCredentials
from meal_logger.domain.nutrition import NutritionProvider
from meal_logger.domain.workflow import WorkflowConfig


def require_llm_credentials(config: WorkflowConfig) -> None:
    """Raise if the extraction LLM key is missing."""
    if not config.llm_api_key.strip():
        raise MissingCredentials("LLM API Key is required.")


def require_provider_credentials(config: WorkflowConfig) -> None:
    """Raise if the selected nutrition provider lacks its credentials."""
    if config.nutrition_provider == NutritionProvider.NUTRITIONIX:
        app_id = config.nutritionix_app_id.strip()
        app_key = config.nutritionix_app_key.strip()
        if not (app_id and app_key):
            raise MissingCredentials("Nutritionix App ID and App Key are required.")
        return
    if not config.nutrition_api_key.strip():
        raise MissingCredentials("Nutrition API Key is required.")
