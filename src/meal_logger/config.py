"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_logger.domain.nutrition import NutritionProvider
from meal_logger.domain.workflow import WorkflowConfig

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Credentials are optional; they only seed the session configuration, which
    the user can change at runtime.
    """

    llm_api_key: str = ""
    nutrition_provider: NutritionProvider = NutritionProvider.CALORIENINJAS
    nutrition_api_key: str = ""
    nutritionix_app_id: str = ""
    nutritionix_app_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    calorieninjas_base_url: str = "https://api.calorieninjas.com/v1"
    nutritionix_base_url: str = "https://trackapi.nutritionix.com/v2"
    http_timeout_seconds: float = 15
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def workflow_config(self) -> WorkflowConfig:
        """Initial session configuration derived from the environment."""
        return WorkflowConfig(
            llm_api_key=self.llm_api_key,
            nutrition_provider=self.nutrition_provider,
            nutrition_api_key=self.nutrition_api_key,
            nutritionix_app_id=self.nutritionix_app_id,
            nutritionix_app_key=self.nutritionix_app_key,
        )
