"""Pydantic models for the session HTTP surface."""

from dataclasses import asdict

from pydantic import BaseModel

from meal_logger.domain.extraction import ParsedItem
from meal_logger.domain.workflow import Session, Step, WorkflowConfig


class InputRequest(BaseModel):
    """Body for replacing the meal description."""

    text: str


class ConfigRequest(BaseModel):
    """Body for updating one configuration field."""

    field: str
    value: str


class MicrosRequest(BaseModel):
    """Body for toggling micronutrient display."""

    show: bool


class FoodItemView(BaseModel):
    """Resolved food item; None means no data."""

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


class TotalsView(BaseModel):
    """Macro totals for the results step."""

    calories: float
    protein: float
    fat: float
    carbs: float


class ConfigView(BaseModel):
    """Configuration with secrets reduced to presence flags."""

    nutrition_provider: str
    has_llm_api_key: bool
    has_nutrition_api_key: bool
    has_nutritionix_app_id: bool
    has_nutritionix_app_key: bool

    @classmethod
    def from_config(cls, config: WorkflowConfig) -> "ConfigView":
        """Project a configuration without exposing credential values."""
        return cls(
            nutrition_provider=config.nutrition_provider.value,
            has_llm_api_key=bool(config.llm_api_key),
            has_nutrition_api_key=bool(config.nutrition_api_key),
            has_nutritionix_app_id=bool(config.nutritionix_app_id),
            has_nutritionix_app_key=bool(config.nutritionix_app_key),
        )


class SessionSnapshot(BaseModel):
    """Read-only projection of the session for the view layer."""

    step: Step
    loading: bool
    error: str | None
    input_description: str
    parsed_items: list[ParsedItem]
    food_items: list[FoodItemView]
    totals: TotalsView
    config: ConfigView
    show_micros: bool

    @classmethod
    def from_session(cls, session: Session) -> "SessionSnapshot":
        """Build a snapshot from a session value."""
        return cls(
            step=session.step,
            loading=session.loading,
            error=session.error,
            input_description=session.input_description,
            parsed_items=list(session.parsed_items),
            food_items=[FoodItemView(**asdict(item)) for item in session.food_items],
            totals=TotalsView(**asdict(session.totals)),
            config=ConfigView.from_config(session.config),
            show_micros=session.show_micros,
        )
