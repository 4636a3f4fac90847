"""Domain models for the meal logging workflow."""

from dataclasses import dataclass, field
from enum import StrEnum

from meal_logger.domain.extraction import ParsedItem
from meal_logger.domain.nutrition import NutritionProvider, ResolvedFoodItem, Totals


class Step(StrEnum):
    """Workflow steps; each decides which item list is meaningful."""

    INPUT = "INPUT"
    VERIFY = "VERIFY"
    RESULTS = "RESULTS"


@dataclass(frozen=True)
class WorkflowConfig:
    """User-supplied credentials and provider selection, held in memory only."""

    llm_api_key: str = ""
    nutrition_provider: NutritionProvider = NutritionProvider.CALORIENINJAS
    nutrition_api_key: str = ""
    nutritionix_app_id: str = ""
    nutritionix_app_key: str = ""


@dataclass(frozen=True)
class Session:
    """The single in-memory workflow instance.

    Sessions are never mutated; every transition produces a new value.
    """

    config: WorkflowConfig = field(default_factory=WorkflowConfig)
    input_description: str = ""
    step: Step = Step.INPUT
    parsed_items: tuple[ParsedItem, ...] = ()
    food_items: tuple[ResolvedFoodItem, ...] = ()
    totals: Totals = field(default_factory=Totals)
    error: str | None = None
    loading: bool = False
    show_micros: bool = False


@dataclass(frozen=True)
class SetInput:
    """Replace the meal description text."""

    text: str


@dataclass(frozen=True)
class SubmitDescription:
    """Start extraction of the current description."""


@dataclass(frozen=True)
class ExtractionSucceeded:
    """Extraction collaborator returned a value (validated on arrival)."""

    items: object


@dataclass(frozen=True)
class ExtractionFailed:
    """Extraction collaborator failed."""

    message: str


@dataclass(frozen=True)
class Confirm:
    """User accepted the parsed items; start the nutrition lookup."""


@dataclass(frozen=True)
class NutritionSucceeded:
    """Nutrition collaborator returned canonical records."""

    items: tuple[ResolvedFoodItem, ...]


@dataclass(frozen=True)
class NutritionFailed:
    """Nutrition collaborator failed."""

    message: str


@dataclass(frozen=True)
class Back:
    """Return from verification to input, keeping the description."""


@dataclass(frozen=True)
class RemoveItem:
    """Drop one resolved item by position."""

    index: int


@dataclass(frozen=True)
class StartOver:
    """Discard results and return to input, keeping the description."""


@dataclass(frozen=True)
class SetConfig:
    """Update a single configuration field."""

    field: str
    value: str


@dataclass(frozen=True)
class ToggleMicros:
    """Show or hide micronutrient columns."""

    value: bool


Event = (
    SetInput
    | SubmitDescription
    | ExtractionSucceeded
    | ExtractionFailed
    | Confirm
    | NutritionSucceeded
    | NutritionFailed
    | Back
    | RemoveItem
    | StartOver
    | SetConfig
    | ToggleMicros
)
