"""Session service driving the workflow and its collaborators."""

import logging
from dataclasses import dataclass, field

from meal_logger.domain.errors import MealLoggerError
from meal_logger.domain.workflow import (
    Confirm,
    Event,
    ExtractionFailed,
    ExtractionSucceeded,
    NutritionFailed,
    NutritionSucceeded,
    Session,
    SubmitDescription,
)
from meal_logger.services.extraction import ExtractionService
from meal_logger.services.nutrition import NutritionService
from meal_logger.services.workflow import transition

EXTRACTION_FAILED_MESSAGE = (
    "Failed to parse meal description with LLM. "
    "Please check your API key and try again."
)
NUTRITION_FAILED_MESSAGE = (
    "Failed to fetch nutrition data. Please check your API key and try again."
)

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Holds the single active session and runs outbound calls for it.

    Events are applied one at a time through ``transition``. Outbound calls
    are only made when the submit or confirm event actually moved the session
    into the loading state, so at most one call is ever in flight.
    """

    extraction_service: ExtractionService
    nutrition_service: NutritionService
    session: Session = field(default_factory=Session)

    def dispatch(self, event: Event) -> Session:
        """Apply an event to the current session and return the result."""
        current = self.session
        updated = transition(current, event)
        if updated is current:
            _logger.info(
                "Event %s ignored (step=%s, loading=%s)",
                type(event).__name__,
                current.step,
                current.loading,
            )
        self.session = updated
        return updated

    async def submit_description(self) -> Session:
        """Submit the current description and store the extracted items."""
        started = self._start(SubmitDescription())
        if started is None:
            return self.session
        try:
            items = await self.extraction_service.extract(
                started.input_description, started.config.llm_api_key
            )
        except MealLoggerError as exc:
            _logger.warning("Extraction rejected: %s", exc)
            return self.dispatch(ExtractionFailed(str(exc)))
        except Exception:
            _logger.exception("Extraction call failed")
            return self.dispatch(ExtractionFailed(EXTRACTION_FAILED_MESSAGE))
        _logger.info("Extracted %s items", len(items))
        return self.dispatch(ExtractionSucceeded(items))

    async def confirm(self) -> Session:
        """Resolve the confirmed items through the nutrition provider."""
        started = self._start(Confirm())
        if started is None:
            return self.session
        try:
            food_items = await self.nutrition_service.resolve(
                started.parsed_items, started.config
            )
        except MealLoggerError as exc:
            _logger.warning("Nutrition lookup rejected: %s", exc)
            return self.dispatch(NutritionFailed(str(exc)))
        except Exception:
            _logger.exception("Nutrition call failed")
            return self.dispatch(NutritionFailed(NUTRITION_FAILED_MESSAGE))
        return self.dispatch(NutritionSucceeded(tuple(food_items)))

    def _start(self, event: SubmitDescription | Confirm) -> Session | None:
        """Dispatch a start event; return the session only if it began loading."""
        was_loading = self.session.loading
        updated = self.dispatch(event)
        if was_loading or not updated.loading:
            return None
        return updated
