"""Transition function for the meal logging workflow.

``transition`` maps ``(session, event)`` to the next session without mutating
its input. Events that are not valid for the current step, or that would start
a second outbound call while one is loading, return the session unchanged.
Guard failures never raise; they set ``error`` and keep the step.
"""

from dataclasses import fields, replace

from meal_logger.domain.errors import (
    EmptyInput,
    InvalidExtractionShape,
    MissingCredentials,
)
from meal_logger.domain.nutrition import NutritionProvider
from meal_logger.domain.workflow import (
    Back,
    Confirm,
    Event,
    ExtractionFailed,
    ExtractionSucceeded,
    NutritionFailed,
    NutritionSucceeded,
    RemoveItem,
    Session,
    SetConfig,
    SetInput,
    StartOver,
    Step,
    SubmitDescription,
    ToggleMicros,
    WorkflowConfig,
)
from meal_logger.services.aggregation import aggregate
from meal_logger.services.credentials import (
    require_llm_credentials,
    require_provider_credentials,
)
from meal_logger.services.extraction import validate_extracted_items

CONFIG_FIELDS = frozenset(item.name for item in fields(WorkflowConfig))


def transition(session: Session, event: Event) -> Session:  # noqa: PLR0911
    """Return the session that results from applying ``event``."""
    if isinstance(event, SetConfig):
        return _set_config(session, event)
    if isinstance(event, ToggleMicros):
        return replace(session, show_micros=event.value)
    if isinstance(event, SetInput):
        if session.step is not Step.INPUT or session.loading:
            return session
        return replace(session, input_description=event.text)
    if isinstance(event, SubmitDescription):
        return _submit_description(session)
    if isinstance(event, ExtractionSucceeded):
        return _extraction_succeeded(session, event)
    if isinstance(event, ExtractionFailed):
        if session.step is not Step.INPUT or not session.loading:
            return session
        return replace(session, loading=False, error=event.message)
    if isinstance(event, Confirm):
        if session.step is not Step.VERIFY or session.loading:
            return session
        return replace(session, loading=True, error=None)
    if isinstance(event, NutritionSucceeded):
        if session.step is not Step.VERIFY or not session.loading:
            return session
        food_items = tuple(event.items)
        return replace(
            session,
            step=Step.RESULTS,
            food_items=food_items,
            totals=aggregate(food_items),
            loading=False,
            error=None,
        )
    if isinstance(event, NutritionFailed):
        if session.step is not Step.VERIFY or not session.loading:
            return session
        return replace(session, loading=False, error=event.message)
    if isinstance(event, Back):
        if session.step is not Step.VERIFY or session.loading:
            return session
        return replace(session, step=Step.INPUT, parsed_items=(), error=None)
    if isinstance(event, RemoveItem):
        return _remove_item(session, event.index)
    if isinstance(event, StartOver):
        if session.step is not Step.RESULTS:
            return session
        return Session(
            config=session.config,
            input_description=session.input_description,
            show_micros=session.show_micros,
        )
    return session


def _submit_description(session: Session) -> Session:
    if session.step is not Step.INPUT or session.loading:
        return session
    if not session.input_description.strip():
        return replace(session, error=str(EmptyInput()))
    try:
        require_llm_credentials(session.config)
        require_provider_credentials(session.config)
    except MissingCredentials as exc:
        return replace(session, error=str(exc))
    return replace(session, loading=True, error=None)


def _extraction_succeeded(session: Session, event: ExtractionSucceeded) -> Session:
    if session.step is not Step.INPUT or not session.loading:
        return session
    try:
        items = validate_extracted_items(event.items)
    except InvalidExtractionShape as exc:
        return replace(session, loading=False, error=str(exc))
    return replace(
        session,
        step=Step.VERIFY,
        parsed_items=tuple(items),
        loading=False,
        error=None,
    )


def _remove_item(session: Session, index: int) -> Session:
    if session.step is not Step.RESULTS:
        return session
    if not 0 <= index < len(session.food_items):
        return replace(session, error=f"There is no food item at position {index}.")
    food_items = session.food_items[:index] + session.food_items[index + 1 :]
    return replace(
        session, food_items=food_items, totals=aggregate(food_items), error=None
    )


def _set_config(session: Session, event: SetConfig) -> Session:
    if event.field not in CONFIG_FIELDS:
        return replace(session, error=f"Unknown configuration field: {event.field}.")
    value: str | NutritionProvider = event.value
    if event.field == "nutrition_provider":
        try:
            value = NutritionProvider(event.value)
        except ValueError:
            return replace(
                session, error=f"Unknown nutrition provider: {event.value}."
            )
    config = replace(session.config, **{event.field: value})
    return replace(session, config=config)
