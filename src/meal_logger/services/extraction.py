"""Meal description extraction using an LLM."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

import openai
from pydantic import TypeAdapter, ValidationError

from meal_logger.domain.errors import (
    EmptyInput,
    ExtractionUnavailable,
    InvalidExtractionShape,
    MissingCredentials,
)
from meal_logger.domain.extraction import ParsedItem

SYSTEM_PROMPT = """\
You are a nutrition assistant. Your task is to extract food items and their \
quantities from a natural language description.
Output STRICT JSON only. No markdown formatting, no explanations.
Always use English food names, whatever the language of the description.
The output format must be an array of objects:
[
  { "item_name": "string", "quantity": "string containing number and unit" }
]
Example input: "I ate a large banana and a cup of coffee"
Example output: [{"item_name": "large banana", "quantity": "1"}, \
{"item_name": "coffee", "quantity": "1 cup"}]
If the quantity is not specified, estimate a standard serving size or use \
"1 serving".
"""

_ITEMS_ADAPTER = TypeAdapter(list[ParsedItem])

_logger = logging.getLogger(__name__)


class ExtractionClient(Protocol):
    """Interface for the LLM that turns text into food items."""

    async def complete(
        self, *, api_key: str, model: str, system_prompt: str, text: str
    ) -> str:
        """Return the raw text produced by the model."""


@dataclass
class ExtractionService:
    """Service that prompts the LLM and validates its output."""

    client: ExtractionClient
    model: str

    async def extract(self, description: str, api_key: str) -> list[ParsedItem]:
        """Extract food items from a free-text meal description."""
        if not api_key:
            raise MissingCredentials("LLM API Key is required.")
        if not description.strip():
            raise EmptyInput()
        try:
            raw = await self.client.complete(
                api_key=api_key,
                model=self.model,
                system_prompt=SYSTEM_PROMPT,
                text=description,
            )
        except openai.APIError as exc:
            _logger.warning("LLM request failed (model=%s): %s", self.model, exc)
            raise ExtractionUnavailable(f"LLM Error: {exc.message}") from exc
        return parse_extraction_output(raw)


def parse_extraction_output(raw: str) -> list[ParsedItem]:
    """Parse raw LLM text, tolerating markdown code fences."""
    cleaned = _strip_code_fences(raw)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise InvalidExtractionShape(
            "Could not read the list of food items returned by the LLM."
        ) from exc
    return validate_extracted_items(payload)


def validate_extracted_items(value: object) -> list[ParsedItem]:
    """Accept only an ordered list of objects with item_name and quantity."""
    if not isinstance(value, list | tuple):
        raise InvalidExtractionShape(
            "Expected a list of food items from the LLM, "
            f"got {type(value).__name__}."
        )
    try:
        return _ITEMS_ADAPTER.validate_python(list(value))
    except ValidationError as exc:
        raise InvalidExtractionShape(
            "Each food item needs an item_name and a quantity."
        ) from exc


def _strip_code_fences(raw: str) -> str:
    """Remove ```json / ``` markers the model sometimes adds."""
    return raw.replace("```json", "").replace("```", "").strip()
