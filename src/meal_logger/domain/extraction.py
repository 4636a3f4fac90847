"""Models for meal description extraction results."""

from pydantic import BaseModel, ConfigDict, field_validator


class ParsedItem(BaseModel):
    """Single food item extracted from a meal description."""

    model_config = ConfigDict(frozen=True)

    item_name: str
    quantity: str

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_as_text(cls, value: object) -> object:
        # Quantities are opaque; "2" and 2 mean the same thing downstream.
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value
