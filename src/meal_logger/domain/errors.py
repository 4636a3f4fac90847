"""Errors surfaced to the user through the session."""


class MealLoggerError(Exception):
    """Base class for recoverable workflow errors."""


class EmptyInput(MealLoggerError):
    """Raised when a meal description is blank."""

    def __init__(self, message: str = "Please enter a meal description.") -> None:
        super().__init__(message)


class MissingCredentials(MealLoggerError):
    """Raised when a required API credential is not configured."""


class InvalidExtractionShape(MealLoggerError):
    """Raised when extracted items are not a list of name/quantity objects."""


class ProviderUnavailable(MealLoggerError):
    """Raised when a nutrition provider cannot be reached or rejects a request."""


class ExtractionUnavailable(MealLoggerError):
    """Raised when the extraction LLM rejects or fails a request."""
