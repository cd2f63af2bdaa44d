"""Error types raised by the AI workout pipeline."""
from typing import Literal, Optional

ParseErrorType = Literal["no_candidate", "invalid_input", "malformed_input", "schema_violation"]


class WorkoutParseError(ValueError):
    """Base class for failures turning an AI response into a workout."""

    error_type: ParseErrorType = "schema_violation"

    def __init__(self, message: str, error_type: Optional[ParseErrorType] = None):
        super().__init__(message)
        self.message = message
        if error_type is not None:
            self.error_type = error_type


class MalformedInputError(WorkoutParseError):
    """Candidate text could not be parsed as JSON, even after repair."""

    error_type: ParseErrorType = "malformed_input"


class SchemaViolationError(WorkoutParseError):
    """Parsed JSON matches neither the canonical nor the legacy workout shape."""

    error_type: ParseErrorType = "schema_violation"


class WorkoutValidationError(WorkoutParseError):
    """Raised by the create path when an AI response does not validate."""


class PersistenceError(RuntimeError):
    """The workout store rejected a write."""
