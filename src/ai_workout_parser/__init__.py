"""Turns AI chat replies into validated, canonical workout plans."""
from ai_workout_parser.errors import (
    MalformedInputError,
    PersistenceError,
    SchemaViolationError,
    WorkoutParseError,
    WorkoutValidationError,
)
from ai_workout_parser.models import Exercise, ExerciseSet, WorkoutPlan, WorkoutValidationResult
from ai_workout_parser.parsers.extractor import extract_candidate
from ai_workout_parser.services.ai_workout_service import (
    create_workout_from_ai,
    create_workout_from_parsed_data,
    parse_workout_plan,
    store_validated_workout,
    validate_ai_workout_response,
)

__all__ = [
    "Exercise",
    "ExerciseSet",
    "MalformedInputError",
    "PersistenceError",
    "SchemaViolationError",
    "WorkoutParseError",
    "WorkoutPlan",
    "WorkoutValidationError",
    "WorkoutValidationResult",
    "create_workout_from_ai",
    "create_workout_from_parsed_data",
    "extract_candidate",
    "parse_workout_plan",
    "store_validated_workout",
    "validate_ai_workout_response",
]
