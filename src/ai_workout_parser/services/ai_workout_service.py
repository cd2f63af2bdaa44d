"""Pipeline from an AI chat reply to a stored workout.

iter_json_candidates -> load_json -> resolve_schema -> normalize_workout -> store
"""
import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ai_workout_parser.errors import WorkoutParseError, WorkoutValidationError
from ai_workout_parser.models import WorkoutPlan, WorkoutValidationResult
from ai_workout_parser.parsers.extractor import iter_json_candidates
from ai_workout_parser.parsers.validator import load_json, resolve_schema
from ai_workout_parser.services.normalizer import ensure_ids, normalize_workout
from ai_workout_parser.services.usage_service import CUSTOM_WORKOUTS_FEATURE
from ai_workout_parser.services.workout_store import WorkoutStore

logger = logging.getLogger(__name__)

NO_JSON_FOUND_ERROR = "No valid JSON found in AI response"


def parse_workout_plan(raw: Any) -> WorkoutPlan:
    """
    Parse JSON text (or an already-decoded value) into a WorkoutPlan.

    Raises:
        MalformedInputError: If text cannot be parsed even after repair
        SchemaViolationError: If the value matches neither workout schema
    """
    obj = load_json(raw) if isinstance(raw, str) else raw
    return normalize_workout(resolve_schema(obj))


def validate_ai_workout_response(response: Any) -> WorkoutValidationResult:
    """
    Validate an AI reply and return the parsed workout or the reason it failed.

    Candidates are tried in extraction order and the first one that parses
    into a workout wins, so an inner fragment such as a single set does not
    hide the plan around it. When none does, the first candidate's error is
    reported. Parse failures are reported in the result, never raised.
    """
    if not isinstance(response, str):
        return WorkoutValidationResult(
            is_valid=False,
            error=f"Expected string response but received {type(response).__name__}",
            error_type="invalid_input",
        )

    first_error: Optional[WorkoutParseError] = None
    for strategy, candidate in iter_json_candidates(response):
        try:
            workout = parse_workout_plan(candidate)
        except WorkoutParseError as e:
            logger.debug(f"Candidate from {strategy} rejected: {e.message}")
            if first_error is None:
                first_error = e
            continue

        logger.info(f"Workout parsed successfully: {workout.title}")
        return WorkoutValidationResult(is_valid=True, workout=workout)

    if first_error is None:
        return WorkoutValidationResult(
            is_valid=False,
            error=NO_JSON_FOUND_ERROR,
            error_type="no_candidate",
        )

    logger.warning(f"Workout validation failed: {first_error.message}")
    return WorkoutValidationResult(is_valid=False, error=first_error.message, error_type=first_error.error_type)


def create_workout_from_parsed_data(
    owner_key: str,
    workout: WorkoutPlan,
    target_date: Optional[datetime] = None,
    *,
    store: WorkoutStore,
) -> str:
    """Store an already-canonical workout and return its record id."""
    return store.store(owner_key, ensure_ids(workout), target_date)


def store_validated_workout(
    owner_key: str,
    workout: WorkoutPlan,
    target_date: Optional[datetime] = None,
    *,
    store: WorkoutStore,
    increment_usage: Optional[Callable[[str], Any]] = None,
) -> str:
    """Store a validated workout, then count it against the owner's usage.

    A failing meter is logged and ignored; store failures propagate.
    """
    record_id = create_workout_from_parsed_data(owner_key, workout, target_date, store=store)

    if increment_usage is not None:
        try:
            increment_usage(CUSTOM_WORKOUTS_FEATURE)
        except Exception as e:
            logger.warning(f"Usage increment failed for {owner_key}: {e}")

    return record_id


def create_workout_from_ai(
    owner_key: str,
    response: Any,
    target_date: Optional[datetime] = None,
    *,
    store: WorkoutStore,
    increment_usage: Optional[Callable[[str], Any]] = None,
) -> str:
    """
    Validate an AI reply and store the resulting workout.

    Args:
        owner_key: Account the workout is stored under
        response: Raw assistant reply
        target_date: Day the workout is scheduled for
        store: Workout store to append to
        increment_usage: Optional meter called once after a successful store

    Returns:
        Id of the stored record

    Raises:
        WorkoutValidationError: If the reply does not hold a valid workout;
            the store is never called in that case
        PersistenceError: Propagated unchanged from the store
    """
    validation = validate_ai_workout_response(response)
    if not validation.is_valid or validation.workout is None:
        raise WorkoutValidationError(
            f"Workout validation failed: {validation.error}",
            validation.error_type,
        )

    return store_validated_workout(
        owner_key,
        validation.workout,
        target_date,
        store=store,
        increment_usage=increment_usage,
    )
