"""
Structural Validator

Parses candidate text and decides which workout shape it matches:
the canonical schema first, then the legacy flat schema.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from ai_workout_parser.errors import MalformedInputError, SchemaViolationError
from ai_workout_parser.utils import loads_json

from .models import SimpleWorkoutSchema, WorkoutPlanSchema
from .repair import repair_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanonicalShape:
    """Input matched the canonical schema."""
    workout: WorkoutPlanSchema


@dataclass(frozen=True)
class LegacyShape:
    """Input matched the legacy flat schema."""
    workout: SimpleWorkoutSchema


WorkoutShape = Union[CanonicalShape, LegacyShape]


def format_validation_error(error: ValidationError) -> str:
    """Render pydantic errors as 'loc.path: message; ...'."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item.get("loc", ()))
        msg = item.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def load_json(text: str) -> Any:
    """
    Parse JSON text, repairing it once if the direct parse fails.

    Raises:
        MalformedInputError: If neither the text nor its repair parses
    """
    try:
        return loads_json(text)
    except ValueError as parse_error:
        logger.warning("JSON parse error, attempting repair: %s", parse_error)
        repaired = repair_json(text)
        try:
            obj = loads_json(repaired)
        except ValueError as repair_error:
            raise MalformedInputError(
                f"JSON Parse error: {parse_error}. Repair failed: {repair_error}"
            ) from repair_error
        logger.info("Repaired JSON parsed successfully")
        return obj


def _try_schema(schema: Type[BaseModel], obj: Any) -> Tuple[Optional[BaseModel], Optional[str]]:
    try:
        return schema.model_validate(obj), None
    except ValidationError as e:
        return None, format_validation_error(e)


def resolve_schema(obj: Any) -> WorkoutShape:
    """
    Match a parsed object against the canonical schema, then the legacy one.

    Args:
        obj: Parsed JSON value

    Returns:
        CanonicalShape or LegacyShape

    Raises:
        SchemaViolationError: With both schemas' errors when neither matches
    """
    canonical, canonical_error = _try_schema(WorkoutPlanSchema, obj)
    if canonical is not None:
        logger.debug("Full schema validation successful")
        return CanonicalShape(canonical)

    logger.debug("Full schema failed, trying simple format: %s", canonical_error)
    legacy, legacy_error = _try_schema(SimpleWorkoutSchema, obj)
    if legacy is not None:
        logger.debug("Simple schema validation successful")
        return LegacyShape(legacy)

    raise SchemaViolationError(
        f"Invalid workout format. Full schema: {canonical_error}. Simple schema: {legacy_error}"
    )
