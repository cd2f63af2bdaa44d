"""
Parser Models

Pydantic schemas the structural validator checks AI output against:
- Canonical schema (WorkoutPlanSchema): exercises carry an array of sets
- Legacy schema (SimpleWorkoutSchema): flat entries with an integer set count
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, RootModel, StrictFloat, StrictInt, field_validator

from ai_workout_parser.models import DEFAULT_DURATION_MINUTES
from ai_workout_parser.utils import to_count, to_text

MAX_LEGACY_SETS = 100


def _coerce_reps(value: Any) -> str:
    text = to_text(value)
    if text is None:
        raise ValueError("reps must be a string or a number")
    return text


def _coerce_weight(value: Any) -> str:
    # Missing, null, 0 and "" all mean "no weight"
    if not value:
        return ""
    text = to_text(value)
    if text is None:
        raise ValueError("weight must be a string or a number")
    return text


class ExerciseSetSchema(BaseModel):
    """One set as written by the assistant"""
    id: Optional[str] = None
    reps: str
    weight: str = ""
    notes: str = ""

    @field_validator("reps", mode="before")
    @classmethod
    def _reps_to_text(cls, v):
        return _coerce_reps(v)

    @field_validator("weight", mode="before")
    @classmethod
    def _weight_to_text(cls, v):
        return _coerce_weight(v)


class ExerciseSchema(BaseModel):
    """Exercise in the canonical shape"""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, description="Exercise name")
    sets: List[ExerciseSetSchema] = Field(..., min_length=1, description="Sets in order")
    notes: str = ""
    is_max_lift: bool = Field(default=False, alias="isMaxLift")

    class Config:
        populate_by_name = True


class WorkoutPlanSchema(BaseModel):
    """Canonical workout plan shape (schema A)"""
    title: str = Field(..., min_length=1, description="Workout display name")
    exercises: List[ExerciseSchema] = Field(..., min_length=1, description="Exercises in order")
    notes: str = ""
    # Numbers only; "60" and true are rejected rather than coerced
    duration: Union[StrictInt, StrictFloat] = DEFAULT_DURATION_MINUTES


class SimpleExerciseSchema(BaseModel):
    """Flat legacy entry: {exercise, reps, sets: count, weight?}"""
    exercise: str = Field(..., min_length=1)
    reps: str
    sets: int = Field(..., ge=1, le=MAX_LEGACY_SETS)
    weight: str = ""

    @field_validator("reps", mode="before")
    @classmethod
    def _reps_to_text(cls, v):
        return _coerce_reps(v)

    @field_validator("sets", mode="before")
    @classmethod
    def _sets_to_count(cls, v):
        count = to_count(v)
        if count is None:
            raise ValueError("sets must be a whole number")
        return count

    @field_validator("weight", mode="before")
    @classmethod
    def _weight_to_text(cls, v):
        return _coerce_weight(v)


class SimpleWorkoutObject(BaseModel):
    """Legacy object form: {exercises: [...], title?}"""
    exercises: List[SimpleExerciseSchema] = Field(..., min_length=1)
    title: Optional[str] = None


class SimpleWorkoutSchema(RootModel[Union[List[SimpleExerciseSchema], SimpleWorkoutObject]]):
    """Legacy schema B: a bare array of entries or an object wrapping them"""

    @field_validator("root")
    @classmethod
    def _require_entries(cls, v):
        if isinstance(v, list) and not v:
            raise ValueError("At least one exercise is required")
        return v

    @property
    def entries(self) -> List[SimpleExerciseSchema]:
        return self.root if isinstance(self.root, list) else self.root.exercises

    @property
    def title(self) -> Optional[str]:
        return None if isinstance(self.root, list) else self.root.title
