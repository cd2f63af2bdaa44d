"""Canonical workout models produced by the AI response pipeline."""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ai_workout_parser.errors import ParseErrorType

DEFAULT_DURATION_MINUTES = 45
FALLBACK_WORKOUT_TITLE = "AI Generated Workout"


class ExerciseSet(BaseModel):
    """A single set of an exercise."""
    id: str
    reps: str
    weight: str = ""
    notes: str = ""


class Exercise(BaseModel):
    """An exercise with one or more sets."""
    id: str
    name: str = Field(..., min_length=1)
    sets: List[ExerciseSet] = Field(..., min_length=1)
    notes: str = ""
    is_max_lift: bool = Field(default=False, alias="isMaxLift")

    class Config:
        populate_by_name = True


class WorkoutPlan(BaseModel):
    """Normalized workout plan ready to be stored."""
    title: str = Field(..., min_length=1)
    exercises: List[Exercise] = Field(..., min_length=1)
    notes: str = ""
    duration: Union[int, float] = DEFAULT_DURATION_MINUTES


class WorkoutValidationResult(BaseModel):
    """Outcome of validating an AI response.

    Failures are reported here rather than raised so callers can show the
    error in the chat thread and let the user re-prompt.
    """
    is_valid: bool
    workout: Optional[WorkoutPlan] = None
    error: Optional[str] = None
    error_type: Optional[ParseErrorType] = None


class WorkoutRecord(BaseModel):
    """Document written to the workout store."""
    owner_key: str
    title: str
    date: datetime
    exercises: List[Exercise]
    notes: str = ""
    is_completed: bool = False
    duration: Union[int, float] = 0
    created_at: datetime
