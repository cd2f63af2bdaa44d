"""Turns a validated workout shape into the canonical WorkoutPlan.

Both input shapes end up here:
  - canonical input keeps its ids; missing or repeated ids are regenerated
  - legacy input is expanded, one ExerciseSet per counted set, all with
    fresh ids and the entry's reps/weight
"""

from typing import Iterable, List, Optional, Set

from ai_workout_parser.models import (
    DEFAULT_DURATION_MINUTES,
    FALLBACK_WORKOUT_TITLE,
    Exercise,
    ExerciseSet,
    WorkoutPlan,
)
from ai_workout_parser.parsers.validator import CanonicalShape, LegacyShape, WorkoutShape
from ai_workout_parser.utils import generate_unique_id


def _claim_id(candidate: Optional[str], prefix: str, seen: Set[str]) -> str:
    """Keep candidate if it is new within the collection, else generate one."""
    new_id = candidate if candidate and candidate not in seen else generate_unique_id(prefix)
    while new_id in seen:
        new_id = generate_unique_id(prefix)
    seen.add(new_id)
    return new_id


def _assign_set_ids(sets: Iterable) -> List[ExerciseSet]:
    seen: Set[str] = set()
    return [
        ExerciseSet(
            id=_claim_id(s.id, "set", seen),
            reps=s.reps,
            weight=s.weight,
            notes=s.notes,
        )
        for s in sets
    ]


def _assign_exercise_ids(exercises: Iterable) -> List[Exercise]:
    seen: Set[str] = set()
    return [
        Exercise(
            id=_claim_id(ex.id, "exercise", seen),
            name=ex.name,
            sets=_assign_set_ids(ex.sets),
            notes=ex.notes,
            is_max_lift=ex.is_max_lift,
        )
        for ex in exercises
    ]


def normalize_canonical(shape: CanonicalShape) -> WorkoutPlan:
    workout = shape.workout
    return WorkoutPlan(
        title=workout.title,
        exercises=_assign_exercise_ids(workout.exercises),
        notes=workout.notes,
        duration=workout.duration,
    )


def normalize_legacy(shape: LegacyShape) -> WorkoutPlan:
    """Expand flat {exercise, reps, sets: N, weight} entries into full exercises."""
    exercises = [
        Exercise(
            id=generate_unique_id("exercise"),
            name=entry.exercise,
            sets=[
                ExerciseSet(id=generate_unique_id("set"), reps=entry.reps, weight=entry.weight)
                for _ in range(entry.sets)
            ],
        )
        for entry in shape.workout.entries
    ]
    return WorkoutPlan(
        title=shape.workout.title or FALLBACK_WORKOUT_TITLE,
        exercises=exercises,
        notes="",
        duration=DEFAULT_DURATION_MINUTES,
    )


def normalize_workout(shape: WorkoutShape) -> WorkoutPlan:
    """Produce the canonical WorkoutPlan for either validated shape."""
    if isinstance(shape, CanonicalShape):
        return normalize_canonical(shape)
    return normalize_legacy(shape)


def ensure_ids(workout: WorkoutPlan) -> WorkoutPlan:
    """Return a copy of a canonical plan with unique ids on every exercise and set."""
    return workout.model_copy(update={"exercises": _assign_exercise_ids(workout.exercises)})
