"""Tests for turning validated shapes into canonical workout plans."""
from ai_workout_parser.models import Exercise, ExerciseSet, WorkoutPlan
from ai_workout_parser.parsers.models import SimpleWorkoutSchema, WorkoutPlanSchema
from ai_workout_parser.parsers.validator import CanonicalShape, LegacyShape
from ai_workout_parser.services.normalizer import ensure_ids, normalize_workout


def _all_ids_unique(workout: WorkoutPlan) -> bool:
    exercise_ids = [ex.id for ex in workout.exercises]
    if len(set(exercise_ids)) != len(exercise_ids):
        return False
    for ex in workout.exercises:
        set_ids = [s.id for s in ex.sets]
        if len(set(set_ids)) != len(set_ids):
            return False
    return True


class TestLegacyConversion:

    def test_bench_press_expands_to_three_sets(self):
        shape = LegacyShape(SimpleWorkoutSchema.model_validate(
            [{"exercise": "Bench Press", "reps": "8", "sets": 3, "weight": "135"}]
        ))
        workout = normalize_workout(shape)

        assert len(workout.exercises) == 1
        exercise = workout.exercises[0]
        assert exercise.name == "Bench Press"
        assert len(exercise.sets) == 3
        assert all(s.reps == "8" and s.weight == "135" for s in exercise.sets)
        assert exercise.notes == ""
        assert exercise.is_max_lift is False
        assert _all_ids_unique(workout)

    def test_title_falls_back(self):
        shape = LegacyShape(SimpleWorkoutSchema.model_validate(
            {"title": "", "exercises": [{"exercise": "Row", "reps": 12, "sets": 1}]}
        ))
        workout = normalize_workout(shape)
        assert workout.title == "AI Generated Workout"
        assert workout.duration == 45
        assert workout.notes == ""

    def test_title_kept_when_given(self):
        shape = LegacyShape(SimpleWorkoutSchema.model_validate(
            {"title": "Back", "exercises": [{"exercise": "Row", "reps": 12, "sets": 1}]}
        ))
        assert normalize_workout(shape).title == "Back"


class TestCanonicalIds:

    def test_provided_ids_kept(self, canonical_workout_dict):
        workout = normalize_workout(CanonicalShape(WorkoutPlanSchema.model_validate(canonical_workout_dict)))
        assert [ex.id for ex in workout.exercises] == ["ex-1", "ex-2"]
        assert [s.id for s in workout.exercises[0].sets] == ["set-1", "set-2"]

    def test_missing_ids_generated(self):
        workout = normalize_workout(CanonicalShape(WorkoutPlanSchema.model_validate({
            "title": "T",
            "exercises": [
                {"name": "Squat", "sets": [{"reps": 5}, {"reps": 5}]},
                {"name": "Lunge", "sets": [{"reps": 10}]},
            ],
        })))
        assert workout.exercises[0].id.startswith("exercise_")
        assert workout.exercises[0].sets[0].id.startswith("set_")
        assert _all_ids_unique(workout)

    def test_repeated_ids_replaced(self):
        workout = normalize_workout(CanonicalShape(WorkoutPlanSchema.model_validate({
            "title": "T",
            "exercises": [
                {"id": "1", "name": "Squat", "sets": [{"id": "s", "reps": 5}, {"id": "s", "reps": 5}]},
                {"id": "1", "name": "Lunge", "sets": [{"id": "s", "reps": 10}]},
            ],
        })))
        assert workout.exercises[0].id == "1"
        assert workout.exercises[1].id != "1"
        assert workout.exercises[0].sets[0].id == "s"
        assert workout.exercises[0].sets[1].id != "s"
        # Uniqueness is per parent collection
        assert workout.exercises[1].sets[0].id == "s"
        assert _all_ids_unique(workout)


class TestEnsureIds:

    def test_duplicate_ids_fixed_on_canonical_plan(self):
        workout = WorkoutPlan(
            title="T",
            exercises=[
                Exercise(id="a", name="Squat", sets=[ExerciseSet(id="x", reps="5"), ExerciseSet(id="x", reps="5")]),
                Exercise(id="a", name="Lunge", sets=[ExerciseSet(id="y", reps="10")]),
            ],
        )
        fixed = ensure_ids(workout)
        assert _all_ids_unique(fixed)
        assert fixed.title == "T"
        assert workout.exercises[1].id == "a"

    def test_unique_ids_untouched(self):
        workout = WorkoutPlan(
            title="T",
            exercises=[Exercise(id="a", name="Squat", sets=[ExerciseSet(id="x", reps="5")])],
        )
        assert ensure_ids(workout).model_dump() == workout.model_dump()
