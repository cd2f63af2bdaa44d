"""Cheap check for whether an AI reply might contain a workout."""
from typing import Any

# Matched case-insensitively; any single hit is enough
WORKOUT_INDICATORS = (
    "{",
    "[",
    '"name":',
    '"title":',
    "json",
    "workout",
    "workout plan",
    "exercise",
    "exercises",
    "title",
    "sets",
    "reps",
    "weight",
    "bench press",
    "squat",
    "deadlift",
)


def has_workout_indicators(text: Any) -> bool:
    """Return True when the text is worth running extraction on."""
    if not isinstance(text, str):
        return False
    lowered = text.lower()
    return any(indicator in lowered for indicator in WORKOUT_INDICATORS)
