"""Extraction, repair and validation of workout JSON in AI replies."""
from .extractor import (
    extract_candidate,
    is_valid_json_structure,
    iter_candidates,
    iter_json_candidates,
)
from .indicators import has_workout_indicators
from .repair import repair_json
from .validator import CanonicalShape, LegacyShape, load_json, resolve_schema

__all__ = [
    "CanonicalShape",
    "LegacyShape",
    "extract_candidate",
    "has_workout_indicators",
    "is_valid_json_structure",
    "iter_candidates",
    "iter_json_candidates",
    "load_json",
    "repair_json",
    "resolve_schema",
]
