"""Utility functions."""
import json
import math
import uuid
from typing import Any, Optional


def generate_unique_id(prefix: str) -> str:
    """Return a fresh identifier such as ``exercise_3f2a...``."""
    return f"{prefix}_{uuid.uuid4().hex}"


def to_text(value: Any) -> Optional[str]:
    """Render a JSON number or string as text, returning None for anything else
    (including NaN and infinities).

    Integral floats drop their fractional part so ``10.0`` and ``10`` both
    become ``"10"``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


def to_count(value: Any) -> Optional[int]:
    """Convert a set count given as number or numeric string to int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_json(text: str) -> Any:
    """json.loads that rejects NaN, Infinity and -Infinity like a strict JSON parser."""
    return json.loads(text, parse_constant=_reject_constant)
