"""
Candidate Extractor

Finds JSON-shaped text inside a free-form AI reply. Strategies run from most
to least constrained so braces in surrounding prose are rarely captured:
- fenced code blocks (```json, then any fence, then `inline` spans)
- regex matches for workout objects, then any {...}, then any [...]
- positional slices (first '{' to last '}', first '[' to last ']')
"""

import logging
import re
from typing import Iterator, Optional, Tuple

from ai_workout_parser.utils import loads_json

from .indicators import has_workout_indicators
from .repair import repair_json

logger = logging.getLogger(__name__)

CODE_BLOCK_PATTERNS = (
    ("json_fence", re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE), "```"),
    ("fence", re.compile(r"```\s*([\s\S]*?)\s*```"), "```"),
    ("inline_code", re.compile(r"`([^`]+)`"), "`"),
)

JSON_PATTERNS = (
    ("exercises_object", re.compile(r'(\{[^{}]*"exercises"[^{}]*\})', re.DOTALL), "}"),
    ("object", re.compile(r"(\{[\s\S]*?\})"), "}"),
    ("array", re.compile(r"(\[[\s\S]*?\])"), "]"),
)


def is_valid_json_structure(text: str) -> bool:
    """True when text is a JSON object or array."""
    trimmed = text.strip()
    if not trimmed or trimmed[0] not in "{[":
        return False
    try:
        loads_json(trimmed)
    except ValueError:
        return False
    return True


def _bounded_matches(pattern: re.Pattern, message: str, closer: str) -> Iterator[re.Match]:
    # A match must end on the closer, so nothing past its last occurrence is scanned
    end = message.rfind(closer)
    if end < 0:
        return iter(())
    return pattern.finditer(message, 0, end + len(closer))


def _positional_slice(message: str, open_char: str, close_char: str) -> Optional[str]:
    start = message.find(open_char)
    end = message.rfind(close_char)
    if start >= 0 and end > start:
        return message[start:end + 1]
    return None


def iter_candidates(message: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (strategy, candidate) pairs in priority order.

    Candidates are raw substrings; nothing is parsed or repaired here.
    """
    for strategy, pattern, closer in CODE_BLOCK_PATTERNS:
        for match in _bounded_matches(pattern, message, closer):
            candidate = match.group(1).strip()
            if candidate:
                yield strategy, candidate

    for strategy, pattern, closer in JSON_PATTERNS:
        for match in _bounded_matches(pattern, message, closer):
            yield strategy, match.group(1)

    for strategy, open_char, close_char in (
        ("object_position", "{", "}"),
        ("array_position", "[", "]"),
    ):
        candidate = _positional_slice(message, open_char, close_char)
        if candidate:
            yield strategy, candidate


def iter_json_candidates(message: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (strategy, json_text) for every candidate that is a JSON object or
    array as-is or after repair, in priority order.

    Non-str input and replies without workout indicators yield nothing.
    """
    if not isinstance(message, str):
        logger.warning("Expected string message but received %s", type(message).__name__)
        return

    # Plain conversational replies skip extraction entirely
    if not has_workout_indicators(message):
        return

    logger.debug("Extracting JSON from message: %.200s", message)

    for strategy, candidate in iter_candidates(message):
        if is_valid_json_structure(candidate):
            logger.debug("Found JSON via %s", strategy)
            yield strategy, candidate.strip()
            continue

        repaired = repair_json(candidate)
        if is_valid_json_structure(repaired):
            logger.debug("Found and repaired JSON via %s", strategy)
            yield strategy, repaired.strip()


def extract_candidate(message: str) -> Optional[str]:
    """
    Return the first JSON object/array found in an AI reply.

    Each candidate is checked as-is, then after repair. The repaired text is
    returned when repair was needed.

    Args:
        message: Raw assistant reply

    Returns:
        JSON text, or None when the reply holds no usable JSON
    """
    for _, candidate in iter_json_candidates(message):
        return candidate
    return None
