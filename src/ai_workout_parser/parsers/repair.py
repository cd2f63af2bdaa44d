"""
JSON Repair

Heuristic fixes for near-valid JSON written by an LLM:
- trailing commas before a closing brace or bracket
- unquoted object keys
- single-quoted strings
- output truncated before its closing braces or brackets

This is a shallow rewriter, not a tolerant parser.
"""

import re

from ai_workout_parser.utils import loads_json

TRAILING_COMMA_PATTERN = re.compile(r",(\s*[}\]])")
UNQUOTED_KEY_PATTERN = re.compile(r"([{,]\s*)([a-zA-Z_][a-zA-Z0-9_]*)\s*:")


def _parses(text: str) -> bool:
    try:
        loads_json(text)
    except ValueError:
        return False
    return True


def remove_trailing_commas(text: str) -> str:
    return TRAILING_COMMA_PATTERN.sub(r"\1", text)


def quote_bare_keys(text: str) -> str:
    return UNQUOTED_KEY_PATTERN.sub(r'\1"\2":', text)


def normalize_quotes(text: str) -> str:
    """Turn single-quoted strings into double-quoted ones.

    Text already inside double quotes is left alone, so apostrophes in
    values like "user's goal" survive.
    """
    out = []
    quote = None
    escaped = False

    for ch in text:
        if quote is None:
            if ch == "'":
                quote = "'"
                out.append('"')
            else:
                if ch == '"':
                    quote = '"'
                out.append(ch)
            continue

        if escaped:
            escaped = False
            # \' is not a valid JSON escape
            if quote == "'" and ch == "'":
                out[-1] = "'"
            else:
                out.append(ch)
            continue

        if ch == "\\":
            escaped = True
            out.append(ch)
        elif ch == quote:
            quote = None
            out.append('"')
        elif quote == "'" and ch == '"':
            out.append('\\"')
        else:
            out.append(ch)

    return "".join(out)


def close_unbalanced(text: str) -> str:
    """Append closing braces/brackets missing from truncated output."""
    if text.startswith("{") and not text.endswith("}"):
        text += "}" * max(text.count("{") - text.count("}"), 0)
    if text.startswith("[") and not text.endswith("]"):
        text += "]" * max(text.count("[") - text.count("]"), 0)
    return text


def repair_json(text: str) -> str:
    """
    Best-effort repair of JSON text that failed to parse.

    Text that already parses is returned unchanged. Success is not
    guaranteed; callers must parse the result again.

    Args:
        text: Candidate JSON text

    Returns:
        Repaired text
    """
    if _parses(text):
        return text

    repaired = text.strip()
    repaired = remove_trailing_commas(repaired)
    repaired = quote_bare_keys(repaired)
    repaired = normalize_quotes(repaired)
    repaired = close_unbalanced(repaired)
    return repaired
