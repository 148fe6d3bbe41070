"""
Tolerant JSON-object extraction from raw model output.

Models asked for "JSON only" still wrap replies in markdown fences or add a
sentence before the object. This module recovers the first JSON object
without ever raising, so callers can decide how to degrade.

Usage:
    from common.utils import parse_json_object

    data = parse_json_object(raw)
    if data is None:
        ...  # fall back
"""

import json
import re
from typing import Any, Dict, Optional


_FENCE_RE = re.compile(r"^```(?:json|JSON)?\s*\n?(.*?)\n?```\s*$", re.DOTALL)


def _strip_code_fence(text: str) -> str:
    match = _FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text


def _extract_first_json_object(text: str) -> Optional[str]:
    """Extract the first complete JSON object from text using brace matching.

    Handles nested objects and strings containing braces.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escape = False

    for i in range(start, len(text)):
        ch = text[i]

        if escape:
            escape = False
            continue

        if ch == "\\":
            escape = True
            continue

        if ch == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def parse_json_object(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """Parse raw model output into a dict.

    Returns None if no JSON object can be recovered. Top-level arrays and
    scalars are not objects and also yield None.

    Args:
        raw: Raw string output from the model.

    Returns:
        The parsed object, or None.
    """
    if not raw or not raw.strip():
        return None

    text = _strip_code_fence(raw.strip())

    # Fast path for clean output
    try:
        obj = json.loads(text)
        return obj if isinstance(obj, dict) else None
    except (ValueError, RecursionError):
        pass

    candidate = _extract_first_json_object(text)
    if candidate is None:
        return None

    try:
        obj = json.loads(candidate)
    except (ValueError, RecursionError):
        return None

    return obj if isinstance(obj, dict) else None
