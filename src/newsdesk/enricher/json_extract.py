"""Locate a JSON object embedded in free-form model output."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def find_json_object(text: str) -> str | None:
    """Return the first outermost balanced ``{...}`` substring of ``text``.

    The scan starts at the first ``{`` and tracks nesting depth, ignoring
    braces inside JSON string literals. Surrounding prose and markdown
    fences are skipped.

    Returns:
        The balanced substring, or None if there is no ``{`` or it never closes.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Strictly parse the first balanced JSON object found in ``text``.

    Returns:
        The parsed object, or None when none can be located or parsed.
    """
    candidate = find_json_object(text)
    if candidate is None:
        logger.warning("No JSON object found in enrichment response")
        return None
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse enrichment JSON: %s", e)
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed
