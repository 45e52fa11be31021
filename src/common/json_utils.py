"""
Extract the JSON object from generated text.

Models are asked for a single JSON object but answer with fences, a
sentence of preamble, or small syntax slips. `parse_llm_json` finds the
outermost {...} span and decodes it, retrying through json-repair when the
strict decoder refuses. It never invents an object: text with no braces is an
error. Checking the object's shape is left to the pydantic schemas.
"""

import json
import re
from typing import Any, Dict

from json_repair import repair_json

_FENCE_RE = re.compile(r"^```(?:json|JSON)?\s*(.*?)\s*```$", re.DOTALL)


def parse_llm_json(text: str) -> Dict[str, Any]:
    """
    Decode the single JSON object contained in `text`.

    Raises:
        ValueError: Empty input, no {...} span, or a span that neither the
            decoder nor json-repair turns into a non-empty object
    """
    if not text or not text.strip():
        raise ValueError("Empty input: no JSON content to parse")

    candidate = find_object_span(strip_code_fence(text))

    try:
        value = json.loads(candidate)
    except json.JSONDecodeError as e:
        value = _repaired(candidate)
        if value is None:
            raise ValueError(
                f"Unparseable JSON object ({e.msg} at char {e.pos}): {candidate[:300]}"
            ) from e

    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object, got {type(value).__name__}")
    return value


def strip_code_fence(text: str) -> str:
    """Drop a surrounding ``` or ```json fence, if there is one."""
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    return match.group(1) if match else stripped


def find_object_span(text: str) -> str:
    """Return text from the first '{' through the last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ValueError(f"No JSON object found in text: {text[:200]}")
    return text[start:end + 1]


def _repaired(candidate: str) -> Any:
    """json-repair result for `candidate`, or None when nothing usable comes back."""
    value = repair_json(candidate, return_objects=True)
    # [{...}] is accepted as the object it wraps
    if isinstance(value, list) and len(value) == 1:
        value = value[0]
    if isinstance(value, dict) and value:
        return value
    return None
