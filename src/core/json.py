"""JSON extraction and encoding for node payloads."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def _strip_fences(text: str) -> str:
    """Return the body of the first markdown code fence, or the text unchanged."""
    if "```" not in text:
        return text

    if "```json" in text:
        start = text.find("```json") + 7
    else:
        start = text.find("```") + 3

    end = text.find("```", start)
    if end == -1:
        return text
    return text[start:end].strip()


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Extract and parse a JSON object embedded in free text.

    Handles markdown code fences and prose around the object, which is how
    hand-written and model-generated node payloads usually arrive.

    Args:
        text: Text containing a JSON object
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If no object can be recovered
    """
    working = _strip_fences(text.strip())

    start = working.find("{")
    end = working.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise JSONParseError("No JSON object found in text")

    json_str = working[start:end + 1]

    try:
        result = msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        try:
            result = json.loads(repair_json(json_str))
        except Exception as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to a JSON string.

    Compact output goes through orjson; indented output uses the standard
    library so the indent width is honoured.
    """
    indent = kwargs.get("indent", 0)

    if not indent:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except TypeError:
            # orjson rejects non-str keys and ints beyond 64 bits
            pass

    return json.dumps(obj, indent=indent or None, default=str)
