"""
JSON for documents and the clipboard.

Documents are decoded strictly. Clipboard payloads are free text (often
pasted out of a chat or a markdown file), so they may be fenced, wrapped
in prose, or slightly malformed; ``repair=True`` handles those.
"""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """Text did not contain a usable JSON object."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def _strip_code_fence(text: str) -> str:
    fence = text.find("```")
    if fence == -1:
        return text
    body_start = text.find("\n", fence)
    if body_start == -1:
        return text
    fence_end = text.find("```", body_start)
    return text[body_start + 1 : fence_end] if fence_end != -1 else text[body_start + 1 :]


def _object_span(text: str) -> str | None:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Decode the JSON object embedded in ``text``.

    Args:
        text: A document, or clipboard text containing one component object
        repair: Fall back to json_repair when strict decoding fails

    Raises:
        JSONParseError: No object found, invalid JSON, or not an object
    """
    text = text.strip()
    # Bare objects may carry ``` inside string values (custom templates)
    if not text.startswith("{"):
        text = _strip_code_fence(text)
    candidate = _object_span(text)
    if candidate is None:
        raise JSONParseError("No JSON object found in text")

    try:
        result = msgspec.json.decode(candidate.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        try:
            result = orjson.loads(repair_json(candidate))
        except Exception as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, indent: int = 0) -> str:
    """
    Encode to JSON; non-ASCII text (accents, emoji) stays literal.

    orjson handles compact and 2-space output. Other widths go through
    the stdlib encoder.
    """
    if indent in (0, 2):
        option = orjson.OPT_INDENT_2 if indent == 2 else None
        try:
            return orjson.dumps(obj, option=option).decode("utf-8")
        except TypeError:
            # e.g. integers outside 64-bit range
            pass
    return json.dumps(obj, indent=indent or None, ensure_ascii=False)


__all__ = ["JSONParseError", "extract_json", "safe_json_dumps"]
