"""Pulling a JSON object out of a model reply that may wrap it in prose or fences."""

from __future__ import annotations
import json
import re
from typing import Any, Optional

from ..errors import GenerationError

_FENCE = re.compile(r"^```[A-Za-z0-9_-]*\s*|\s*```$")
_OBJECT_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


def strip_code_fences(text: str) -> str:
    t = text.strip()
    if t.startswith("```") and t.endswith("```"):
        t = _FENCE.sub("", t)
    return t.strip()


def extract_json(text: Optional[str]) -> Optional[Any]:
    """
    Parse the reply as JSON, or the outermost {...} block inside it.
    Returns None when nothing parses.
    """
    if not text or not text.strip():
        return None
    t = strip_code_fences(text)
    try:
        return json.loads(t)
    except json.JSONDecodeError:
        pass

    m = _OBJECT_BLOCK.search(t)
    if not m:
        return None
    try:
        return json.loads(m.group(0))
    except json.JSONDecodeError:
        return None


def require_object(text: Optional[str], err: str = "Expected a JSON object.") -> dict:
    """Strict: the reply must contain a JSON object, else GenerationError."""
    data = extract_json(text)
    if not isinstance(data, dict):
        raise GenerationError(err)
    return data
