"""Recover a JSON object from free-form model output.

Models often wrap the requested JSON in prose or markdown code fences
despite instructions. Parsing runs in two stages:

1. ``json.loads`` on the whole reply.
2. ``json.loads`` on the span from the first ``{`` to the last ``}``.

Only JSON objects are accepted; arrays and scalars count as unparsed, as
do objects holding strings that cannot be encoded as UTF-8.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def _loads_object(text: str) -> dict[str, Any] | None:
    try:
        value = json.loads(text)
        # Lone surrogates such as "\ud800" decode fine but cannot be sent as UTF-8
        json.dumps(value, ensure_ascii=False).encode("utf-8")
    except (ValueError, RecursionError):
        return None
    return value if isinstance(value, dict) else None


def extract_json_span(text: str) -> str | None:
    """Return the substring between the first '{' and the last '}', inclusive."""
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last == -1 or first >= last:
        return None
    return text[first:last + 1]


def parse_model_reply(text: str) -> dict[str, Any] | None:
    parsed = _loads_object(text)
    if parsed is not None:
        return parsed

    span = extract_json_span(text)
    if span is None:
        logger.info("Model reply contains no JSON object")
        return None

    parsed = _loads_object(span)
    if parsed is None:
        logger.warning("Could not parse embedded JSON from model reply")
    return parsed
