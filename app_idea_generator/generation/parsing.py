"""Extraction of JSON payloads from model text.

Models are asked for bare JSON but sometimes wrap it in prose or code
fences, so the first balanced object or array is recovered from the text.
"""

import json
import logging
from typing import Union

from app_idea_generator.errors import MalformedResponseError
from app_idea_generator.projects.types import FeatureSuggestion

logger = logging.getLogger(__name__)

_CLOSERS = {"{": "}", "[": "]"}


def _balanced_spans(text: str, opener: str):
    """Yield every substring that starts at `opener` and closes at its matching bracket."""
    closer = _CLOSERS[opener]
    start = text.find(opener)
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for index in range(start, len(text)):
            char = text[index]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == opener:
                depth += 1
            elif char == closer:
                depth -= 1
                if depth == 0:
                    yield text[start:index + 1]
                    break
        start = text.find(opener, start + 1)


def extract_json(text: str, expect: type = dict) -> Union[dict, list]:
    """Parse a JSON object (expect=dict) or array (expect=list) out of model text.

    Raises:
        MalformedResponseError: if no candidate of the expected shape parses.
    """
    stripped = (text or "").strip()
    try:
        data = json.loads(stripped)
        if isinstance(data, expect):
            return data
    except json.JSONDecodeError:
        pass

    opener = "{" if expect is dict else "["
    for candidate in _balanced_spans(stripped, opener):
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, expect):
            return data

    shape = "object" if expect is dict else "array"
    raise MalformedResponseError(f"Could not find a JSON {shape} in the response", raw_text=text)


def parse_surprise_idea(text: str) -> dict:
    """Parse a surprise-idea response into a raw idea dict."""
    return extract_json(text, expect=dict)


def parse_feature_suggestions(text: str) -> list[FeatureSuggestion]:
    """Parse a feature-suggestion response.

    Entries that are not objects or have no name are skipped. Missing or
    repeated ids are replaced with positional ids so every id is unique.
    """
    items = extract_json(text, expect=list)
    suggestions = []
    seen = set()
    for position, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            logger.warning(f"Skipping feature suggestion that is not an object: {item!r}")
            continue
        name = str(item.get("name") or "").strip()
        if not name:
            continue
        feature_id = str(item.get("id") or "").strip()
        if not feature_id or feature_id in seen:
            feature_id = f"feature_{position}"
            while feature_id in seen:
                feature_id += "_"
        seen.add(feature_id)
        suggestions.append(FeatureSuggestion(
            id=feature_id,
            name=name,
            description=str(item.get("description") or "").strip(),
        ))
    return suggestions
