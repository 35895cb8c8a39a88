"""Parsers for LLM replies: code fences, JSON payloads, and delimited sections"""

import json
import re
from typing import Any


CONTENT_RE = re.compile(r'===CONTENT===\s*(.*?)\s*===METADATA===', re.DOTALL)
METADATA_RE = re.compile(r'===METADATA===\s*(.*?)\s*===END===', re.DOTALL)


def strip_outer_fence(text: str, lang: str = "") -> str:
    """Remove a ``` or ```lang fence wrapping the whole reply; inner fences are left alone."""
    text = text.strip()
    m = re.match(rf'^```(?:{re.escape(lang)})?[ \t]*\r?\n(.*?)\r?\n?```$', text, re.DOTALL | re.IGNORECASE)
    return m.group(1).strip() if m else text


def strip_json_fences(text: str) -> str:
    """Drop every ```json / ``` marker from a reply meant to hold bare JSON."""
    return re.sub(r'```(?:json)?\n?', '', text).strip()


def parse_json_payload(text: str) -> Any:
    """Strip fences and decode JSON; raises ValueError on malformed input."""
    return json.loads(strip_json_fences(text))


def parse_combined(text: str) -> tuple[str, dict[str, Any]]:
    """Split a ===CONTENT=== / ===METADATA=== / ===END=== reply into (markdown, metadata).

    A missing section yields '' or {}; malformed metadata JSON raises ValueError
    so the caller can discard the whole reply.
    """
    content_match = CONTENT_RE.search(text)
    metadata_match = METADATA_RE.search(text)

    content = strip_outer_fence(content_match.group(1), "markdown") if content_match else ""

    metadata: dict[str, Any] = {}
    if metadata_match:
        parsed = parse_json_payload(metadata_match.group(1))
        if not isinstance(parsed, dict):
            raise ValueError(f"Expected a JSON object for metadata, got {type(parsed).__name__}")
        metadata = parsed
    return content, metadata
