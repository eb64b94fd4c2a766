"""Pure parsing helpers for relay payloads."""

from __future__ import annotations

import json
import math
import re
from typing import Any

# Decimal literal as JavaScript Number() reads it; no "_" separators or non-ASCII digits
_NUMERIC_STRING_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_TITLE_LINE_RE = re.compile(r"^Title:\s*(.+)$", re.MULTILINE)
_MARKDOWN_IMAGE_RE = re.compile(r"!\[[^\]]*]\((https?://[^\s)]+)\)")


def parse_json_slice(payload: str | None) -> Any | None:
    """
    Recover a JSON object wrapped in non-JSON framing.

    Parses the text between the first "{" and the last "}" inclusive. Returns
    None when there is no such pair or the slice is not valid JSON. Braces
    inside string values outside the real object boundaries are not handled.
    """
    if not payload:
        return None

    start = payload.find("{")
    end = payload.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None

    try:
        return json.loads(payload[start : end + 1])
    except json.JSONDecodeError:
        return None


def coerce_view_count(value: Any) -> int | None:
    """Coerce a numeric or numeric-string play count to a non-negative int."""
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        numeric = value
    elif isinstance(value, str):
        stripped = value.strip()
        if not _NUMERIC_STRING_RE.fullmatch(stripped):
            return None
        numeric = float(stripped)
    else:
        return None

    if not math.isfinite(numeric) or numeric < 0:
        return None
    return int(numeric)


def string_or_none(value: Any) -> str | None:
    """Keep non-empty strings verbatim; anything else is absent."""
    if isinstance(value, str) and value:
        return value
    return None


def first_string(*values: Any) -> str | None:
    for value in values:
        candidate = string_or_none(value)
        if candidate is not None:
            return candidate
    return None


def extract_markdown_title(markdown: str) -> str | None:
    """Return the trimmed text of the first `Title:` line."""
    match = _TITLE_LINE_RE.search(markdown)
    if not match:
        return None
    title = match.group(1).strip()
    return title or None


def extract_markdown_images(markdown: str) -> list[str]:
    """Return every Markdown image URL in document order."""
    return [match.group(1) for match in _MARKDOWN_IMAGE_RE.finditer(markdown)]


def pick_cover(images: list[str], loading_marker: str) -> str | None:
    """Prefer the first image that is not a loading placeholder."""
    for image in images:
        if loading_marker not in image:
            return image
    for image in images:
        if image:
            return image
    return None
