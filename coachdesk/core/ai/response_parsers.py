"""
Best-effort parsing of Claude responses.

Resource suggestions are requested as a JSON array but the model does not
always comply, so a line-oriented scraper is used as fallback. Malformed
entries are dropped silently.

Dependencies: json, re
System role: Post-processing of LLM text into structured fields
"""

import json
import re
from typing import Any

from coachdesk.core.ai.schemas import ParsedResource

MAX_RESOURCES = 3

_JSON_ARRAY = re.compile(r"\[.*\]", re.DOTALL)
_NEW_ITEM = re.compile(r"^[\d\-\*•]")
_TITLE_KEYWORD = re.compile(r"^(title:|resource:)", re.IGNORECASE)
_LIST_MARKER = re.compile(r"^[\d\-\*•\.]+\s*")
_TITLE_PREFIX = re.compile(r"^(title:|resource:)\s*", re.IGNORECASE)
_TYPE_SPLIT = re.compile(r"type:|format:", re.IGNORECASE)
_URL_PREFIX = re.compile(r"^(url:|link:)\s*", re.IGNORECASE)
_DESCRIPTION_PREFIX = re.compile(r"^(description:|why:)\s*", re.IGNORECASE)


def _load_json_array(text: str) -> list | None:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        match = _JSON_ARRAY.search(text)
        if not match:
            return None
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
    return parsed if isinstance(parsed, list) else None


def _resource_from_json(item: Any) -> ParsedResource | None:
    if not isinstance(item, dict):
        return None
    title = item.get("title")
    if not isinstance(title, str) or not title.strip():
        return None
    url = item.get("url")
    tags = item.get("tags")
    return ParsedResource(
        title=title.strip(),
        type=str(item.get("type") or "article"),
        url=url if isinstance(url, str) and url else None,
        description=str(item.get("description") or ""),
        tags=[str(t) for t in tags] if isinstance(tags, list) else [],
    )


def parse_resources_from_json(text: str, limit: int = MAX_RESOURCES) -> list[ParsedResource]:
    """
    Parse a JSON array of resources, tolerating prose around the array.

    Args:
        text: Raw model output
        limit: Maximum number of resources kept

    Returns:
        list[ParsedResource]: Parsed resources, empty if no array was found
    """
    items = _load_json_array(text)
    if not items:
        return []
    resources = []
    for item in items[:limit]:
        resource = _resource_from_json(item)
        if resource is not None:
            resources.append(resource)
    return resources


def parse_resources_from_text(text: str, limit: int = MAX_RESOURCES) -> list[ParsedResource]:
    """
    Scrape resources out of a loosely formatted list.

    A line starting with a digit, dash, asterisk or bullet (or with
    "Title:"/"Resource:") opens a new resource. Following lines fill in
    type, url and description.

    Args:
        text: Raw model output
        limit: Maximum number of resources kept

    Returns:
        list[ParsedResource]: Resources that have a title
    """
    resources: list[ParsedResource] = []
    current: dict | None = None

    def flush() -> None:
        if current and current["title"]:
            resources.append(ParsedResource(**current))

    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue

        if _NEW_ITEM.match(trimmed) or _TITLE_KEYWORD.match(trimmed):
            flush()
            title = _TITLE_PREFIX.sub("", _LIST_MARKER.sub("", trimmed))
            current = {"title": title.strip(), "type": "article", "url": None, "description": "", "tags": []}
            continue

        if current is None:
            continue

        lower = trimmed.lower()
        if "type:" in lower or "format:" in lower:
            parts = _TYPE_SPLIT.split(trimmed, maxsplit=1)
            current["type"] = (parts[1].strip() if len(parts) > 1 else "") or "article"
        elif "url:" in lower or "link:" in lower or lower.startswith("http"):
            current["url"] = _URL_PREFIX.sub("", trimmed)
        elif "description:" in lower or "why:" in lower:
            current["description"] = _DESCRIPTION_PREFIX.sub("", trimmed)
        elif not current["description"]:
            current["description"] = trimmed

    flush()
    return resources[:limit]


def parse_resources(text: str, limit: int = MAX_RESOURCES) -> list[ParsedResource]:
    """Parse resources as JSON first, falling back to the text scraper."""
    resources = parse_resources_from_json(text, limit)
    if not resources:
        resources = parse_resources_from_text(text, limit)
    return resources


def parse_tags(text: str) -> list[str]:
    """Split a comma-separated tag answer into lower-cased tag names."""
    return [tag.strip().lower() for tag in text.split(",") if tag.strip()]
