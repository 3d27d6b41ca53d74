"""Content graph loading — turn a fetch result into a ``ContentGraph``.

The fetch layer delivers a GraphQL-shaped result::

    {
        "data": {
            "allGhostPage":   {"edges": [{"node": {...}}, ...]},
            "allGhostPost":   {"edges": [...]},
            "allGhostTag":    {"edges": [...]},
            "allGhostAuthor": {"edges": [...]},
        },
        "errors": [...],   # present only on failure
    }

Each ``all*`` entry may also be a plain list of node records.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from routeplan._errors import ContentError, FetchError
from routeplan.content.nodes import ContentGraph, ContentNode

if TYPE_CHECKING:
    from routeplan._types import FetchResult, OrderedPosts

# Result keys for each node list, in ContentGraph field order
_COLLECTION_KEYS: tuple[tuple[str, str], ...] = (
    ("pages", "allGhostPage"),
    ("posts", "allGhostPost"),
    ("tags", "allGhostTag"),
    ("authors", "allGhostAuthor"),
)


def _format_error(error: object) -> str:
    if isinstance(error, Mapping):
        return str(error.get("message") or error)
    return str(error)


def _raise_for_errors(result: FetchResult) -> None:
    """Raise one aggregated ``FetchError`` if the result carries errors."""
    errors = result.get("errors")
    if not errors:
        return
    if isinstance(errors, (str, Mapping)):
        errors = [errors]
    messages = "; ".join(_format_error(e) for e in errors)
    msg = f"Content fetch failed with {len(errors)} error(s): {messages}"
    raise FetchError(msg)


def _read_nodes(data: Mapping[str, Any], key: str) -> OrderedPosts:
    raw = data.get(key)
    if raw is None:
        return ()
    if isinstance(raw, Mapping):
        raw = raw.get("edges", ())
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        msg = f"Expected a list of nodes under {key!r}, got {type(raw).__name__}"
        raise ContentError(msg)

    nodes: list[ContentNode] = []
    for entry in raw:
        record = entry.get("node", entry) if isinstance(entry, Mapping) else None
        if not isinstance(record, Mapping) or "id" not in record:
            msg = f"Malformed node under {key!r}: {entry!r}"
            raise ContentError(msg)
        nodes.append(ContentNode.from_mapping(record))
    return tuple(nodes)


def graph_from_result(result: FetchResult) -> ContentGraph:
    """Build a ``ContentGraph`` from a fetch result.

    Raises:
        FetchError: If the result reports any errors.  Nothing is planned
            from a failed fetch.
        ContentError: If the data section is missing or malformed.

    """
    _raise_for_errors(result)

    data = result.get("data")
    if not isinstance(data, Mapping):
        msg = "Fetch result has no 'data' section"
        raise ContentError(msg)

    lists = {field: _read_nodes(data, key) for field, key in _COLLECTION_KEYS}
    return ContentGraph(**lists)


def load_graph(path: Path) -> ContentGraph:
    """Read a fetch result from a JSON file and build the graph."""
    try:
        result = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Failed to read content graph {path}: {exc}"
        raise ContentError(msg) from exc
    if not isinstance(result, Mapping):
        msg = f"Content graph {path} must contain a JSON object"
        raise ContentError(msg)
    return graph_from_result(result)
