"""URL resolution — one canonical path per node.

Resolution order:
    1. Explicit ``url`` from the CMS (its path component), composed under
       the base path.
    2. ``base_path + collection_path + slug``.

Resolved paths are directory-style: a leading ``/``, exactly one ``/``
between segments and a trailing ``/``.  The root resolves to ``/``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from routeplan._types import RoutePath


def _segments(path: str | None) -> list[str]:
    if not path:
        return []
    return [s for s in path.split("/") if s]


def _join(segments: list[str]) -> RoutePath:
    return "/" + "".join(f"{segment}/" for segment in segments)


def resolve_url(
    base_path: str = "/",
    collection_path: str = "/",
    slug: str | None = None,
    url: str | None = None,
) -> RoutePath:
    """Resolve a node's canonical route path.

    Args:
        base_path: Site-wide path prefix (e.g. ``"/blog/"``).
        collection_path: Path of the collection the node belongs to.
        slug: The node's slug, appended after the collection path.
        url: Optional CMS URL.  When non-empty it wins outright over
            ``collection_path`` and ``slug``.  Absolute URLs contribute only
            their path; a path already under ``base_path`` is not prefixed
            a second time, so resolving a resolved path is a no-op.

    Returns:
        The normalized path.

    """
    base = _segments(base_path)

    if url:
        tail = _segments(urlsplit(url).path)
        if base and tail[: len(base)] == base:
            tail = tail[len(base):]
    else:
        tail = _segments(collection_path) + _segments(slug)

    return _join(base + tail)
