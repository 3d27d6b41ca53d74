"""Taxonomy pages — a paginated index per tag and per author.

Only taxonomies with at least one post get pages; a tag used solely on
pages (``post_count`` 0) or with no reported count produces nothing.
Taxonomies are not split by collection: a tag index lists posts from every
collection, and ``collectionPaths`` tells the renderer where each one lives.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from routeplan.planning.collections import collection_paths
from routeplan.planning.infinite_scroll import taxonomy_members
from routeplan.planning.pagination import paginate
from routeplan.planning.urls import resolve_url

if TYPE_CHECKING:
    from routeplan._types import Component, TaxonomyKind
    from routeplan.content.nodes import AssignedPost, ContentNode
    from routeplan.planning.infinite_scroll import ScrollIndexes
    from routeplan.planning.models import Route


def has_posts(node: ContentNode) -> bool:
    """True if the taxonomy node reports at least one post."""
    return bool(node.post_count) and node.post_count > 0  # type: ignore[operator]


def build_taxonomy_routes(
    taxonomy: Sequence[ContentNode],
    kind: TaxonomyKind,
    posts: Sequence[AssignedPost],
    indexes: ScrollIndexes,
    component: Component,
    *,
    base_path: str = "/",
    posts_per_page: int,
    iscroll_enabled: bool = False,
) -> Iterator[Route]:
    """Yield the index routes for every tag (or author) with posts.

    Args:
        taxonomy: Tag or author nodes, in CMS order.
        kind: ``"tag"`` or ``"author"``.
        posts: Every post with its final collection assignment.
        indexes: Infinite-scroll id lists; empty when the feature is off.
        component: Render target for this taxonomy's index pages.
        base_path: Site-wide path prefix.
        posts_per_page: Index page size.
        iscroll_enabled: Whether the infinite-scroll loader is active.

    Raises:
        IntegrityError: If an id list names a post missing from ``posts``.

    """
    members = taxonomy_members(posts, kind)

    for node in taxonomy:
        if not has_posts(node):
            continue

        url = resolve_url(base_path, "/", node.slug, node.url)
        post_ids = indexes.ids_for(kind, node.slug)
        lookup_ids = post_ids if iscroll_enabled else members.get(node.slug, ())

        yield from paginate(
            node.post_count,  # type: ignore[arg-type]
            posts_per_page,
            path=url,
            component=component,
            context={
                "slug": node.slug,
                "collectionPaths": collection_paths(lookup_ids, posts),
                "iScrollEnabled": iscroll_enabled,
                "postIds": list(post_ids),
                "cursor": 0,
            },
        )
