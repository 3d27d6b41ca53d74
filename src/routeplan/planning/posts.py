"""Post pages — one route per post with its navigation context."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from routeplan.planning.collections import collection_paths
from routeplan.planning.models import Route
from routeplan.planning.urls import resolve_url

if TYPE_CHECKING:
    from routeplan._types import Component, Slug
    from routeplan.content.nodes import AssignedPost, ContentNode

# Related posts shown per post page
RELATED_LIMIT = 3


def tag_counts(tags: Sequence[ContentNode]) -> dict[Slug, int | None]:
    """Post count per tag slug; the first tag wins on duplicate slugs."""
    counts: dict[Slug, int | None] = {}
    for tag in tags:
        counts.setdefault(tag.slug, tag.post_count)
    return counts


def primary_tag_count(node: ContentNode, counts: dict[Slug, int | None]) -> int:
    """Post count of ``node``'s primary tag.

    0 when the post has no primary tag, the tag is unknown, or the CMS
    reported no count for it.
    """
    slug = node.primary_tag
    if not slug:
        return 0
    count = counts.get(slug)
    return count if count is not None else 0


def build_post_routes(
    posts: Sequence[AssignedPost],
    tags: Sequence[ContentNode],
    component: Component,
    *,
    base_path: str = "/",
    amp_path: str = "",
) -> Iterator[Route]:
    """Yield a route for every post of one collection.

    ``prev``/``next`` point at the neighbouring posts' slugs within the
    collection and are *None* at either end.  ``collectionPaths`` maps every
    post id of the collection to its collection path.

    Args:
        posts: The collection's posts, in order.
        tags: All tags, used for the primary tag's post count.
        component: Render target for post pages.
        base_path: Site-wide path prefix.
        amp_path: Suffix appended to every post path (``"amp/"`` for AMP
            variants, empty otherwise).

    """
    paths = collection_paths((post.id for post in posts), posts)
    counts = tag_counts(tags)
    last = len(posts) - 1

    for i, post in enumerate(posts):
        node = post.node
        url = resolve_url(base_path, post.collection_path, node.slug, node.url)

        yield Route(
            path=f"{url}{amp_path}",
            component=component,
            context={
                "slug": node.slug,
                "prev": posts[i - 1].slug if i > 0 else None,
                "next": posts[i + 1].slug if i < last else None,
                "tag": node.primary_tag or "",
                "limit": RELATED_LIMIT,
                "skip": 0,
                "primaryTagCount": primary_tag_count(node, counts),
                "collectionPaths": paths,
            },
        )
