"""Infinite-scroll indexes — ordered post ids for client-side loading.

The client walks these id lists to fetch the next batch of posts.  Order
is the post order of the content graph (newest first) and is never
re-sorted here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from routeplan.content.nodes import AssignedPost

if TYPE_CHECKING:
    from routeplan._types import NodeId, Slug, TaxonomyKind
    from routeplan.content.nodes import ContentNode


@dataclass(frozen=True, slots=True)
class ScrollIndexes:
    """Id lists for the incremental loader.

    Attributes:
        index_ids: Every post id, in order.
        tag_ids: Post ids per tag slug.
        author_ids: Post ids per author slug.

    """

    index_ids: tuple[NodeId, ...] = ()
    tag_ids: dict[Slug, tuple[NodeId, ...]] = field(default_factory=dict)
    author_ids: dict[Slug, tuple[NodeId, ...]] = field(default_factory=dict)

    def ids_for(self, kind: TaxonomyKind, slug: Slug) -> tuple[NodeId, ...]:
        """Id list for one tag or author; empty when unknown."""
        table = self.tag_ids if kind == "tag" else self.author_ids
        return table.get(slug, ())


def _node(post: AssignedPost | ContentNode) -> ContentNode:
    return post.node if isinstance(post, AssignedPost) else post


def taxonomy_members(
    posts: Iterable[AssignedPost | ContentNode],
    kind: TaxonomyKind,
) -> dict[Slug, tuple[NodeId, ...]]:
    """Group post ids by tag or author slug, keeping post order.

    A post is listed under its primary tag only; secondary tags do not
    place it on a tag's index.  Posts without a primary tag appear under
    no tag.  Every listed author counts.
    """
    members: dict[Slug, list[NodeId]] = {}
    for post in posts:
        node = _node(post)
        if kind == "tag":
            slugs = [node.primary_tag] if node.primary_tag else []
        else:
            slugs = list(node.authors)
        for slug in dict.fromkeys(slugs):
            members.setdefault(slug, []).append(node.id)
    return {slug: tuple(ids) for slug, ids in members.items()}


def build_indexes(
    enabled: bool,
    posts: Iterable[AssignedPost | ContentNode],
) -> ScrollIndexes:
    """Build the infinite-scroll id lists, or empty ones when disabled."""
    if not enabled:
        return ScrollIndexes()

    posts = tuple(posts)
    return ScrollIndexes(
        index_ids=tuple(_node(post).id for post in posts),
        tag_ids=taxonomy_members(posts, "tag"),
        author_ids=taxonomy_members(posts, "author"),
    )
