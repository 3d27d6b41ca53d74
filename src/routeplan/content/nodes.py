"""Content nodes: the materialized graph delivered by the fetch layer.

Pages, posts, tags and authors all share one node shape.  Nodes are frozen;
the collection a post lands in is recorded on a separate ``AssignedPost``
rather than stamped onto the node.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from routeplan._types import NodeId, OrderedPosts, RoutePath, Slug


def _nested_slug(value: object) -> str | None:
    """Extract ``slug`` from ``{"slug": ...}`` or accept a bare string."""
    if isinstance(value, Mapping):
        slug = value.get("slug")
        return str(slug) if slug else None
    if isinstance(value, str) and value:
        return value
    return None


def _slug_tuple(values: object) -> tuple[str, ...]:
    if not values:
        return ()
    slugs = (_nested_slug(v) for v in values)  # type: ignore[union-attr]
    return tuple(s for s in slugs if s)


@dataclass(frozen=True, slots=True)
class ContentNode:
    """A page, post, tag or author as delivered by the CMS.

    Attributes:
        id: Stable unique identifier.
        slug: Stable URL path segment.
        url: Optional explicit URL from the CMS; when set it overrides the
            derived route path.
        title: Display title, used only for diagnostics.
        primary_tag: Slug of the primary tag; *None* when the CMS supplied
            none, even if ``tags`` is non-empty.
        tags: Ordered tag slugs attached to a post.
        authors: Ordered author slugs attached to a post.
        post_count: Number of posts for a tag or author; *None* for pages
            and posts, or when the CMS did not report it.

    """

    id: NodeId
    slug: Slug
    url: str | None = None
    title: str = ""
    primary_tag: Slug | None = None
    tags: tuple[Slug, ...] = ()
    authors: tuple[Slug, ...] = ()
    post_count: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ContentNode:
        """Build a node from a raw CMS record.

        Accepts both the CMS field names (``primary_tag: {slug}``,
        ``postCount``) and their snake_case forms.
        """
        count = data.get("postCount", data.get("post_count"))
        return cls(
            id=str(data["id"]),
            slug=str(data.get("slug") or ""),
            url=data.get("url") or None,
            title=str(data.get("title") or ""),
            primary_tag=_nested_slug(data.get("primary_tag")),
            tags=_slug_tuple(data.get("tags")),
            authors=_slug_tuple(data.get("authors")),
            post_count=int(count) if count is not None else None,
        )


@dataclass(frozen=True, slots=True)
class AssignedPost:
    """A post paired with the collection path it was assigned to.

    Each partitioning step produces fresh records; the underlying node is
    shared and never modified.
    """

    node: ContentNode
    collection_path: RoutePath = "/"

    @property
    def id(self) -> NodeId:
        return self.node.id

    @property
    def slug(self) -> Slug:
        return self.node.slug


@dataclass(frozen=True, slots=True)
class ContentGraph:
    """Snapshot of all content for one planning run.

    Every sequence keeps the order the fetch layer delivered, which for
    posts is reverse-chronological.

    Attributes:
        pages: Standalone pages.
        posts: Posts, newest first.
        tags: Tags with their post counts.
        authors: Authors with their post counts.

    """

    pages: OrderedPosts = ()
    posts: OrderedPosts = ()
    tags: OrderedPosts = ()
    authors: OrderedPosts = ()

    @property
    def node_count(self) -> int:
        """Total number of nodes across all four lists."""
        return len(self.pages) + len(self.posts) + len(self.tags) + len(self.authors)
