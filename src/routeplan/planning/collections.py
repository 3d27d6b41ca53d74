"""Collections — carve named post groups out of the full post list.

A collection is a path prefix plus a selector.  Collections are applied in
configuration order; each one takes the posts its selector matches from
whatever the previous collections left behind.  A post matching two
selectors therefore lands in the earlier collection.  Posts no collection
claims end up in the default collection at ``/``.

Selectors are small frozen dataclasses so a collection list can be built
from (and written back to) plain configuration data.  Any callable taking
a ``ContentNode`` and returning a bool also satisfies ``Selector``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from routeplan._errors import ConfigError, IntegrityError
from routeplan.content.nodes import AssignedPost

if TYPE_CHECKING:
    from routeplan._types import CollectionPaths, NodeId, RoutePath
    from routeplan.content.nodes import ContentNode

DEFAULT_COLLECTION_PATH = "/"


@runtime_checkable
class Selector(Protocol):
    """Decides whether a post belongs to a collection."""

    def __call__(self, node: ContentNode) -> bool: ...


@dataclass(frozen=True, slots=True)
class NeverSelector:
    """Matches nothing."""

    def __call__(self, node: ContentNode) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class TagSelector:
    """Matches posts carrying ``tag`` anywhere in their tag list."""

    tag: str

    def __call__(self, node: ContentNode) -> bool:
        return self.tag in node.tags or node.primary_tag == self.tag


@dataclass(frozen=True, slots=True)
class PrimaryTagSelector:
    """Matches posts whose primary tag is ``tag``."""

    tag: str

    def __call__(self, node: ContentNode) -> bool:
        return node.primary_tag == self.tag


@dataclass(frozen=True, slots=True)
class AuthorSelector:
    """Matches posts written (or co-written) by ``author``."""

    author: str

    def __call__(self, node: ContentNode) -> bool:
        return self.author in node.authors


@dataclass(frozen=True, slots=True)
class SlugSelector:
    """Matches an explicit set of post slugs."""

    slugs: frozenset[str]

    def __call__(self, node: ContentNode) -> bool:
        return node.slug in self.slugs


def selector_from_config(data: Mapping[str, object] | None) -> Selector:
    """Build a selector from a configuration mapping.

    Recognised forms::

        {"tag": "feature"}
        {"primary_tag": "feature"}
        {"author": "jane"}
        {"slugs": ["welcome", "about-us"]}

    An empty or missing mapping yields a selector that matches nothing.

    Raises:
        ConfigError: If the mapping has no recognised key, or more than one.

    """
    if not data:
        return NeverSelector()

    keys = set(data) & {"tag", "primary_tag", "author", "slugs"}
    if len(keys) != 1 or len(data) != 1:
        msg = (
            f"Selector must have exactly one of 'tag', 'primary_tag', "
            f"'author' or 'slugs', got {sorted(data)}"
        )
        raise ConfigError(msg)

    key = keys.pop()
    value = data[key]
    if key == "slugs":
        if isinstance(value, str) or not isinstance(value, Iterable):
            msg = f"Selector 'slugs' must be a list, got {type(value).__name__}"
            raise ConfigError(msg)
        return SlugSelector(frozenset(str(v) for v in value))

    if not isinstance(value, str) or not value:
        msg = f"Selector {key!r} must be a non-empty string, got {value!r}"
        raise ConfigError(msg)
    if key == "tag":
        return TagSelector(value)
    if key == "primary_tag":
        return PrimaryTagSelector(value)
    return AuthorSelector(value)


@dataclass(frozen=True, slots=True)
class Collection:
    """A named group of posts addressed by its own path prefix.

    Attributes:
        path: Path prefix for the collection's posts and index
            (e.g. ``"/features/"``).
        selector: Decides which posts belong here.

    """

    path: RoutePath
    selector: Selector = NeverSelector()


@dataclass(frozen=True, slots=True)
class Partition:
    """Result of one partitioning step.

    Attributes:
        matched: Posts the selector claimed, stamped with the collection path.
        unmatched: Every other post, stamped with the default path.

    """

    matched: tuple[AssignedPost, ...]
    unmatched: tuple[AssignedPost, ...]


def partition(
    posts: Iterable[AssignedPost | ContentNode],
    selector: Selector,
    collection_path: RoutePath,
) -> Partition:
    """Split ``posts`` into the collection and the residual.

    Input order is preserved in both groups.  New ``AssignedPost`` records
    are returned; nothing passed in is modified.
    """
    matched: list[AssignedPost] = []
    unmatched: list[AssignedPost] = []

    for post in posts:
        node = post.node if isinstance(post, AssignedPost) else post
        if selector(node):
            matched.append(AssignedPost(node, collection_path))
        else:
            unmatched.append(AssignedPost(node, DEFAULT_COLLECTION_PATH))

    return Partition(matched=tuple(matched), unmatched=tuple(unmatched))


def collection_paths(
    ids: Iterable[NodeId],
    posts: Iterable[AssignedPost],
) -> CollectionPaths:
    """Map each id in ``ids`` to the collection path of the matching post.

    Raises:
        IntegrityError: If an id has no post in ``posts``.

    """
    by_id = {post.id: post.collection_path for post in posts}
    paths: CollectionPaths = {}
    for node_id in ids:
        try:
            paths[node_id] = by_id[node_id]
        except KeyError:
            msg = f"Post id {node_id!r} is referenced but not present in the post list"
            raise IntegrityError(msg) from None
    return paths
