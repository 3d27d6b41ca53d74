"""Shared type definitions for routeplan."""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from routeplan.content.nodes import ContentNode
    from routeplan.planning.models import Route

# Route URL path (e.g., "/blog/features/my-post/")
type RoutePath = str

# Stable content identifier from the CMS
type NodeId = str

# Stable URL path segment
type Slug = str

# Opaque render-target identifier (template name, module path, ...)
type Component = str

# Route kinds that need a component
type RouteKind = Literal["page", "post", "index", "tag", "author", "amp"]

# Taxonomy kinds that get their own indexes
type TaxonomyKind = Literal["tag", "author"]

# Ordered post sequences; order is the CMS order and is never re-sorted
type OrderedPosts = tuple[ContentNode, ...]

# id -> collection path lookup handed to renderers
type CollectionPaths = dict[NodeId, RoutePath]

# Render context passed through to the component
type RouteContext = dict[str, Any]

# Page-creation callback receiving one route at a time
type RouteSink = Callable[[Route], None]

# Raw result delivered by the fetch collaborator
type FetchResult = Mapping[str, Any]
