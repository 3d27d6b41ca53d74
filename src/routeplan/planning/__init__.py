"""Planning layer — pure functions from content to routes.

Leaf components live here; the sequencing ``RoutePlanner`` is in
``routeplan.planning.assembler`` (import it from there or from the
top-level ``routeplan`` package).
"""

from routeplan.planning.collections import (
    Collection,
    Partition,
    Selector,
    collection_paths,
    partition,
    selector_from_config,
)
from routeplan.planning.infinite_scroll import ScrollIndexes, build_indexes
from routeplan.planning.models import PaginationContext, Route
from routeplan.planning.pagination import paginate, paginate_contexts
from routeplan.planning.posts import build_post_routes
from routeplan.planning.taxonomy import build_taxonomy_routes
from routeplan.planning.urls import resolve_url

__all__ = [
    "Collection",
    "PaginationContext",
    "Partition",
    "Route",
    "ScrollIndexes",
    "Selector",
    "build_indexes",
    "build_post_routes",
    "build_taxonomy_routes",
    "collection_paths",
    "paginate",
    "paginate_contexts",
    "partition",
    "resolve_url",
    "selector_from_config",
]
