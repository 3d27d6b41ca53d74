"""Route plan assembler — the single pass from content graph to routes.

Planning order (also the order routes are emitted in)::

    init
      -> ordinary_pages        one route per CMS page
      -> collections           each configured collection, in order, takes
                               its posts from the previous residual
      -> default_collection    whatever no collection claimed, at "/"
      -> tag_pages             paginated index per tag with posts
      -> author_pages          paginated index per author with posts
      -> done

Routes are handed to a sink one at a time as they are produced.  The order
is part of the contract: it fixes which collection wins a post that more
than one selector matches.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING

from routeplan._errors import DuplicateRouteError
from routeplan.config import RoutePlanConfig
from routeplan.content.graph import graph_from_result
from routeplan.content.nodes import AssignedPost
from routeplan.observability.collector import PlanCollector
from routeplan.planning.collections import DEFAULT_COLLECTION_PATH, partition
from routeplan.planning.infinite_scroll import build_indexes
from routeplan.planning.models import Route
from routeplan.planning.pagination import paginate
from routeplan.planning.posts import build_post_routes
from routeplan.planning.taxonomy import build_taxonomy_routes
from routeplan.planning.urls import resolve_url

if TYPE_CHECKING:
    from collections.abc import Iterable

    from routeplan._types import FetchResult, RoutePath, RouteSink
    from routeplan.content.nodes import ContentGraph, ContentNode
    from routeplan.observability.events import PlanStage

# Path suffix for AMP variants of post pages
AMP_PATH = "amp/"


class RoutePlanner:
    """Plans every route of a site from one content graph snapshot.

    A planner is cheap to create; make one per run.

    Args:
        config: Frozen planning configuration.
        sink: Page-creation callback receiving each route.  When omitted,
            routes are only counted and recorded in the collector.
        collector: Event collector for diagnostics.  Defaults to one that
            prints when ``config.verbose`` is set.

    """

    def __init__(
        self,
        config: RoutePlanConfig,
        *,
        sink: RouteSink | None = None,
        collector: PlanCollector | None = None,
    ) -> None:
        self._config = config
        self._sink = sink
        self._collector = collector or PlanCollector(verbose=config.verbose)
        self._paths: set[RoutePath] = set()
        self._stage: PlanStage = "init"

    @property
    def stage(self) -> PlanStage:
        """Current planner state."""
        return self._stage

    @property
    def route_count(self) -> int:
        """Routes emitted so far."""
        return len(self._paths)

    def plan(self, graph: ContentGraph) -> int:
        """Emit every route for ``graph`` and return how many were emitted.

        Raises:
            TemplateError: If a required route kind has no component.  Raised
                before any route is emitted.
            IntegrityError: If a taxonomy references a post that is not in
                the graph.
            DuplicateRouteError: If two routes resolve to the same path.

        """
        config = self._config
        config.templates.validate(amp=config.amp)
        t0 = time.perf_counter()

        self._enter("ordinary_pages")
        self._plan_ordinary_pages(graph.pages)
        self._checkpoint("ordinary pages")

        self._enter("collections")
        residual = tuple(AssignedPost(node) for node in graph.posts)
        assigned: list[AssignedPost] = []
        for collection in config.collections:
            path = resolve_url("/", collection.path)
            split = partition(residual, collection.selector, path)
            self._plan_collection(split.matched, path, graph.tags)
            assigned.extend(split.matched)
            residual = split.unmatched
            self._checkpoint(f"collection {path}")

        self._enter("default_collection")
        self._plan_collection(residual, DEFAULT_COLLECTION_PATH, graph.tags)
        assigned.extend(residual)
        self._checkpoint(f"collection {DEFAULT_COLLECTION_PATH}")

        # Taxonomies span collections; restore the graph's post order
        by_id = {post.id: post for post in assigned}
        all_posts = tuple(by_id[node.id] for node in graph.posts)
        indexes = build_indexes(config.infinite_scroll, all_posts)

        self._enter("tag_pages")
        self._emit_all(build_taxonomy_routes(
            graph.tags, "tag", all_posts, indexes, config.templates.require("tag"),
            base_path=config.base_path,
            posts_per_page=config.posts_per_page,
            iscroll_enabled=config.infinite_scroll,
        ))
        self._checkpoint("tag pages")

        self._enter("author_pages")
        self._emit_all(build_taxonomy_routes(
            graph.authors, "author", all_posts, indexes, config.templates.require("author"),
            base_path=config.base_path,
            posts_per_page=config.posts_per_page,
            iscroll_enabled=config.infinite_scroll,
        ))
        self._checkpoint("taxonomies")

        self._enter("done")
        elapsed = (time.perf_counter() - t0) * 1000
        self._collector.record_finished(self.route_count, duration_ms=elapsed)
        return self.route_count

    # ------------------------------------------------------------------
    # Planning steps
    # ------------------------------------------------------------------

    def _plan_ordinary_pages(self, pages: Sequence[ContentNode]) -> None:
        component = self._config.templates.require("page")
        for node in pages:
            self._emit(Route(
                path=resolve_url(self._config.base_path, "/", node.slug, node.url),
                component=component,
                context={"slug": node.slug},
            ))

    def _plan_collection(
        self,
        posts: Sequence[AssignedPost],
        collection_path: RoutePath,
        tags: Sequence[ContentNode],
    ) -> None:
        """Post pages plus the paginated index for one collection."""
        config = self._config
        templates = config.templates

        if posts:
            first = posts[0].node.title or posts[0].slug
            self._collector.info(f"collection {collection_path}: {len(posts)} posts from {first!r}")

        self._emit_all(build_post_routes(
            posts, tags, templates.require("post"), base_path=config.base_path,
        ))
        if config.amp:
            self._emit_all(build_post_routes(
                posts, tags, templates.require("amp"),
                base_path=config.base_path,
                amp_path=AMP_PATH,
            ))

        indexes = build_indexes(config.infinite_scroll, posts)
        self._emit_all(paginate(
            len(posts),
            config.posts_per_page,
            path=resolve_url(config.base_path, collection_path),
            component=templates.require("index"),
            context={
                "collectionPath": collection_path,
                "iScrollEnabled": config.infinite_scroll,
                "postIds": list(indexes.index_ids),
                "cursor": 0,
            },
        ))

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _emit(self, route: Route) -> None:
        if route.path in self._paths:
            msg = f"Route path {route.path!r} is planned twice (component={route.component!r})"
            raise DuplicateRouteError(msg)
        self._paths.add(route.path)
        self._collector.record_route(route)
        if self._sink is not None:
            self._sink(route)

    def _emit_all(self, routes: Iterable[Route]) -> None:
        for route in routes:
            self._emit(route)

    def _enter(self, stage: PlanStage) -> None:
        self._stage = stage

    def _checkpoint(self, label: str) -> None:
        self._collector.record_checkpoint(self._stage, label, routes_emitted=self.route_count)


def plan_routes(
    graph: ContentGraph,
    config: RoutePlanConfig | None = None,
    *,
    collector: PlanCollector | None = None,
) -> list[Route]:
    """Plan every route for ``graph`` and return them in emission order."""
    routes: list[Route] = []
    planner = RoutePlanner(config or RoutePlanConfig(), sink=routes.append, collector=collector)
    planner.plan(graph)
    return routes


async def create_pages(
    fetch: Callable[[], Awaitable[FetchResult]],
    sink: RouteSink,
    config: RoutePlanConfig | None = None,
    *,
    collector: PlanCollector | None = None,
) -> int:
    """Await the content fetch, then plan synchronously into ``sink``.

    Raises:
        FetchError: If the fetch result reports errors.  No route is emitted.

    """
    config = config or RoutePlanConfig()
    result = await fetch()
    graph = graph_from_result(result)

    if collector is None:
        collector = PlanCollector(verbose=config.verbose)
    collector.info(f"content graph fetched: {graph.node_count} nodes")

    return RoutePlanner(config, sink=sink, collector=collector).plan(graph)
