"""Routeplan — deterministic route planning for headless-CMS sites.

Turns a content graph (pages, posts, tags, authors) into the complete,
ordered list of routes a static site needs: content pages, paginated
collection indexes, tag and author indexes, with the navigation context
each page renders with.

Quick start::

    from routeplan import RoutePlanConfig, graph_from_result, plan_routes

    graph = graph_from_result(fetch_result)
    routes = plan_routes(graph, RoutePlanConfig(base_path="/blog/"))

Into a page-creation callback, once the fetch resolves::

    await routeplan.create_pages(fetch, create_page, config)

"""

__version__ = "0.1.0-dev"
__all__ = [
    "Collection",
    "RoutePlanConfig",
    "RoutePlanner",
    "Templates",
    "__version__",
    "create_pages",
    "graph_from_result",
    "load_config",
    "plan_routes",
]

_LAZY = {
    "Collection": "routeplan.planning.collections",
    "RoutePlanConfig": "routeplan.config",
    "Templates": "routeplan.config",
    "RoutePlanner": "routeplan.planning.assembler",
    "create_pages": "routeplan.planning.assembler",
    "plan_routes": "routeplan.planning.assembler",
    "graph_from_result": "routeplan.content.graph",
    "load_config": "routeplan.config_loader",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import routeplan`` fast (no YAML import until configuration is
    actually loaded).
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
