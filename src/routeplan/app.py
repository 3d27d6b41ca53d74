"""Command entry points — plan a site from files on disk.

``plan()`` loads configuration from the site root and a content graph from
a JSON fetch result, runs the planner, and writes the route manifest (and
sitemap when ``base_url`` is set).
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from routeplan.config_loader import load_config
from routeplan.content.graph import load_graph
from routeplan.export.manifest import ExportedFile, write_manifest
from routeplan.export.sitemap import write_sitemap
from routeplan.observability.collector import PlanCollector
from routeplan.planning.assembler import plan_routes
from routeplan.planning.models import Route
from routeplan.site_config import create_config_node


@dataclass(frozen=True, slots=True)
class PlanResult:
    """Aggregate result of a ``plan()`` run.

    Attributes:
        routes: Planned routes in emission order.
        files: Files written (manifest, sitemap).
        duration_ms: Total wall-clock time.

    """

    routes: tuple[Route, ...]
    files: tuple[ExportedFile, ...]
    duration_ms: float


def plan(
    graph_path: str | Path,
    root: str | Path = ".",
    *,
    output: str | Path = "routes.json",
    **kwargs: object,
) -> PlanResult:
    """Plan every route for a content graph and write the results.

    Args:
        graph_path: JSON file holding the fetch result.
        root: Site root containing ``routeplan.yaml``.
        output: Manifest path; relative paths are under ``root``.
        **kwargs: Override RoutePlanConfig fields.

    """
    t0 = time.perf_counter()
    root = Path(root)
    config = load_config(root, **kwargs)
    graph = load_graph(Path(graph_path))

    collector = PlanCollector(verbose=config.verbose)
    collector.info(f"content graph loaded: {graph.node_count} nodes")
    routes = plan_routes(graph, config, collector=collector)

    output_path = Path(output)
    if not output_path.is_absolute():
        output_path = root / output_path

    files = [write_manifest(routes, output_path)]
    amp_components = {config.templates.amp} if config.amp else set()
    sitemap = write_sitemap(
        routes, config.base_url, output_path.parent, exclude=amp_components,
    )
    if sitemap is not None:
        files.append(sitemap)

    elapsed = (time.perf_counter() - t0) * 1000
    result = PlanResult(routes=tuple(routes), files=tuple(files), duration_ms=elapsed)
    _print_plan_summary(result)
    return result


def show_config(root: str | Path = ".", **kwargs: object) -> str:
    """Return the site config node for ``root`` as JSON."""
    config = load_config(Path(root), **kwargs)
    node = create_config_node(config.base_path)
    return json.dumps(node.to_dict(), indent=2)


def _print_plan_summary(result: PlanResult) -> None:
    """Print plan completion summary to stderr."""
    count = len(result.routes)
    lines = [
        "",
        "─" * 41,
        f"  Planned {count} route{'s' if count != 1 else ''}",
    ]
    for exported in result.files:
        lines.append(f"  Wrote {exported.source_type}: {exported.output_path}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)
