"""Sitemap generation — sitemap.xml for a route plan.

One ``<url>`` per planned route, in plan order.  Components listed in
``exclude`` (AMP variants, typically) are left out since those pages are
announced through their canonical page instead.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Collection, Sequence
from datetime import date, datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement, tostring

from routeplan.export.manifest import ExportedFile

if TYPE_CHECKING:
    from routeplan.planning.models import Route

_SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def route_url(base_url: str, path: str) -> str:
    """Absolute URL of a route path; pager paths gain their trailing slash."""
    if not path.endswith("/"):
        path += "/"
    return base_url.rstrip("/") + path


def generate_sitemap(
    routes: Sequence[Route],
    base_url: str,
    *,
    exclude: Collection[str] = (),
    lastmod: date | None = None,
) -> str:
    """Render the sitemap XML for ``routes``.

    Args:
        routes: Routes in plan order.
        base_url: Site origin, e.g. ``"https://example.com"``.
        exclude: Components whose routes are not listed.
        lastmod: Date stamped on every entry; today (UTC) by default.

    """
    stamp = (lastmod or datetime.now(timezone.utc).date()).isoformat()

    urlset = Element("urlset", xmlns=_SITEMAP_NS)
    for route in routes:
        if route.component in exclude:
            continue
        url_el = SubElement(urlset, "url")
        SubElement(url_el, "loc").text = route_url(base_url, route.path)
        SubElement(url_el, "lastmod").text = stamp

    body = tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def write_sitemap(
    routes: Sequence[Route],
    base_url: str,
    output_dir: Path,
    *,
    exclude: Collection[str] = (),
) -> ExportedFile | None:
    """Write ``output_dir/sitemap.xml``.

    Without a ``base_url`` there is nothing absolute to list: prints a
    note to stderr and returns *None*.
    """
    if not base_url:
        print("  Sitemap skipped: set base_url in config to enable", file=sys.stderr)
        return None

    t0 = time.perf_counter()
    data = generate_sitemap(routes, base_url, exclude=exclude).encode("utf-8")

    output_dir.mkdir(parents=True, exist_ok=True)
    sitemap_path = output_dir / "sitemap.xml"
    sitemap_path.write_bytes(data)

    return ExportedFile(
        output_path=sitemap_path,
        source_type="sitemap",
        entries=sum(1 for r in routes if r.component not in exclude),
        size_bytes=len(data),
        duration_ms=(time.perf_counter() - t0) * 1000,
    )
