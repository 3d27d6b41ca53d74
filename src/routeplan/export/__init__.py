"""Export — write a route plan to disk (JSON manifest, sitemap.xml)."""

from routeplan.export.manifest import ExportedFile, write_manifest
from routeplan.export.sitemap import generate_sitemap, route_url, write_sitemap

__all__ = ["ExportedFile", "generate_sitemap", "route_url", "write_manifest", "write_sitemap"]
