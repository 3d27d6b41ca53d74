"""Tests for routeplan.export — route manifest and sitemap.xml."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from xml.etree.ElementTree import fromstring

from routeplan.export.manifest import manifest_json, write_manifest
from routeplan.export.sitemap import generate_sitemap, route_url, write_sitemap
from routeplan.planning.models import Route

_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _routes() -> list[Route]:
    return [
        Route(path="/", component="index.html", context={"pageNumber": 0}),
        Route(path="/page/2", component="index.html", context={"pageNumber": 1}),
        Route(path="/hello/", component="post.html", context={"slug": "hello", "prev": None}),
    ]


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


class TestManifest:
    """write_manifest — JSON route list."""

    def test_json_shape(self) -> None:
        data = json.loads(manifest_json(_routes()))
        assert [r["path"] for r in data["routes"]] == ["/", "/page/2", "/hello/"]
        assert data["routes"][2]["context"] == {"slug": "hello", "prev": None}

    def test_stable_output(self) -> None:
        assert manifest_json(_routes()) == manifest_json(_routes())

    def test_writes_file(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "routes.json"
        result = write_manifest(_routes(), out)

        assert out.exists()
        assert result.source_type == "manifest"
        assert result.entries == 3
        assert result.size_bytes == out.stat().st_size


# ---------------------------------------------------------------------------
# Sitemap
# ---------------------------------------------------------------------------


class TestGenerateSitemap:
    """generate_sitemap — XML string generation."""

    def test_valid_xml(self) -> None:
        xml = generate_sitemap(_routes(), "https://example.com")
        root = fromstring(xml.split("\n", 1)[1])  # skip XML declaration
        assert root.tag == f"{{{_NS}}}urlset"

    def test_every_route_listed(self) -> None:
        xml = generate_sitemap(_routes(), "https://example.com/")
        root = fromstring(xml.split("\n", 1)[1])
        locs = [url.find(f"{{{_NS}}}loc").text for url in root.findall(f"{{{_NS}}}url")]

        assert locs == [
            "https://example.com/",
            "https://example.com/page/2/",
            "https://example.com/hello/",
        ]

    def test_lastmod_present(self) -> None:
        xml = generate_sitemap(_routes()[:1], "https://example.com")
        root = fromstring(xml.split("\n", 1)[1])
        lastmod = root.find(f"{{{_NS}}}url/{{{_NS}}}lastmod")
        assert lastmod is not None
        assert len(lastmod.text or "") == 10

    def test_fixed_lastmod(self) -> None:
        xml = generate_sitemap(_routes()[:1], "https://example.com", lastmod=date(2024, 5, 1))
        root = fromstring(xml.split("\n", 1)[1])
        assert root.find(f"{{{_NS}}}url/{{{_NS}}}lastmod").text == "2024-05-01"

    def test_excluded_components_left_out(self) -> None:
        routes = [*_routes(), Route(path="/hello/amp/", component="amp.html", context={})]
        xml = generate_sitemap(routes, "https://example.com", exclude={"amp.html"})
        assert "/hello/amp/" not in xml
        assert "/hello/" in xml

    def test_empty_plan(self) -> None:
        xml = generate_sitemap([], "https://example.com")
        root = fromstring(xml.split("\n", 1)[1])
        assert root.findall(f"{{{_NS}}}url") == []


class TestRouteUrl:
    """route_url — absolute URLs with a trailing slash."""

    def test_root(self) -> None:
        assert route_url("https://example.com/", "/") == "https://example.com/"

    def test_pager_path_gains_slash(self) -> None:
        assert route_url("https://example.com", "/blog/page/2") == "https://example.com/blog/page/2/"


class TestWriteSitemap:
    """write_sitemap — file writing and skip logic."""

    def test_writes_file(self, tmp_path: Path) -> None:
        result = write_sitemap(_routes(), "https://example.com", tmp_path)
        assert result is not None
        assert result.source_type == "sitemap"
        assert result.size_bytes == (tmp_path / "sitemap.xml").stat().st_size

    def test_entries_exclude_components(self, tmp_path: Path) -> None:
        result = write_sitemap(_routes(), "https://example.com", tmp_path, exclude={"post.html"})
        assert result is not None
        assert result.entries == 2

    def test_skipped_without_base_url(self, tmp_path: Path) -> None:
        assert write_sitemap(_routes(), "", tmp_path) is None
        assert not (tmp_path / "sitemap.xml").exists()
