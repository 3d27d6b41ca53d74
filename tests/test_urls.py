"""Tests for routeplan.planning.urls — canonical path resolution."""

from __future__ import annotations

import pytest

from routeplan.planning.urls import resolve_url


class TestResolveUrl:
    """resolve_url — override precedence and separator normalization."""

    def test_root_defaults(self) -> None:
        assert resolve_url() == "/"

    def test_base_path_only(self) -> None:
        assert resolve_url("/blog/") == "/blog/"

    @pytest.mark.parametrize("base", ["blog", "/blog", "blog/", "//blog//"])
    def test_base_path_normalized(self, base: str) -> None:
        assert resolve_url(base) == "/blog/"

    def test_slug_under_root(self) -> None:
        assert resolve_url("/", "/", "hello-world") == "/hello-world/"

    def test_base_collection_and_slug(self) -> None:
        assert resolve_url("/blog/", "/features/", "launch") == "/blog/features/launch/"

    def test_duplicate_separators_collapsed(self) -> None:
        assert resolve_url("/blog//", "//features/", "/launch/") == "/blog/features/launch/"

    def test_missing_separators_added(self) -> None:
        assert resolve_url("blog", "features", "launch") == "/blog/features/launch/"

    def test_override_wins_over_slug_and_collection(self) -> None:
        path = resolve_url("/", "/features/", "launch", "https://cms.example.com/about-us/")
        assert path == "/about-us/"

    def test_override_composed_under_base_path(self) -> None:
        path = resolve_url("/blog/", "/features/", "launch", "https://cms.example.com/about-us/")
        assert path == "/blog/about-us/"

    def test_override_already_under_base_not_prefixed_twice(self) -> None:
        assert resolve_url("/blog/", "/", "x", "/blog/about-us/") == "/blog/about-us/"

    def test_relative_override(self) -> None:
        assert resolve_url("/", "/", "x", "/custom/path") == "/custom/path/"

    def test_empty_override_ignored(self) -> None:
        assert resolve_url("/", "/", "launch", "") == "/launch/"

    def test_override_to_site_root(self) -> None:
        assert resolve_url("/blog/", "/", "home", "https://cms.example.com/") == "/blog/"

    @pytest.mark.parametrize(
        "args",
        [
            ("/blog/",),
            ("blog", "features", "launch"),
            ("/blog/", "/", "x", "https://cms.example.com/about/"),
        ],
    )
    def test_idempotent(self, args: tuple[str, ...]) -> None:
        once = resolve_url(*args)
        assert resolve_url(once) == once
        assert resolve_url(args[0], "/", None, once) == once
