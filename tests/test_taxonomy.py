"""Tests for routeplan.planning.taxonomy — tag and author indexes."""

from __future__ import annotations

import pytest

from routeplan._errors import IntegrityError
from routeplan.content.nodes import AssignedPost
from routeplan.planning.infinite_scroll import ScrollIndexes, build_indexes
from routeplan.planning.taxonomy import build_taxonomy_routes, has_posts

from .conftest import make_author, make_post, make_tag


def _posts() -> tuple[AssignedPost, ...]:
    return (
        AssignedPost(make_post("1", tags=("news",), primary_tag="news", authors=("ann",)), "/features/"),
        AssignedPost(make_post("2", tags=("news",), primary_tag="news", authors=("ann",))),
        AssignedPost(make_post("3", tags=("howto", "news"), primary_tag="howto", authors=("bob",))),
    )


class TestSkipRule:
    """Taxonomies without posts produce no routes."""

    @pytest.mark.parametrize(("count", "expected"), [(0, False), (None, False), (1, True)])
    def test_has_posts(self, count: int | None, expected: bool) -> None:
        assert has_posts(make_tag("x", count)) is expected

    def test_zero_count_produces_nothing(self) -> None:
        routes = list(build_taxonomy_routes(
            [make_tag("news", 0)], "tag", _posts(), ScrollIndexes(), "tag.html",
            posts_per_page=3,
        ))
        assert routes == []

    def test_null_count_produces_nothing(self) -> None:
        routes = list(build_taxonomy_routes(
            [make_tag("news", None)], "tag", _posts(), ScrollIndexes(), "tag.html",
            posts_per_page=3,
        ))
        assert routes == []

    def test_two_posts_page_size_three(self) -> None:
        routes = list(build_taxonomy_routes(
            [make_tag("news", 2)], "tag", _posts(), ScrollIndexes(), "tag.html",
            posts_per_page=3,
        ))
        assert len(routes) == 1
        assert routes[0].path == "/news/"


class TestTaxonomyRoutes:
    """build_taxonomy_routes — paths, pagination and context."""

    def test_paginates_over_post_count(self) -> None:
        routes = list(build_taxonomy_routes(
            [make_tag("news", 7)], "tag", _posts(), ScrollIndexes(), "tag.html",
            base_path="/blog/", posts_per_page=3,
        ))
        assert [r.path for r in routes] == [
            "/blog/news/",
            "/blog/news/page/2",
            "/blog/news/page/3",
        ]

    def test_url_override(self) -> None:
        tag = make_tag("news", 2, url="https://cms.example.com/tag/news/")
        routes = list(build_taxonomy_routes(
            [tag], "tag", _posts(), ScrollIndexes(), "tag.html", posts_per_page=3,
        ))
        assert routes[0].path == "/tag/news/"

    def test_context_with_infinite_scroll(self) -> None:
        posts = _posts()
        routes = list(build_taxonomy_routes(
            [make_tag("news", 2)], "tag", posts, build_indexes(True, posts), "tag.html",
            posts_per_page=3, iscroll_enabled=True,
        ))
        context = routes[0].context

        assert context["slug"] == "news"
        assert context["collectionPaths"] == {"1": "/features/", "2": "/"}
        assert context["iScrollEnabled"] is True
        assert context["postIds"] == ["1", "2"]
        assert context["cursor"] == 0

    def test_context_without_infinite_scroll(self) -> None:
        routes = list(build_taxonomy_routes(
            [make_tag("news", 2)], "tag", _posts(), ScrollIndexes(), "tag.html",
            posts_per_page=3,
        ))
        context = routes[0].context

        assert context["collectionPaths"] == {"1": "/features/", "2": "/"}
        assert context["iScrollEnabled"] is False
        assert context["postIds"] == []

    def test_authors(self) -> None:
        posts = _posts()
        routes = list(build_taxonomy_routes(
            [make_author("ann", 2), make_author("bob", 1), make_author("cy", 0)],
            "author", posts, build_indexes(True, posts), "author.html",
            posts_per_page=3, iscroll_enabled=True,
        ))
        assert [r.path for r in routes] == ["/ann/", "/bob/"]
        assert routes[1].context["postIds"] == ["3"]
        assert all(r.component == "author.html" for r in routes)

    def test_dangling_post_id_is_fatal(self) -> None:
        indexes = ScrollIndexes(tag_ids={"news": ("1", "missing")})
        with pytest.raises(IntegrityError):
            list(build_taxonomy_routes(
                [make_tag("news", 2)], "tag", _posts(), indexes, "tag.html",
                posts_per_page=3, iscroll_enabled=True,
            ))
