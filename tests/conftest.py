"""Shared test fixtures for routeplan."""

from __future__ import annotations

from typing import Any

import pytest

from routeplan.config import RoutePlanConfig
from routeplan.content.nodes import ContentGraph, ContentNode
from routeplan.planning.collections import Collection, TagSelector


def make_post(
    node_id: str,
    slug: str | None = None,
    *,
    tags: tuple[str, ...] = (),
    authors: tuple[str, ...] = (),
    primary_tag: str | None = None,
    url: str | None = None,
    title: str = "",
) -> ContentNode:
    """Create a post node; the slug defaults to the id."""
    return ContentNode(
        id=node_id,
        slug=slug if slug is not None else node_id,
        url=url,
        title=title,
        primary_tag=primary_tag,
        tags=tags,
        authors=authors,
    )


def make_page(slug: str, *, url: str | None = None) -> ContentNode:
    return ContentNode(id=f"page-{slug}", slug=slug, url=url)


def make_tag(slug: str, post_count: int | None, *, url: str | None = None) -> ContentNode:
    return ContentNode(id=f"tag-{slug}", slug=slug, url=url, post_count=post_count)


def make_author(slug: str, post_count: int | None) -> ContentNode:
    return ContentNode(id=f"author-{slug}", slug=slug, post_count=post_count)


def make_result(
    *,
    pages: list[dict[str, Any]] | None = None,
    posts: list[dict[str, Any]] | None = None,
    tags: list[dict[str, Any]] | None = None,
    authors: list[dict[str, Any]] | None = None,
    errors: list[Any] | None = None,
) -> dict[str, Any]:
    """Build a GraphQL-shaped fetch result from raw node records."""

    def edges(nodes: list[dict[str, Any]] | None) -> dict[str, Any]:
        return {"edges": [{"node": n} for n in nodes or []]}

    result: dict[str, Any] = {
        "data": {
            "allGhostPage": edges(pages),
            "allGhostPost": edges(posts),
            "allGhostTag": edges(tags),
            "allGhostAuthor": edges(authors),
        },
    }
    if errors is not None:
        result["errors"] = errors
    return result


@pytest.fixture
def blog_graph() -> ContentGraph:
    """Five posts, the 2nd and 4th tagged ``feature``, newest first.

    ``p2`` carries ``feature`` as a secondary tag under primary tag ``news``;
    ``p5`` has no tags at all.
    """
    posts = (
        make_post("p1", tags=("news",), primary_tag="news", authors=("ann",)),
        make_post("p2", tags=("news", "feature"), primary_tag="news", authors=("ann",)),
        make_post("p3", tags=("howto",), primary_tag="howto", authors=("bob",)),
        make_post("p4", tags=("feature",), primary_tag="feature", authors=("bob",)),
        make_post("p5", authors=("ann",)),
    )
    return ContentGraph(
        pages=(make_page("about"),),
        posts=posts,
        tags=(
            make_tag("news", 2),
            make_tag("feature", 2),
            make_tag("howto", 1),
            make_tag("page-only", 0),
        ),
        authors=(make_author("ann", 3), make_author("bob", 2)),
    )


@pytest.fixture
def blog_config() -> RoutePlanConfig:
    """``/blog/`` base path with a ``/features/`` collection, 3 per page."""
    return RoutePlanConfig(
        base_path="/blog/",
        collections=(Collection("/features/", TagSelector("feature")),),
        posts_per_page=3,
    )
