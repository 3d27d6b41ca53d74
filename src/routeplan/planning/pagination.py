"""Index pagination — split a listing into numbered index pages.

Path convention::

    page 0  ->  /blog/            (the listing root)
    page 1  ->  /blog/page/2
    page 2  ->  /blog/page/3

``page_number`` is 0-indexed; the number in the URL is the 1-indexed
display number.  An empty listing still gets its root page.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from routeplan._errors import ConfigError
from routeplan.planning.models import PaginationContext, Route

if TYPE_CHECKING:
    from routeplan._types import Component, RoutePath


def page_count(total_items: int, items_per_page: int) -> int:
    """Number of index pages for ``total_items``; never less than 1."""
    if items_per_page < 1:
        msg = f"items_per_page must be at least 1, got {items_per_page}"
        raise ConfigError(msg)
    return max(1, math.ceil(max(total_items, 0) / items_per_page))


def page_path(root: RoutePath, page_number: int) -> RoutePath:
    """URL path of page ``page_number`` (0-indexed) under ``root``."""
    if page_number == 0:
        return root
    prefix = root if root.endswith("/") else f"{root}/"
    return f"{prefix}page/{page_number + 1}"


def paginate_contexts(
    total_items: int,
    items_per_page: int,
    root: RoutePath,
) -> tuple[PaginationContext, ...]:
    """Compute every page of a listing rooted at ``root``."""
    pages = page_count(total_items, items_per_page)
    return tuple(
        PaginationContext(
            page_number=n,
            total_items=total_items,
            items_per_page=items_per_page,
            cursor=n * items_per_page,
            path=page_path(root, n),
            number_of_pages=pages,
        )
        for n in range(pages)
    )


def paginate(
    total_items: int,
    items_per_page: int,
    *,
    path: RoutePath,
    component: Component,
    context: Mapping[str, Any] | None = None,
) -> Iterator[Route]:
    """Yield one index route per page.

    Each route's context is the caller's pass-through ``context`` plus the
    page position.  ``cursor`` always reflects the page's own start offset.
    """
    extra = dict(context or {})
    for page in paginate_contexts(total_items, items_per_page, path):
        yield Route(
            path=page.path,
            component=component,
            context={
                **extra,
                "pageNumber": page.page_number,
                "humanPageNumber": page.human_page_number,
                "skip": page.cursor,
                "limit": items_per_page,
                "numberOfPages": page.number_of_pages,
                "previousPagePath": (
                    None if page.is_first else page_path(path, page.page_number - 1)
                ),
                "nextPagePath": (
                    None if page.is_last else page_path(path, page.page_number + 1)
                ),
                "cursor": page.cursor,
            },
        )
