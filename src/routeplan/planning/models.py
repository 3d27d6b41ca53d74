"""Route plan records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from routeplan._types import Component, RouteContext, RoutePath


@dataclass(frozen=True, slots=True)
class Route:
    """A single page the renderer must produce.

    Attributes:
        path: URL path, unique across the whole plan.
        component: Opaque render-target identifier.
        context: Values handed to the component at render time.

    """

    path: RoutePath
    component: Component
    context: RouteContext = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form for JSON manifests and page-creation callbacks."""
        return {"path": self.path, "component": self.component, "context": self.context}


@dataclass(frozen=True, slots=True)
class PaginationContext:
    """Position of one index page within a paginated listing.

    Attributes:
        page_number: 0-indexed page number.
        total_items: Number of items across all pages.
        items_per_page: Page size.
        cursor: 0-indexed offset of the page's first item.
        path: URL path of this page.
        number_of_pages: Total page count (at least 1).

    """

    page_number: int
    total_items: int
    items_per_page: int
    cursor: int
    path: RoutePath
    number_of_pages: int

    @property
    def human_page_number(self) -> int:
        """1-indexed page number for display."""
        return self.page_number + 1

    @property
    def is_first(self) -> bool:
        return self.page_number == 0

    @property
    def is_last(self) -> bool:
        return self.page_number == self.number_of_pages - 1
