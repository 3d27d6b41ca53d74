"""Routeplan configuration.

RoutePlanConfig is the central configuration object, frozen after creation
and shared read-only by every planning step of a run.
"""

from dataclasses import dataclass, field, fields

from routeplan._errors import ConfigError, TemplateError
from routeplan._types import Component, RouteKind
from routeplan.planning.collections import DEFAULT_COLLECTION_PATH, Collection
from routeplan.planning.urls import resolve_url


@dataclass(frozen=True, slots=True)
class Templates:
    """Render targets attached to each kind of route.

    Values are opaque to the planner; the renderer decides what they mean
    (template file, component module, ...).

    Attributes:
        page: Ordinary CMS pages.
        post: Post pages.
        index: Collection index pages.
        tag: Tag index pages.
        author: Author index pages.
        amp: AMP variants of post pages (only needed when AMP is on).

    """

    page: Component = "page.html"
    post: Component = "post.html"
    index: Component = "index.html"
    tag: Component = "tag.html"
    author: Component = "author.html"
    amp: Component = "amp.html"

    def require(self, kind: RouteKind) -> Component:
        """Return the component for ``kind``.

        Raises:
            TemplateError: If no component is configured for ``kind``.

        """
        component = getattr(self, kind, None)
        if not component:
            msg = f"No component configured for {kind!r} routes"
            raise TemplateError(msg)
        return component

    def validate(self, *, amp: bool = False) -> None:
        """Check every component a plan will need before planning starts."""
        for f in fields(self):
            if f.name == "amp" and not amp:
                continue
            self.require(f.name)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class RoutePlanConfig:
    """Configuration for one planning run.

    Attributes:
        base_path: Site-wide path prefix.  Normalized on construction, so
            ``"blog"`` and ``"/blog"`` both become ``"/blog/"``.
        collections: Collections in precedence order.
        infinite_scroll: Build id lists for the client-side loader.
        posts_per_page: Index page size.
        verbose: Print checkpoint lines while planning.
        amp: Also plan AMP variants of post pages.
        base_url: Absolute site URL, used for sitemap generation.
        templates: Render targets per route kind.

    """

    base_path: str = "/"
    collections: tuple[Collection, ...] = ()
    infinite_scroll: bool = False
    posts_per_page: int = 12
    verbose: bool = False
    amp: bool = False
    base_url: str = ""
    templates: Templates = field(default_factory=Templates)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_path", resolve_url(self.base_path or "/"))
        object.__setattr__(self, "collections", tuple(self.collections))

        if self.posts_per_page < 1:
            msg = f"posts_per_page must be at least 1, got {self.posts_per_page}"
            raise ConfigError(msg)

        seen: set[str] = set()
        for collection in self.collections:
            path = resolve_url("/", collection.path)
            if path == DEFAULT_COLLECTION_PATH:
                msg = "Collection path '/' is reserved for the default collection"
                raise ConfigError(msg)
            if path in seen:
                msg = f"Duplicate collection path {collection.path!r}"
                raise ConfigError(msg)
            seen.add(path)
