"""Routeplan error hierarchy.

All routeplan-specific errors inherit from RoutePlanError for easy catching.
"""


class RoutePlanError(Exception):
    """Base error for all routeplan operations."""


class ConfigError(RoutePlanError):
    """Invalid or missing configuration."""


class TemplateError(ConfigError):
    """A route kind has no component to render it."""


class ContentError(RoutePlanError):
    """Error in the content graph handed to the planner."""


class FetchError(ContentError):
    """The content fetch collaborator reported errors."""


class IntegrityError(ContentError):
    """The content graph references an id it does not contain."""


class DuplicateRouteError(RoutePlanError):
    """Two routes in one plan resolved to the same path."""
