"""Planning events.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Events are purely observational; nothing in the planner reads them back.

"""

import time
from dataclasses import dataclass
from typing import Literal

type PlanStage = Literal[
    "init",
    "ordinary_pages",
    "collections",
    "default_collection",
    "tag_pages",
    "author_pages",
    "done",
]


@dataclass(frozen=True, slots=True)
class PlanCheckpoint:
    """The planner finished a named step.

    Attributes:
        stage: Planner state the step belongs to.
        label: Human-readable description (e.g. ``"collection /features/"``).
        routes_emitted: Routes emitted so far in this run.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: PlanStage
    label: str
    routes_emitted: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RouteEmitted:
    """A route was handed to the sink.

    Attributes:
        path: URL path of the route.
        component: Render target attached to it.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    component: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class PlanFinished:
    """A planning run completed.

    Attributes:
        routes_emitted: Total routes in the plan.
        duration_ms: Wall-clock planning time in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    routes_emitted: int
    duration_ms: float
    timestamp_ns: int


type PlanEvent = PlanCheckpoint | RouteEmitted | PlanFinished


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
