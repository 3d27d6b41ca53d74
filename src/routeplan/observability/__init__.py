"""Planning observability — checkpoint events and diagnostics.

All events are frozen dataclasses with nanosecond timestamps, stored in a
bounded ``EventLog`` through a ``PlanCollector``.

Quick Start:
    >>> from routeplan.observability import EventLog, PlanCollector
    >>> collector = PlanCollector(EventLog(), verbose=True)
    >>> # Pass collector to RoutePlanner; checkpoints print to stderr

"""

from routeplan.observability.collector import PlanCollector
from routeplan.observability.events import (
    PlanCheckpoint,
    PlanEvent,
    PlanFinished,
    RouteEmitted,
    now_ns,
)
from routeplan.observability.log import EventLog

__all__ = [
    "EventLog",
    "PlanCheckpoint",
    "PlanCollector",
    "PlanEvent",
    "PlanFinished",
    "RouteEmitted",
    "now_ns",
]
