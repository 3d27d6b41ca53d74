"""Plan collector — records planning events and prints diagnostics.

Every event goes to the ``EventLog``.  In verbose mode checkpoints are
also printed to stderr as one-line progress notes.  Nothing recorded here
affects the plan itself.

"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from routeplan.observability.events import (
    PlanCheckpoint,
    PlanFinished,
    RouteEmitted,
    now_ns,
)
from routeplan.observability.log import EventLog

if TYPE_CHECKING:
    from routeplan.observability.events import PlanStage
    from routeplan.planning.models import Route


class PlanCollector:
    """Event sink for one or more planning runs.

    Args:
        log: The EventLog to store events in.
        verbose: Print checkpoint lines.
        stream: Where verbose lines go (defaults to stderr).

    """

    __slots__ = ("_log", "_stream", "_verbose")

    def __init__(
        self,
        log: EventLog | None = None,
        *,
        verbose: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self._log = log if log is not None else EventLog()
        self._verbose = verbose
        self._stream = stream

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    @property
    def verbose(self) -> bool:
        return self._verbose

    def info(self, message: str) -> None:
        """Print a diagnostic line when verbose."""
        if self._verbose:
            print(f"  {message}", file=self._stream or sys.stderr)

    def record_checkpoint(
        self,
        stage: PlanStage,
        label: str,
        *,
        routes_emitted: int = 0,
    ) -> None:
        """Record that a named planning step finished."""
        self._log.append(
            PlanCheckpoint(
                stage=stage,
                label=label,
                routes_emitted=routes_emitted,
                timestamp_ns=now_ns(),
            )
        )
        self.info(f"{label}: finished")

    def record_route(self, route: Route) -> None:
        """Record a route handed to the sink."""
        self._log.append(
            RouteEmitted(
                path=route.path,
                component=route.component,
                timestamp_ns=now_ns(),
            )
        )

    def record_finished(self, routes_emitted: int, *, duration_ms: float = 0.0) -> None:
        """Record the end of a planning run."""
        self._log.append(
            PlanFinished(
                routes_emitted=routes_emitted,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
        self.info(f"planning finished: {routes_emitted} routes in {duration_ms:.0f}ms")
