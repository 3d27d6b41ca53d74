"""Event log — ordered store of one planning run's events.

A planner runs on a single thread, so the log is a plain bounded deque;
share one log between concurrent runs at your own risk.
"""

from collections import deque

from routeplan.observability.events import PlanEvent


class EventLog:
    """Bounded event store, oldest events dropped first.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events",)

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[PlanEvent] = deque(maxlen=max_events)

    def append(self, event: PlanEvent) -> None:
        self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        path: str | None = None,
        limit: int = 100,
    ) -> list[PlanEvent]:
        """Events matching every given filter, in emission order.

        ``path`` is a prefix; events without a path never match it.
        """
        results: list[PlanEvent] = []
        for event in self._events:
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if path is not None and not getattr(event, "path", "").startswith(path):
                continue
            results.append(event)
        return results

    def recent(self, n: int = 20) -> list[PlanEvent]:
        return list(self._events)[-n:]

    def clear(self) -> int:
        """Drop all events; return how many there were."""
        count = len(self._events)
        self._events.clear()
        return count

    def __len__(self) -> int:
        return len(self._events)
