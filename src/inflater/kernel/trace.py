"""Runtime trace infrastructure - separate from produced values.

This module provides trace/evidence capture for profiling and debugging
expansion pipelines. Tracing never changes what a producer yields.
Tree relationships are reconstructed only during visualization via as_tree().
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TypeVar

from inflater.kernel.producer import FuncProducer, Producer

V = TypeVar("V")


@dataclass(frozen=True)
class Evidence:
    """Evidence represents a production event captured at runtime."""

    action: str = ""
    id: int = field(default=0)
    parent_id: int | None = field(default=None)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = field(default=None)


class Trace:
    """Runtime trace context for capturing production events.

    Not thread-safe; use one Trace per consuming thread.

    Performance guarantees:
    - Trace disabled → single flag check overhead
    - Evidence append is O(1)
    - No recursive tree construction during production
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "produce_begin", "yield")
            info: Additional context
            parent_id: Parent event ID for tree relationships
            duration_ms: Production duration

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                timestamp=datetime.now(UTC),
                info=info or {},
                duration_ms=duration_ms,
            )
        )

        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events (for visualization)."""
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Find recorded events matching the given criteria.

        Args:
            **kwargs: Criteria matched against event attributes or info keys
                (e.g., action="yield", name="prefix")

        Returns:
            Matching events in recording order
        """
        return [
            e
            for e in self._events
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships for visualization.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0


def traced(source: Producer[V], trace: Trace, name: str = "") -> Producer[V]:
    """Record every production of ``source`` into ``trace``.

    Each ``produce`` call records:
        - "produce_begin" with the producer name and seed
        - one "yield" child per value handed to the consumer
        - then exactly one of:
            - "produce_end" when ``source`` is exhausted
            - "produce_stop" when the consumer stops pulling first
            - "produce_error" when an exception escapes ``source``
              (the exception is re-raised)

    Args:
        source: Producer to observe
        trace: Trace receiving the events
        name: Label stored in every event's info

    Returns:
        Producer yielding exactly what ``source`` yields
    """
    def _produce(seed: V) -> Iterator[V]:
        begin_id = trace.record("produce_begin", info={"name": name, "seed": seed})
        start_time = time.perf_counter()
        count = 0

        def finish(action: str, **info: Any) -> None:
            trace.record(
                action,
                info={"name": name, "count": count, **info},
                parent_id=begin_id,
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )

        try:
            for value in source.produce(seed):
                trace.record("yield", info={"name": name, "value": value}, parent_id=begin_id)
                count += 1
                yield value
        except GeneratorExit:
            finish("produce_stop")
            raise
        except Exception as exc:
            finish("produce_error", error=type(exc).__name__, message=str(exc))
            raise
        finish("produce_end")

    return FuncProducer(_produce)
