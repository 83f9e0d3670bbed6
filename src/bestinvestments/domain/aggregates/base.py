"""Base class for all event-sourced aggregates."""

import abc
from collections.abc import Sequence
from typing import TypeVar

from bestinvestments.domain.errors import AggregateIdMismatchError
from bestinvestments.domain.events import DomainEvent

A = TypeVar("A", bound="Aggregate")


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    State is only ever changed by applying events. Commands on concrete
    aggregates validate their preconditions, then `_enqueue` the resulting event,
    which both applies it and keeps it pending until a repository stores it.
    """

    def __init__(self, aggregate_id: str) -> None:
        self.aggregate_id: str = aggregate_id
        self._version: int = 0
        self._pending_events: list[DomainEvent] = []

    # --- Construction Paths ---

    @classmethod
    def rehydrate(
        cls: type[A], aggregate_id: str, event_stream: Sequence[DomainEvent]
    ) -> A:
        """Rebuild an aggregate from its past events.

        Args:
            aggregate_id: The ID of the aggregate to rebuild.
            event_stream: Events to apply to the aggregate, in order.

        Returns:
            An instance of the aggregate in the state described by the stream.

        Raises:
            AggregateIdMismatchError: If an event in the stream belongs to another
                aggregate.
            ValueError: If the aggregate does not know how to handle an event.
        """
        aggregate = cls(aggregate_id)
        for event in event_stream:
            aggregate._apply_checked(event)
            aggregate._version += 1
        return aggregate

    # --- Event Application ---

    def _apply_checked(self, event: DomainEvent) -> None:
        """Internal gate. Do not override."""
        if event.aggregate_id != self.aggregate_id:
            raise AggregateIdMismatchError(self.aggregate_id, event.aggregate_id)
        self._apply(event)

    @abc.abstractmethod
    def _apply(self, event: DomainEvent) -> None:
        """Apply an event to the aggregate.

        Raises:
            ValueError: If the concrete aggregate does not handle the event type.
        """

    # --- Plumbing ---

    def _enqueue(self, event: DomainEvent) -> None:
        self._apply_checked(event)
        self._pending_events.append(event)

    def dequeue_uncommitted(self) -> list[DomainEvent]:
        """Return and clear the events raised since the last call.

        Note: This is NOT thread-safe.
        """
        uncommitted_events = self._pending_events
        self._pending_events = []
        return uncommitted_events

    def mark_committed(self, count: int) -> None:
        """Advance the version once a repository has kept `count` dequeued events."""
        self._version += count

    @property
    def version(self) -> int:
        """The version of the aggregate as last loaded or stored."""
        return self._version
