"""Pending domain events on aggregates.

Aggregates record events with ``raise_``; the events sit in the aggregate's
private ``_events`` list, in the order they were raised, until the
transaction layer hands them off. Business code reads them through
``pending_events``. Only unit-of-work implementations call ``drain_events``,
and only after a successful commit.
"""


def pending_events(aggregate) -> tuple:
    """Snapshot of the events ``aggregate`` has raised and not yet handed off."""
    return tuple(aggregate._events)


def drain_events(aggregate) -> list:
    """Remove and return the pending events of ``aggregate``."""
    events = list(aggregate._events)
    aggregate._events.clear()
    return events
