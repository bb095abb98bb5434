"""Unit of work port (abstract interface).

A unit of work owns the commit boundary for one command: repositories bound
to it only stage changes, and nothing becomes durable until ``commit``.
Each command invocation gets its own instance.
"""

from abc import ABC, abstractmethod

from easypos.customer.repository import CustomerRepository


class UnitOfWork(ABC):
    """Abstract transaction boundary."""

    customers: CustomerRepository

    @abstractmethod
    async def commit(self) -> int:
        """Persist every staged change atomically and return the number of aggregates written."""
        ...

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes without touching the store."""
        ...
