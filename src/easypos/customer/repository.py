"""Customer repository port (abstract interface).

Adapters decide where customers live: the Protean-backed adapter for the
running application, the in-memory fake for tests and development. Adding a
customer only stages it; the owning unit of work makes it durable.
"""

from abc import ABC, abstractmethod

from easypos.customer.customer import Customer, CustomerId


class CustomerRepository(ABC):
    """Abstract persistence contract for the Customer aggregate."""

    @abstractmethod
    async def add(self, customer: Customer) -> None:
        """Stage a new customer for the next commit."""
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: CustomerId) -> Customer | None:
        """Load a committed customer, or None when no customer has that id."""
        ...
