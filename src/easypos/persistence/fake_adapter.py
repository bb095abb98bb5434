"""In-memory persistence for development and testing.

Customers live in a plain dict keyed by id. The unit of work can be told to
fail its next commits, which makes persistence faults easy to reproduce.
Every call is recorded in ``calls`` so tests can assert on what the
command pipeline did (and did not) touch.
"""

from easypos.customer.customer import Customer, CustomerId
from easypos.customer.repository import CustomerRepository
from easypos.shared.aggregate import drain_events
from easypos.shared.unit_of_work import UnitOfWork


class InMemoryCustomerRepository(CustomerRepository):
    """Dict-backed customer repository that stages additions until commit."""

    def __init__(self, store: dict | None = None) -> None:
        self.store: dict[str, Customer] = store if store is not None else {}
        self.pending: list[Customer] = []
        self.calls: list[dict] = []

    async def add(self, customer: Customer) -> None:
        self.calls.append({"method": "add", "customer_id": customer.id})
        self.pending.append(customer)

    async def get_by_id(self, customer_id: CustomerId) -> Customer | None:
        self.calls.append({"method": "get_by_id", "customer_id": customer_id.value})
        return self.store.get(customer_id.value)


class InMemoryUnitOfWork(UnitOfWork):
    """Configurable in-memory unit of work.

    ``commit`` moves every staged customer into the store, or none of them
    when configured to fail. Events of committed customers are drained into
    ``collected_events``.
    """

    def __init__(self, store: dict | None = None) -> None:
        self.customers = InMemoryCustomerRepository(store)
        self.should_succeed: bool = True
        self.failure_message: str = "Database unavailable"
        self.collected_events: list = []
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_message: str = "Database unavailable") -> None:
        """Configure commit behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_message = failure_message

    async def commit(self) -> int:
        pending = self.customers.pending
        self.calls.append({"method": "commit", "pending": len(pending)})

        if not self.should_succeed:
            self.rollback()
            raise ConnectionError(self.failure_message)

        for customer in pending:
            self.customers.store[customer.id] = customer
            self.collected_events.extend(drain_events(customer))

        self.customers.pending = []
        return len(pending)

    def rollback(self) -> None:
        self.customers.pending = []
