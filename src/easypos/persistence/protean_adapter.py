"""Protean-backed persistence.

Additions are staged on the repository and written in one Protean
``UnitOfWork`` at commit time, so either every staged customer is saved or
none is. Protean stores the events raised by each saved aggregate in the
domain's event store as part of the same commit.
"""

from protean import UnitOfWork as DomainTransaction
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from easypos.customer.customer import Customer, CustomerId
from easypos.customer.repository import CustomerRepository
from easypos.shared.unit_of_work import UnitOfWork


class ProteanCustomerRepository(CustomerRepository):
    """Customer repository over the domain's configured database provider."""

    def __init__(self) -> None:
        self.pending: list[Customer] = []

    async def add(self, customer: Customer) -> None:
        self.pending.append(customer)

    async def get_by_id(self, customer_id: CustomerId) -> Customer | None:
        try:
            return current_domain.repository_for(Customer).get(customer_id.value)
        except ObjectNotFoundError:
            return None


class ProteanUnitOfWork(UnitOfWork):
    """Commits staged customers through a Protean transaction."""

    def __init__(self) -> None:
        self.customers = ProteanCustomerRepository()
        self.committed: list[Customer] = []

    async def commit(self) -> int:
        pending = self.customers.pending
        try:
            with DomainTransaction():
                repository = current_domain.repository_for(Customer)
                for customer in pending:
                    repository.add(customer)
        finally:
            self.rollback()

        self.committed.extend(pending)
        return len(pending)

    def rollback(self) -> None:
        self.customers.pending = []
