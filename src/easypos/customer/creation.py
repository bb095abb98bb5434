"""Customer creation: command and handlers."""

import asyncio

from protean import handle
from protean.fields import Text

from easypos.customer.customer import Customer, CustomerId
from easypos.customer.repository import CustomerRepository
from easypos.domain import easypos
from easypos.persistence import get_unit_of_work
from easypos.shared.address import Address
from easypos.shared.phone import PhoneNumber
from easypos.shared.result import Error, Result, Success
from easypos.shared.unit_of_work import UnitOfWork
from easypos.utils.logging import get_logger

logger = get_logger(__name__)


@easypos.command(part_of="Customer")
class CreateCustomer:
    """Register a new customer from raw request data.

    Fields are unconstrained here: the handler validates them through the
    value object factories and reports problems as results.
    """

    name: Text(sanitize=False)
    last_name: Text(sanitize=False)
    email: Text(sanitize=False)
    phone_number: Text(sanitize=False)
    country: Text(sanitize=False)
    line1: Text(sanitize=False)
    line2: Text(sanitize=False)
    city: Text(sanitize=False)
    state: Text(sanitize=False)
    zip_code: Text(sanitize=False)


class CreateCustomerHandler:
    """Runs CreateCustomer as one all-or-nothing operation.

    Phone number and address are validated before anything is staged, so a
    rejected command never reaches the repository or the unit of work. Any
    exception raised while building, staging or committing the customer is
    returned as a ``CreateCustomer.Failure`` error instead of propagating.
    """

    def __init__(self, customers: CustomerRepository, unit_of_work: UnitOfWork) -> None:
        self._customers = customers
        self._unit_of_work = unit_of_work

    async def handle(self, command: CreateCustomer) -> Result:
        try:
            phone_number = PhoneNumber.create(command.phone_number)
            if phone_number is None:
                logger.warning("Rejected customer with invalid phone number", field="phone_number")
                return Error.validation("Customer.PhoneNumber", "The phone number is not valid.")

            address = Address.create(
                command.country,
                command.line1,
                command.line2,
                command.city,
                command.state,
                command.zip_code,
            )
            if address is None:
                logger.warning("Rejected customer with invalid address", field="address")
                return Error.validation("Customer.Address", "The address is not valid.")

            customer = Customer.create(
                CustomerId.generate(),
                name=command.name,
                last_name=command.last_name,
                email=command.email,
                phone_number=phone_number,
                address=address,
                active=True,
            )

            await self._customers.add(customer)
            await self._unit_of_work.commit()
        except Exception as exc:
            logger.exception("Customer creation failed", error=str(exc))
            return Error.failure(
                "CreateCustomer.Failure",
                f"Unexpected error while creating customer: {exc}",
            )

        logger.info("Customer created", customer_id=customer.id)
        return Success()


@easypos.command_handler(part_of=Customer)
class CustomerCommandHandler:
    """Entry point for ``current_domain.process(CreateCustomer(...))``.

    Each command gets a fresh unit of work from the persistence factory. Must
    be processed from a thread without a running event loop.
    """

    @handle(CreateCustomer)
    def create_customer(self, command: CreateCustomer) -> Result:
        unit_of_work = get_unit_of_work()
        handler = CreateCustomerHandler(unit_of_work.customers, unit_of_work)
        return asyncio.run(handler.handle(command))
