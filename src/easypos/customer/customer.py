"""Customer aggregate root with its CustomerId identity value object."""

from datetime import datetime
from uuid import uuid4

from protean.fields import Boolean, Identifier, String, ValueObject

from easypos.domain import easypos
from easypos.shared.address import Address
from easypos.shared import aggregate as aggregate_events
from easypos.shared.phone import PhoneNumber


@easypos.value_object
class CustomerId:
    """Opaque customer identity wrapping a random 128-bit UUID."""

    value: Identifier(required=True)

    @classmethod
    def generate(cls) -> "CustomerId":
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return str(self.value)


@easypos.aggregate
class Customer:
    """A person registered at the point of sale.

    A Customer always holds a valid phone number and address: both arrive as
    value objects already built through their ``create`` factories, so raw
    input never reaches this class. New customers start active.
    """

    name: String(required=True, max_length=50, sanitize=False)
    last_name: String(required=True, max_length=50, sanitize=False)
    email: String(required=True, max_length=100, sanitize=False)
    phone_number: ValueObject(PhoneNumber, required=True)
    address: ValueObject(Address, required=True)
    active: Boolean(default=True)

    @property
    def customer_id(self) -> CustomerId:
        return CustomerId(value=self.id)

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.last_name}"

    @property
    def pending_events(self) -> tuple:
        return aggregate_events.pending_events(self)

    @classmethod
    def create(
        cls,
        customer_id,
        name,
        last_name,
        email,
        phone_number,
        address,
        active=True,
    ):
        from easypos.customer.events import CustomerCreated

        customer = cls(
            id=customer_id.value,
            name=name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            address=address,
            active=active,
        )
        customer.raise_(
            CustomerCreated(
                customer_id=customer.id,
                full_name=customer.full_name,
                email=email,
                phone_number=phone_number.value,
                address=address.full_address,
                active=active,
                created_at=datetime.now(),
            )
        )
        return customer
