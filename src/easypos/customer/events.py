"""Domain events for the Customer aggregate."""

from uuid import uuid4

from protean.fields import Boolean, DateTime, Identifier, Text

from easypos.domain import easypos


@easypos.event(part_of="Customer")
class CustomerCreated:
    """A new customer was registered at the point of sale."""

    __version__ = "v1"

    event_id: Identifier(default=lambda: str(uuid4()))
    customer_id: Identifier(required=True)
    full_name: Text(required=True, sanitize=False)
    email: Text(required=True, sanitize=False)
    phone_number: Text(required=True, sanitize=False)
    address: Text(required=True, sanitize=False)
    active: Boolean(required=True)
    created_at: DateTime(required=True)
