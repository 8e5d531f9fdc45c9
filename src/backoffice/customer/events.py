"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from backoffice.domain import backoffice


@backoffice.event(part_of="Customer")
class CustomerRegistered:
    """A new customer record was created."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@backoffice.event(part_of="Customer")
class CustomerDetailsUpdated:
    """A customer's name, email, address or contact number changed."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    address: String()

