"""Customer aggregate root."""

from datetime import UTC, datetime

from protean import atomic_change
from protean.fields import DateTime, String, ValueObject

from backoffice.domain import backoffice
from backoffice.shared.contact import ContactNumber, EmailAddress


@backoffice.aggregate
class Customer:
    """A person the back office sells to.

    Carts and invoices refer to a customer by id. Invoices additionally copy the
    name, email and address at generation time, so later edits here never
    change an issued invoice.
    """

    name: String(required=True, max_length=255)
    email: ValueObject(EmailAddress, required=True)
    address: String(required=True, max_length=500)
    contact_number: ValueObject(ContactNumber, required=True)
    registered_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def register(cls, name, email, address, contact_number):
        from backoffice.customer.events import CustomerRegistered

        email_vo = EmailAddress(address=email)
        contact_vo = ContactNumber(digits=contact_number)

        now = datetime.now(UTC)
        customer = cls(
            name=name,
            email=email_vo,
            address=address,
            contact_number=contact_vo,
            registered_at=now,
            updated_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=name,
                email=email,
                registered_at=now,
            )
        )
        return customer

    def update_details(self, name, email, address, contact_number):
        from backoffice.customer.events import CustomerDetailsUpdated

        email_vo = EmailAddress(address=email)
        contact_vo = ContactNumber(digits=contact_number)

        with atomic_change(self):
            self.name = name
            self.email = email_vo
            self.address = address
            self.contact_number = contact_vo
            self.updated_at = datetime.now(UTC)

        self.raise_(
            CustomerDetailsUpdated(
                customer_id=self.id,
                name=self.name,
                email=email,
                address=self.address,
            )
        )
