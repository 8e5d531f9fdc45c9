"""Customer management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from backoffice.customer.customer import Customer
from backoffice.domain import backoffice, logger
from backoffice.shared.errors import CustomerNotFound


@backoffice.command(part_of="Customer")
class CreateCustomer:
    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    address: String(required=True, max_length=500)
    contact_number: String(required=True, max_length=15)


@backoffice.command(part_of="Customer")
class UpdateCustomer:
    customer_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    address: String(required=True, max_length=500)
    contact_number: String(required=True, max_length=15)


@backoffice.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


def get_customer(customer_id) -> Customer:
    """Load a customer or raise `CustomerNotFound`."""
    try:
        return current_domain.repository_for(Customer).get(customer_id)
    except ObjectNotFoundError:
        raise CustomerNotFound(customer_id=str(customer_id)) from None


def ensure_email_available(email, customer_id=None):
    """Reject an email that already belongs to another customer."""
    existing = current_domain.repository_for(Customer)._dao.query.filter(email_address=email).all().items
    if any(str(customer.id) != str(customer_id) for customer in existing):
        raise ValidationError({"email": ["Email address is already registered"]})


@backoffice.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(CreateCustomer)
    def create_customer(self, command):
        ensure_email_available(command.email)
        customer = Customer.register(
            name=command.name,
            email=command.email,
            address=command.address,
            contact_number=command.contact_number,
        )
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(UpdateCustomer)
    def update_customer(self, command):
        customer = get_customer(command.customer_id)
        ensure_email_available(command.email, customer_id=customer.id)
        customer.update_details(
            name=command.name,
            email=command.email,
            address=command.address,
            contact_number=command.contact_number,
        )
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        from backoffice.cart.cart import Cart

        customer = get_customer(command.customer_id)

        cart_repo = current_domain.repository_for(Cart)
        try:
            cart = cart_repo.get(command.customer_id)
        except ObjectNotFoundError:
            cart = None

        if cart is not None:
            cart.clear()
            cart_repo.add(cart)
            cart_repo._dao.delete(cart)

        current_domain.repository_for(Customer)._dao.delete(customer)

        logger.info("Deleted customer", customer_id=str(command.customer_id), had_cart=cart is not None)
