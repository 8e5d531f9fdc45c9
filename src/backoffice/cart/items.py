"""Cart line management — commands and handler.

Both handlers bind the customer id into the structlog context, so every log
line emitted while a cart is being changed carries it.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from backoffice.cart.cart import Cart
from backoffice.customer.management import get_customer
from backoffice.domain import backoffice, logger
from backoffice.product.management import get_product
from backoffice.shared.errors import NotInCart, OutOfStock
from backoffice.utils.logging import add_context, clear_context


@backoffice.command(part_of="Cart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@backoffice.command(part_of="Cart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)


@backoffice.command_handler(part_of=Cart)
class ManageCartLinesHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        add_context(customer_id=str(command.customer_id))
        try:
            return self._add(command)
        finally:
            clear_context()

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        add_context(customer_id=str(command.customer_id))
        try:
            self._remove(command)
        finally:
            clear_context()

    def _add(self, command):
        get_customer(command.customer_id)
        product = get_product(command.product_id)

        if not product.has_stock_for(command.quantity):
            logger.info(
                "Rejected cart line, insufficient stock",
                product_id=str(command.product_id),
                requested=command.quantity,
                in_stock=product.quantity,
            )
            raise OutOfStock(product_id=str(command.product_id), requested=command.quantity)

        repo = current_domain.repository_for(Cart)
        try:
            cart = repo.get(command.customer_id)
        except ObjectNotFoundError:
            cart = Cart.open(customer_id=command.customer_id)

        line = cart.add_line(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

        logger.info(
            "Added product to cart",
            product_id=str(command.product_id),
            line_quantity=line.quantity,
        )
        return str(line.id)

    def _remove(self, command):
        repo = current_domain.repository_for(Cart)
        try:
            cart = repo.get(command.customer_id)
        except ObjectNotFoundError:
            raise NotInCart(customer_id=str(command.customer_id), product_id=str(command.product_id)) from None

        cart.remove_line(command.product_id)
        repo.add(cart)

        logger.info("Removed product from cart", product_id=str(command.product_id))
