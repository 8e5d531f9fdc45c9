"""Product management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from backoffice.category.management import get_category
from backoffice.domain import backoffice
from backoffice.invoice.pricing import MAX_AMOUNT, MAX_QUANTITY
from backoffice.product.product import Product
from backoffice.shared.errors import ProductInCart, ProductNotFound


@backoffice.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0, max_value=float(MAX_AMOUNT))
    quantity: Integer(required=True, min_value=0, max_value=MAX_QUANTITY)
    category_id: Identifier(required=True)


@backoffice.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0, max_value=float(MAX_AMOUNT))
    quantity: Integer(required=True, min_value=0, max_value=MAX_QUANTITY)
    category_id: Identifier(required=True)


@backoffice.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def get_product(product_id) -> Product:
    """Load a product or raise `ProductNotFound`."""
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ProductNotFound(product_id=str(product_id)) from None


@backoffice.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        get_category(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity=command.quantity,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        product = get_product(command.product_id)
        get_category(command.category_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity=command.quantity,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        from backoffice.cart.cart import CartLine

        product = get_product(command.product_id)

        # Cart lines must always point at an existing product
        lines = current_domain.repository_for(CartLine)._dao.query.filter(product_id=str(command.product_id)).all().items
        if lines:
            raise ProductInCart(product_id=str(command.product_id), carts=len(lines))

        current_domain.repository_for(Product)._dao.delete(product)
