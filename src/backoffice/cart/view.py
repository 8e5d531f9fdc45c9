"""Read side for carts: lines joined with the product they point at."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from backoffice.cart.cart import Cart
from backoffice.product.product import Product


def _carts(customer_id=None):
    repo = current_domain.repository_for(Cart)
    if customer_id is None:
        return repo._dao.query.all().items
    try:
        return [repo.get(customer_id)]
    except ObjectNotFoundError:
        return []


def cart_lines(customer_id=None) -> list[dict]:
    """Cart lines with product name and price, for one customer or for everyone.

    A line whose product has disappeared is reported with ``name`` and
    ``price`` set to None, in the manner of a left join.
    """
    product_repo = current_domain.repository_for(Product)

    rows = []
    for cart in _carts(customer_id):
        for line in cart.lines:
            try:
                product = product_repo.get(line.product_id)
            except ObjectNotFoundError:
                product = None

            rows.append(
                {
                    "cart_line_id": str(line.id),
                    "customer_id": str(cart.customer_id),
                    "product_id": str(line.product_id),
                    "name": product.name if product else None,
                    "price": product.price if product else None,
                    "quantity": line.quantity,
                }
            )
    return rows
