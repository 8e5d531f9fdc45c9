"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from backoffice.domain import backoffice


@backoffice.event(part_of="Cart")
class CartLineAdded:
    """A product was added to a cart, or its quantity was increased."""

    __version__ = 1

    customer_id = Identifier(required=True)
    line_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@backoffice.event(part_of="Cart")
class CartLineRemoved:
    """A product was taken out of a cart."""

    __version__ = 1

    customer_id = Identifier(required=True)
    line_id = Identifier(required=True)
    product_id = Identifier(required=True)


@backoffice.event(part_of="Cart")
class CartCleared:
    """Every line of a cart was removed, usually because it was invoiced."""

    __version__ = 1

    customer_id = Identifier(required=True)
    lines_removed = Integer(required=True)
