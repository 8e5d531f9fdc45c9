"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from backoffice.domain import backoffice


@backoffice.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category_id: Identifier(required=True)
    created_at: DateTime(required=True)


@backoffice.event(part_of="Product")
class ProductUpdated:
    """A product's details, price or stock level were changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category_id: Identifier(required=True)
