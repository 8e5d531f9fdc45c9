"""Product aggregate root."""

from datetime import UTC, datetime

from protean import atomic_change
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from backoffice.domain import backoffice


@backoffice.aggregate
class Product:
    """A sellable item with a unit price and the quantity held in stock.

    Price and stock are live values: invoices copy the price at generation time
    and never point back at the product.
    """

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    quantity: Integer(default=0, min_value=0)
    category_id: Identifier(required=True)
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name, price, category_id, quantity=0, description=None):
        from backoffice.product.events import ProductCreated

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            quantity=quantity,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                quantity=quantity,
                category_id=category_id,
                created_at=now,
            )
        )
        return product

    def update_details(self, name, price, quantity, category_id, description=None):
        from backoffice.product.events import ProductUpdated

        with atomic_change(self):
            self.name = name
            self.description = description
            self.price = price
            self.quantity = quantity
            self.category_id = category_id
            self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                quantity=self.quantity,
                category_id=self.category_id,
            )
        )

    def has_stock_for(self, quantity) -> bool:
        return (self.quantity or 0) >= quantity
