"""Cart aggregate (CQRS) — the lines a customer has picked but not yet invoiced.

There is exactly one cart per customer: the cart's identifier *is* the
customer id. A product appears at most once per cart; adding it again raises
the quantity of the existing line.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from backoffice.cart.events import CartCleared, CartLineAdded, CartLineRemoved
from backoffice.domain import backoffice
from backoffice.shared.errors import NotInCart


@backoffice.entity(part_of="Cart")
class CartLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@backoffice.aggregate
class Cart:
    customer_id = Identifier(identifier=True, required=True)
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(line.product_id) for line in self.lines]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"lines": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, customer_id):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)

    def add_line(self, product_id, quantity):
        """Add a product to the cart, or increase its quantity if already present."""
        existing = self.line_for(product_id)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            line = existing
        else:
            line = CartLine(
                product_id=product_id,
                quantity=quantity,
                added_at=now,
            )
            self.add_lines(line)

        self.updated_at = now

        self.raise_(
            CartLineAdded(
                customer_id=str(self.customer_id),
                line_id=str(line.id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=line.quantity,
            )
        )
        return line

    def remove_line(self, product_id):
        """Remove the line holding ``product_id``."""
        line = self.line_for(product_id)
        if line is None:
            raise NotInCart(customer_id=str(self.customer_id), product_id=str(product_id))

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineRemoved(
                customer_id=str(self.customer_id),
                line_id=str(line.id),
                product_id=str(product_id),
            )
        )

    def clear(self):
        """Remove every line from the cart."""
        removed = list(self.lines)
        for line in removed:
            self.remove_lines(line)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                customer_id=str(self.customer_id),
                lines_removed=len(removed),
            )
        )
