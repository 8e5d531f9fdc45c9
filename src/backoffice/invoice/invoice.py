"""Invoice aggregate (CQRS) — an immutable record of a cart being charged.

An invoice copies everything it needs at generation time: the customer's
name, email and address and the computed amounts. It never refers back to
live Customer or Product fields and offers no way to change it afterwards.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, String

from backoffice.domain import backoffice
from backoffice.invoice.events import InvoiceGenerated


@backoffice.aggregate
class Invoice:
    customer_id = Identifier(required=True)
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    customer_address = String(max_length=500)
    subtotal = Float(default=0.0)
    discount = Float(default=0.0)
    tax_rate = Float(default=0.0)
    tax_amount = Float(default=0.0)
    total_amount = Float(default=0.0)
    created_at = DateTime()

    @classmethod
    def generate(cls, customer, totals):
        """Create an invoice for ``customer`` from already computed ``totals``."""
        now = datetime.now(UTC)

        invoice = cls(
            customer_id=str(customer.id),
            customer_name=customer.name,
            customer_email=customer.email.address,
            customer_address=customer.address,
            subtotal=float(totals.subtotal),
            discount=float(totals.discount),
            tax_rate=float(totals.tax_rate),
            tax_amount=float(totals.tax_amount),
            total_amount=float(totals.total_amount),
            created_at=now,
        )
        invoice.raise_(
            InvoiceGenerated(
                invoice_id=str(invoice.id),
                customer_id=str(customer.id),
                subtotal=invoice.subtotal,
                discount=invoice.discount,
                tax_amount=invoice.tax_amount,
                total_amount=invoice.total_amount,
                generated_at=now,
            )
        )
        return invoice
