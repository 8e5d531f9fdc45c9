"""Domain events for the Invoice aggregate."""

from protean.fields import DateTime, Float, Identifier

from backoffice.domain import backoffice


@backoffice.event(part_of="Invoice")
class InvoiceGenerated:
    """A customer's cart was priced and recorded as an invoice."""

    __version__ = 1

    invoice_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    subtotal = Float(required=True)
    discount = Float(required=True)
    tax_amount = Float(required=True)
    total_amount = Float(required=True)
    generated_at = DateTime(required=True)
