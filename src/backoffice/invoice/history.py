"""Read access to issued invoices."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from backoffice.invoice.invoice import Invoice
from backoffice.shared.errors import InvoiceNotFound


def get_invoice(invoice_id) -> Invoice:
    """Load an invoice or raise `InvoiceNotFound`."""
    try:
        return current_domain.repository_for(Invoice).get(invoice_id)
    except ObjectNotFoundError:
        raise InvoiceNotFound(invoice_id=str(invoice_id)) from None


def all_invoices(customer_id=None) -> list[Invoice]:
    """Invoices newest first, optionally restricted to one customer."""
    query = current_domain.repository_for(Invoice)._dao.query
    if customer_id is not None:
        query = query.filter(customer_id=str(customer_id))
    return query.order_by("-created_at").all().items
