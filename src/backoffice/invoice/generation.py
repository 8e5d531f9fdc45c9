"""Invoice generation — command and handler.

The handler runs inside the Unit of Work that wraps every command handler:
the invoice insert and the cart clear are committed together or not at all.
Before either write, the cart's committed version is compared with the one
that was priced; a cart changed in between aborts the generation with
``CartChanged`` instead of clearing lines nobody was charged for.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from backoffice.cart.cart import Cart
from backoffice.customer.management import get_customer
from backoffice.domain import backoffice, logger
from backoffice.invoice.invoice import Invoice
from backoffice.invoice.pricing import MAX_AMOUNT, MAX_TAX_RATE, ReceiptLine, compute_totals, to_decimal
from backoffice.product.management import get_product
from backoffice.shared.errors import CartChanged, EmptyCart
from backoffice.utils.logging import add_context, clear_context


@backoffice.command(part_of="Invoice")
class GenerateInvoice:
    """Charge everything in a customer's cart."""

    customer_id = Identifier(required=True)
    tax_rate = Float(required=True, min_value=0.0, max_value=float(MAX_TAX_RATE))
    discount = Float(default=0.0, min_value=0.0, max_value=float(MAX_AMOUNT))


def _receipt_lines(cart) -> list[ReceiptLine]:
    lines = []
    for line in cart.lines:
        product = get_product(line.product_id)
        lines.append(
            ReceiptLine(
                product_id=str(line.product_id),
                product_name=product.name,
                quantity=line.quantity,
                price=to_decimal(product.price),
            )
        )
    return lines


def _ensure_cart_unchanged(cart_repo, cart) -> None:
    """Compare ``cart`` with the version committed by other requests.

    The read goes around the current Unit of Work so it sees writes committed
    after this handler loaded the cart.
    """
    try:
        committed = cart_repo._dao.outside_uow().get(cart.customer_id)
    except ObjectNotFoundError:
        committed = None

    if committed is None or committed._version != cart._version:
        logger.warning(
            "Rejected invoice generation, cart changed concurrently",
            loaded_version=cart._version,
            committed_version=committed._version if committed else None,
        )
        raise CartChanged(customer_id=str(cart.customer_id))


@backoffice.command_handler(part_of=Invoice)
class GenerateInvoiceHandler:
    @handle(GenerateInvoice)
    def generate_invoice(self, command):
        add_context(customer_id=str(command.customer_id))
        try:
            return self._generate(command)
        finally:
            clear_context()

    def _generate(self, command):
        customer = get_customer(command.customer_id)

        cart_repo = current_domain.repository_for(Cart)
        try:
            cart = cart_repo.get(command.customer_id)
        except ObjectNotFoundError:
            cart = None

        if cart is None or not cart.lines:
            logger.info("Rejected invoice generation, cart is empty")
            raise EmptyCart(customer_id=str(command.customer_id))

        lines = _receipt_lines(cart)
        totals = compute_totals(lines, tax_rate=command.tax_rate, discount=command.discount or 0)

        _ensure_cart_unchanged(cart_repo, cart)

        invoice = Invoice.generate(customer=customer, totals=totals)
        current_domain.repository_for(Invoice).add(invoice)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Generated invoice",
            invoice_id=str(invoice.id),
            lines=len(lines),
            total_amount=invoice.total_amount,
        )
        return {
            "invoice_id": str(invoice.id),
            "lines": [line.to_dict() for line in lines],
        }
