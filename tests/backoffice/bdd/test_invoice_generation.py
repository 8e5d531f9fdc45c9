"""BDD tests for invoice generation."""

from backoffice.invoice.generation import GenerateInvoice
from backoffice.invoice.history import get_invoice
from backoffice.shared.errors import EmptyCart
from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/invoice_generation.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse("an invoice is generated with tax rate {tax_rate:g} and discount {discount:g}"),
    target_fixture="invoice_id",
)
def generate_invoice(customer_id, error, tax_rate, discount):
    try:
        result = current_domain.process(
            GenerateInvoice(customer_id=customer_id, tax_rate=tax_rate, discount=discount),
            asynchronous=False,
        )
    except EmptyCart as exc:
        error["exc"] = exc
        return None
    return result["invoice_id"]


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the invoice subtotal is {amount:f}"))
def invoice_subtotal(invoice_id, amount):
    assert get_invoice(invoice_id).subtotal == amount


@then(parsers.cfparse("the invoice tax amount is {amount:f}"))
def invoice_tax_amount(invoice_id, amount):
    assert get_invoice(invoice_id).tax_amount == amount


@then(parsers.cfparse("the invoice total is {amount:f}"))
def invoice_total(invoice_id, amount):
    assert get_invoice(invoice_id).total_amount == amount


@then("the generation is rejected because the cart is empty")
def rejected_empty_cart(error):
    assert isinstance(error["exc"], EmptyCart)
