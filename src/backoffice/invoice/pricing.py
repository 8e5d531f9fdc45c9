"""Invoice arithmetic.

Everything is computed in ``Decimal`` from full-precision inputs; values are
rounded to cents exactly once, when the totals are produced. Floats coming
from storage are converted through ``str`` so that 19.99 stays 19.99.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

CENTS = Decimal("0.01")
HUNDRED = Decimal(100)

# Column limits: money is decimal(10,2), a tax rate decimal(5,2), stock a
# 32-bit integer.
MAX_AMOUNT = Decimal("99999999.99")
MAX_TAX_RATE = Decimal("999.99")
MAX_QUANTITY = 2_147_483_647

# Enough digits that a full cart priced at the column limits never rounds
# before the final quantize.
_PRECISION = 60


def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ReceiptLine:
    """One priced cart line, as printed on a receipt. Never persisted."""

    product_id: str
    product_name: str
    quantity: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "price": float(to_cents(self.price)),
            "total_amount": float(to_cents(self.line_total)),
        }


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    discount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def compute_totals(lines, tax_rate, discount=0) -> InvoiceTotals:
    """Price a set of receipt lines.

    ``tax_rate`` is a percentage applied to the discounted subtotal. A discount
    larger than the subtotal yields negative amounts; nothing is clamped.
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION

        subtotal = sum((line.line_total for line in lines), Decimal(0))
        discount_amount = to_decimal(discount)
        rate = to_decimal(tax_rate)

        subtotal_after_discount = subtotal - discount_amount
        tax_amount = rate / HUNDRED * subtotal_after_discount
        total_amount = subtotal_after_discount + tax_amount

        return InvoiceTotals(
            subtotal=to_cents(subtotal),
            discount=to_cents(discount_amount),
            tax_rate=to_cents(rate),
            tax_amount=to_cents(tax_amount),
            total_amount=to_cents(total_amount),
        )
