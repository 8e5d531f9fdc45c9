"""Domain error taxonomy.

Field-level problems are reported with Protean's ``ValidationError``. The
classes here cover the other caller-facing kinds: a referenced record that
does not exist, a request that is well-formed but breaks a business rule, and
a write that lost a race against another request.
Each carries a stable ``kind`` the HTTP layer reports alongside the message.
"""


class BackofficeError(Exception):
    kind = "BackofficeError"
    default_message = "The request could not be completed."

    def __init__(self, message: str | None = None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)


class NotFound(BackofficeError):
    kind = "NotFound"
    default_message = "The requested record does not exist."


class BusinessRuleViolation(BackofficeError):
    kind = "BusinessRuleViolation"
    default_message = "The request violates a business rule."


class CategoryNotFound(NotFound):
    kind = "CategoryNotFound"
    default_message = "No category found with the given ID."


class ProductNotFound(NotFound):
    kind = "ProductNotFound"
    default_message = "Product not found."


class CustomerNotFound(NotFound):
    kind = "CustomerNotFound"
    default_message = "The requested customer does not exist."


class InvoiceNotFound(NotFound):
    kind = "InvoiceNotFound"
    default_message = "Invoice not found."


class EmptyCart(BusinessRuleViolation):
    kind = "EmptyCart"
    default_message = "No products in cart to generate invoice."


class OutOfStock(BusinessRuleViolation):
    kind = "OutOfStock"
    default_message = "Out of Stock."


class NotInCart(BusinessRuleViolation):
    kind = "NotInCart"
    default_message = "The specified product is not in your cart."


class CategoryInUse(BusinessRuleViolation):
    kind = "CategoryInUse"
    default_message = "The category still has products assigned to it."


class ProductInCart(BusinessRuleViolation):
    kind = "ProductInCart"
    default_message = "The product is present in a customer's cart."


class Conflict(BackofficeError):
    kind = "Conflict"
    default_message = "The record was changed by another request."


class CartChanged(Conflict):
    kind = "CartChanged"
    default_message = "The cart changed while the invoice was being generated. Please try again."
