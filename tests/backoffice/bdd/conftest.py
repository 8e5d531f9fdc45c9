"""Shared BDD fixtures and step definitions for the Backoffice domain."""

import pytest
from backoffice.cart.cart import Cart
from backoffice.invoice.invoice import Invoice
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then

from tests.backoffice.factories import add_to_cart, create_category, create_customer, create_product


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Product ids by name."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer", target_fixture="customer_id")
def registered_customer():
    return create_customer()


@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def product_in_stock(products, name, price, stock):
    if "category_id" not in products:
        products["category_id"] = create_category()
    products[name] = create_product(category_id=products["category_id"], name=name, price=price, quantity=stock)


@given(parsers.cfparse('the customer has {quantity:d} of "{name}" in the cart'))
def product_in_cart(customer_id, products, quantity, name):
    add_to_cart(customer_id, products[name], quantity=quantity)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("no invoice exists")
def no_invoice_exists():
    assert current_domain.repository_for(Invoice)._dao.query.all().total == 0


@then(parsers.cfparse("exactly {count:d} invoice exists"))
def invoices_exist(count):
    assert current_domain.repository_for(Invoice)._dao.query.all().total == count


@then("the customer's cart is empty")
def cart_is_empty(customer_id):
    try:
        cart = current_domain.repository_for(Cart).get(customer_id)
    except ObjectNotFoundError:
        return
    assert len(cart.lines) == 0
