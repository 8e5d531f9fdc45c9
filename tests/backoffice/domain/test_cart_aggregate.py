import pytest
from backoffice.cart.cart import Cart
from backoffice.cart.events import CartCleared, CartLineAdded, CartLineRemoved
from backoffice.shared.errors import NotInCart
from protean.exceptions import ValidationError


@pytest.fixture()
def cart():
    return Cart.open(customer_id="cust-1")


class TestOpen:
    def test_identity_is_the_customer(self, cart):
        assert cart.customer_id == "cust-1"

    def test_starts_empty(self, cart):
        assert len(cart.lines) == 0
        assert cart.created_at is not None


class TestAddLine:
    def test_new_product_adds_a_line(self, cart):
        line = cart.add_line(product_id="prod-1", quantity=2)

        assert len(cart.lines) == 1
        assert line.quantity == 2
        assert cart.line_for("prod-1") is line

    def test_same_product_accumulates(self, cart):
        cart.add_line(product_id="prod-1", quantity=2)
        cart.add_line(product_id="prod-1", quantity=3)

        assert len(cart.lines) == 1
        assert cart.line_for("prod-1").quantity == 5

    def test_distinct_products_get_distinct_lines(self, cart):
        cart.add_line(product_id="prod-1", quantity=1)
        cart.add_line(product_id="prod-2", quantity=1)

        assert len(cart.lines) == 2

    def test_quantity_must_be_positive(self, cart):
        with pytest.raises(ValidationError):
            cart.add_line(product_id="prod-1", quantity=0)

    def test_raises_event_with_running_quantity(self, cart):
        cart.add_line(product_id="prod-1", quantity=2)
        cart.add_line(product_id="prod-1", quantity=1)

        events = [e for e in cart._events if isinstance(e, CartLineAdded)]
        assert [e.quantity for e in events] == [2, 1]
        assert events[-1].line_quantity == 3


class TestRemoveLine:
    def test_removes_the_line(self, cart):
        cart.add_line(product_id="prod-1", quantity=1)
        cart.add_line(product_id="prod-2", quantity=1)

        cart.remove_line("prod-1")

        assert cart.line_for("prod-1") is None
        assert len(cart.lines) == 1
        assert isinstance(cart._events[-1], CartLineRemoved)

    def test_missing_product_is_rejected(self, cart):
        with pytest.raises(NotInCart):
            cart.remove_line("prod-9")


class TestClear:
    def test_removes_every_line(self, cart):
        cart.add_line(product_id="prod-1", quantity=1)
        cart.add_line(product_id="prod-2", quantity=4)

        cart.clear()

        assert len(cart.lines) == 0
        event = cart._events[-1]
        assert isinstance(event, CartCleared)
        assert event.lines_removed == 2
