"""Integration tests for the cart and invoice endpoints."""

from backoffice.cart.items import AddToCart
from backoffice.invoice import generation
from backoffice.invoice.invoice import Invoice
from protean.utils.globals import current_domain

from tests.backoffice.factories import in_another_request, process


def _add(client, customer, product, quantity=1):
    return client.post(
        "/cart/add",
        json={"customer_id": customer["id"], "product_id": product["id"], "quantity": quantity},
    )


class TestCartEndpoints:
    def test_add(self, client, customer, product):
        response = _add(client, customer, product, quantity=2)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == ["Product added to cart successfully"]
        assert body["data"][0]["name"] == "Lamp"
        assert body["data"][0]["quantity"] == 2

    def test_add_accumulates(self, client, customer, product):
        _add(client, customer, product, quantity=2)
        response = _add(client, customer, product, quantity=3)

        assert [line["quantity"] for line in response.json()["data"]] == [5]

    def test_out_of_stock(self, client, customer, product):
        response = _add(client, customer, product, quantity=11)

        assert response.status_code == 400
        assert response.json()["message"] == ["Out of Stock."]

    def test_zero_quantity(self, client, customer, product):
        response = _add(client, customer, product, quantity=0)

        assert response.status_code == 422
        assert "quantity" in response.json()["errors"]

    def test_unknown_customer(self, client, product):
        response = _add(client, {"id": "missing"}, product)

        assert response.status_code == 404

    def test_view(self, client, customer, product):
        _add(client, customer, product)

        response = client.get("/cart/view", params={"customer_id": customer["id"]})

        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    def test_view_empty(self, client, customer):
        response = client.get("/cart/view", params={"customer_id": customer["id"]})

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_remove(self, client, customer, product):
        _add(client, customer, product)

        response = client.post("/cart/remove", json={"customer_id": customer["id"], "product_id": product["id"]})

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_remove_not_in_cart(self, client, customer, product):
        response = client.post("/cart/remove", json={"customer_id": customer["id"], "product_id": product["id"]})

        assert response.status_code == 400
        assert response.json()["message"] == ["The specified product is not in your cart."]


class TestInvoiceEndpoints:
    def test_generate(self, client, customer, product):
        _add(client, customer, product, quantity=3)

        response = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 10, "discount": 9.99})

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "Success"
        assert body["message"] == ["Invoice generated successfully"]
        invoice = body["data"]["invoice"]
        assert invoice["subtotal"] == 99.99
        assert invoice["tax_amount"] == 9.0
        assert invoice["total_amount"] == 99.0
        assert invoice["customer_name"] == "Jane Doe"
        assert body["data"]["lines"] == [
            {
                "product_id": product["id"],
                "product_name": "Lamp",
                "quantity": 3,
                "price": 33.33,
                "total_amount": 99.99,
            }
        ]

        cart = client.get("/cart/view", params={"customer_id": customer["id"]}).json()["data"]
        assert cart == []

    def test_discount_is_optional(self, client, customer, product):
        _add(client, customer, product)

        response = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 0})

        assert response.status_code == 201
        assert response.json()["data"]["invoice"]["discount"] == 0.0

    def test_empty_cart(self, client, customer):
        response = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 8})

        assert response.status_code == 400
        assert response.json() == {
            "status": "Error",
            "message": ["No products in cart to generate invoice."],
            "data": None,
        }
        assert current_domain.repository_for(Invoice)._dao.query.all().total == 0

    def test_unknown_customer(self, client):
        response = client.post("/invoice/generate", json={"customer_id": "missing", "tax_rate": 8})

        assert response.status_code == 404

    def test_negative_tax_rate(self, client, customer):
        response = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": -1})

        assert response.status_code == 422
        assert "tax_rate" in response.json()["errors"]

    def test_non_finite_tax_rate(self, client, customer):
        response = client.post(
            "/invoice/generate",
            content='{"customer_id": "' + customer["id"] + '", "tax_rate": Infinity}',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 422
        assert "tax_rate" in response.json()["errors"]

    def test_tax_rate_above_column_limit(self, client, customer):
        response = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 1000})

        assert response.status_code == 422
        assert "tax_rate" in response.json()["errors"]

    def test_discount_above_column_limit(self, client, customer, product):
        _add(client, customer, product)

        response = client.post(
            "/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 8, "discount": 1e27}
        )

        assert response.status_code == 422
        assert "discount" in response.json()["errors"]
        assert current_domain.repository_for(Invoice)._dao.query.all().total == 0

    def test_cart_changed_during_generation(self, client, customer, product, category, monkeypatch):
        other = client.post(
            "/product/save",
            json={"name": "Bulb", "price": 2.5, "quantity": 10, "category_id": category["id"]},
        ).json()["data"]
        _add(client, customer, product)
        original = generation.compute_totals

        def pricing_then_concurrent_add(*args, **kwargs):
            totals = original(*args, **kwargs)
            in_another_request(process, AddToCart(customer_id=customer["id"], product_id=other["id"], quantity=1))
            return totals

        monkeypatch.setattr(generation, "compute_totals", pricing_then_concurrent_add)

        response = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 8})

        assert response.status_code == 409
        assert response.json() == {
            "status": "Error",
            "message": ["The cart changed while the invoice was being generated. Please try again."],
            "data": None,
        }
        cart = client.get("/cart/view", params={"customer_id": customer["id"]}).json()["data"]
        assert len(cart) == 2

    def test_list_and_view(self, client, customer, product):
        _add(client, customer, product)
        invoice_id = client.post("/invoice/generate", json={"customer_id": customer["id"], "tax_rate": 0}).json()[
            "data"
        ]["invoice"]["id"]

        listing = client.get("/invoices")
        assert [invoice["id"] for invoice in listing.json()["data"]] == [invoice_id]

        view = client.get(f"/invoice/view/{invoice_id}")
        assert view.status_code == 200
        assert view.json()["data"]["customer_id"] == customer["id"]

    def test_view_unknown(self, client):
        response = client.get("/invoice/view/missing")

        assert response.status_code == 404
        assert response.json()["message"] == ["Invoice not found."]


class TestUnexpectedErrors:
    def test_unhandled_exception_is_enveloped(self, lenient_client, monkeypatch):
        def explode(customer_id=None):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr("backoffice.api.routes.cart_lines", explode)

        response = lenient_client.get("/cart/view")

        assert response.status_code == 500
        assert response.json() == {
            "status": "Error",
            "message": ["An unexpected error occurred."],
            "data": None,
        }
