"""Backoffice load test scenarios.

A stateful checkout journey (catalogue setup, customer, cart, invoice) and a
read-heavy browsing user. Checkout steps execute in order; each depends on
the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import category_data, customer_data, invoice_request, product_data


class CheckoutJourney(SequentialTaskSet):
    """Create Category -> Products -> Customer -> Fill Cart -> Generate Invoice."""

    def on_start(self):
        self.category_id = None
        self.product_ids = []
        self.customer_id = None

    @task
    def create_category(self):
        with self.client.post(
            "/category/save", json=category_data(), catch_response=True, name="POST /category/save"
        ) as resp:
            if resp.status_code == 201:
                self.category_id = resp.json()["data"]["id"]
            else:
                resp.failure(f"Create category failed: {resp.status_code}")
                self.interrupt()

    @task
    def create_products(self):
        for _ in range(3):
            with self.client.post(
                "/product/save",
                json=product_data(self.category_id),
                catch_response=True,
                name="POST /product/save",
            ) as resp:
                if resp.status_code == 201:
                    self.product_ids.append(resp.json()["data"]["id"])
                else:
                    resp.failure(f"Create product failed: {resp.status_code}")
                    self.interrupt()

    @task
    def create_customer(self):
        with self.client.post(
            "/customer/save", json=customer_data(), catch_response=True, name="POST /customer/save"
        ) as resp:
            if resp.status_code == 201:
                self.customer_id = resp.json()["data"]["id"]
            else:
                resp.failure(f"Create customer failed: {resp.status_code}")
                self.interrupt()

    @task
    def fill_cart(self):
        for product_id in self.product_ids:
            with self.client.post(
                "/cart/add",
                json={"customer_id": self.customer_id, "product_id": product_id, "quantity": random.randint(1, 5)},
                catch_response=True,
                name="POST /cart/add",
            ) as resp:
                if resp.status_code != 201:
                    resp.failure(f"Add to cart failed: {resp.status_code}")

    @task
    def view_cart(self):
        self.client.get(f"/cart/view?customer_id={self.customer_id}", name="GET /cart/view")

    @task
    def generate_invoice(self):
        with self.client.post(
            "/invoice/generate",
            json=invoice_request(self.customer_id),
            catch_response=True,
            name="POST /invoice/generate",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Generate invoice failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class CheckoutUser(HttpUser):
    wait_time = between(1, 3)
    tasks = [CheckoutJourney]


class BrowsingUser(HttpUser):
    """Reads the catalogue and invoice listings."""

    wait_time = between(0.5, 2)

    @task(5)
    def list_products(self):
        self.client.get(f"/products?page={random.randint(1, 3)}", name="GET /products")

    @task(2)
    def list_categories(self):
        self.client.get("/categories", name="GET /categories")

    @task(1)
    def list_invoices(self):
        self.client.get("/invoices", name="GET /invoices")

    @task(1)
    def health(self):
        self.client.get("/health", name="GET /health")
