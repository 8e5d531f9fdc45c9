import pytest
from backoffice.api import ROUTERS, register_error_handlers
from fastapi import FastAPI
from fastapi.testclient import TestClient


def _build_app():
    app = FastAPI()
    for router in ROUTERS:
        app.include_router(router)
    register_error_handlers(app)
    return app


@pytest.fixture()
def client():
    return TestClient(_build_app())


@pytest.fixture()
def lenient_client():
    """A client that reports unhandled errors as responses instead of raising them."""
    return TestClient(_build_app(), raise_server_exceptions=False)


@pytest.fixture()
def category(client):
    response = client.post("/category/save", json={"name": "Electronics"})
    return response.json()["data"]


@pytest.fixture()
def product(client, category):
    response = client.post(
        "/product/save",
        json={"name": "Lamp", "price": 33.33, "quantity": 10, "category_id": category["id"]},
    )
    return response.json()["data"]


@pytest.fixture()
def customer(client):
    response = client.post(
        "/customer/save",
        json={
            "name": "Jane Doe",
            "email": "jane@example.com",
            "address": "12 Market Street",
            "contact_number": "5551234567",
        },
    )
    return response.json()["data"]
