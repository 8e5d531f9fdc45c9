"""FastAPI endpoints for the Backoffice domain.

Every endpoint answers with the ``{status, message, data}`` envelope. Writes
go through ``current_domain.process`` so each one runs in its own Unit of
Work; reads go straight to the repositories.
"""

import math

from fastapi import APIRouter, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from backoffice.api.envelope import to_envelope
from backoffice.api.schemas import (
    AddToCartRequest,
    DeleteRequest,
    Envelope,
    GenerateInvoiceRequest,
    RemoveFromCartRequest,
    SaveCategoryRequest,
    SaveCustomerRequest,
    SaveProductRequest,
    UpdateCategoryRequest,
)
from backoffice.cart.items import AddToCart, RemoveFromCart
from backoffice.cart.view import cart_lines
from backoffice.category.category import Category
from backoffice.category.management import CreateCategory, DeleteCategory, UpdateCategory, get_category
from backoffice.customer.customer import Customer
from backoffice.customer.management import CreateCustomer, DeleteCustomer, UpdateCustomer, get_customer
from backoffice.invoice.generation import GenerateInvoice
from backoffice.invoice.history import all_invoices, get_invoice
from backoffice.product.management import CreateProduct, DeleteProduct, UpdateProduct, get_product
from backoffice.product.product import Product

category_router = APIRouter(tags=["categories"])
product_router = APIRouter(tags=["products"])
customer_router = APIRouter(tags=["customers"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
invoice_router = APIRouter(tags=["invoices"])

PER_PAGE = 15
MAX_PER_PAGE = 100


def _respond(message: str, data=None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(to_envelope(message, data)))


def _all(aggregate_cls) -> list[dict]:
    records = current_domain.repository_for(aggregate_cls)._dao.query.all().items
    return [record.to_dict() for record in records]


def _page(aggregate_cls, page: int, per_page: int, order_by: str, serialize=None) -> dict:
    """One page of records, oldest first, with paging metadata."""
    serialize = serialize or (lambda record: record.to_dict())
    result = (
        current_domain.repository_for(aggregate_cls)
        ._dao.query.order_by(order_by)
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return {
        "items": [serialize(record) for record in result.items],
        "current_page": page,
        "per_page": per_page,
        "total": result.total,
        "last_page": max(1, math.ceil(result.total / per_page)),
    }


def _customer_data(customer) -> dict:
    data = customer.to_dict()
    data["email"] = customer.email.address
    data["contact_number"] = customer.contact_number.digits
    return data


def _process(command):
    return current_domain.process(command, asynchronous=False)


# --- Category endpoints ---


@category_router.get("/categories", response_model=Envelope)
async def list_categories():
    return _respond("List of categories retrieved successfully", _all(Category))


@category_router.post("/category/save", response_model=Envelope)
async def save_category(body: SaveCategoryRequest):
    if body.id:
        category_id = _process(UpdateCategory(category_id=body.id, name=body.name, description=body.description))
        return _respond("Category updated successfully", get_category(category_id).to_dict())

    category_id = _process(CreateCategory(name=body.name, description=body.description))
    return _respond("Category saved successfully", get_category(category_id).to_dict(), status_code=201)


@category_router.put("/category/update", response_model=Envelope)
async def update_category(body: UpdateCategoryRequest):
    category_id = _process(UpdateCategory(category_id=body.id, name=body.name, description=body.description))
    return _respond("Category updated successfully", get_category(category_id).to_dict())


@category_router.get("/category/view/{category_id}", response_model=Envelope)
async def view_category(category_id: str):
    return _respond("Category retrieved successfully", get_category(category_id).to_dict())


@category_router.delete("/category/delete/{category_id}", response_model=Envelope)
async def delete_category(category_id: str):
    _process(DeleteCategory(category_id=category_id))
    return _respond("Category deleted successfully")


# --- Product endpoints ---


@product_router.get("/products", response_model=Envelope)
async def list_products(page: int = Query(1, ge=1), per_page: int = Query(PER_PAGE, ge=1, le=MAX_PER_PAGE)):
    return _respond("List of products retrieved successfully", _page(Product, page, per_page, "created_at"))


@product_router.post("/product/save", response_model=Envelope)
async def save_product(body: SaveProductRequest):
    fields = {
        "name": body.name,
        "description": body.description,
        "price": body.price,
        "quantity": body.quantity,
        "category_id": body.category_id,
    }
    if body.id:
        product_id = _process(UpdateProduct(product_id=body.id, **fields))
        return _respond("Product updated successfully", get_product(product_id).to_dict())

    product_id = _process(CreateProduct(**fields))
    return _respond("Product saved successfully", get_product(product_id).to_dict(), status_code=201)


@product_router.get("/product/view/{product_id}", response_model=Envelope)
async def view_product(product_id: str):
    return _respond("Product details retrieved successfully", get_product(product_id).to_dict())


@product_router.post("/product/delete", response_model=Envelope)
async def delete_product(body: DeleteRequest):
    _process(DeleteProduct(product_id=body.id))
    return _respond("Product deleted successfully")


# --- Customer endpoints ---


@customer_router.get("/customers", response_model=Envelope)
async def list_customers(page: int = Query(1, ge=1), per_page: int = Query(PER_PAGE, ge=1, le=MAX_PER_PAGE)):
    data = _page(Customer, page, per_page, "registered_at", serialize=_customer_data)
    return _respond("List of customers retrieved successfully", data)


@customer_router.post("/customer/save", response_model=Envelope)
async def save_customer(body: SaveCustomerRequest):
    fields = {
        "name": body.name,
        "email": body.email,
        "address": body.address,
        "contact_number": body.contact_number,
    }
    if body.id:
        customer_id = _process(UpdateCustomer(customer_id=body.id, **fields))
        return _respond("Customer updated successfully", _customer_data(get_customer(customer_id)))

    customer_id = _process(CreateCustomer(**fields))
    return _respond("Customer saved successfully", _customer_data(get_customer(customer_id)), status_code=201)


@customer_router.get("/customer/view/{customer_id}", response_model=Envelope)
async def view_customer(customer_id: str):
    return _respond("Customer retrieved successfully", _customer_data(get_customer(customer_id)))


@customer_router.post("/customer/delete", response_model=Envelope)
async def delete_customer(body: DeleteRequest):
    _process(DeleteCustomer(customer_id=body.id))
    return _respond("Customer deleted successfully")


# --- Cart endpoints ---


@cart_router.post("/add", response_model=Envelope)
async def add_to_cart(body: AddToCartRequest):
    _process(AddToCart(customer_id=body.customer_id, product_id=body.product_id, quantity=body.quantity))
    return _respond("Product added to cart successfully", cart_lines(body.customer_id), status_code=201)


@cart_router.get("/view", response_model=Envelope)
async def view_cart(customer_id: str | None = None):
    return _respond("Cart retrieved successfully", cart_lines(customer_id))


@cart_router.post("/remove", response_model=Envelope)
async def remove_from_cart(body: RemoveFromCartRequest):
    _process(RemoveFromCart(customer_id=body.customer_id, product_id=body.product_id))
    return _respond("Product removed from cart successfully", cart_lines(body.customer_id))


# --- Invoice endpoints ---


@invoice_router.get("/invoices", response_model=Envelope)
async def list_invoices(customer_id: str | None = None):
    invoices = [invoice.to_dict() for invoice in all_invoices(customer_id)]
    return _respond("List of invoices retrieved successfully", invoices)


@invoice_router.get("/invoice/view/{invoice_id}", response_model=Envelope)
async def view_invoice(invoice_id: str):
    return _respond("Invoice retrieved successfully", get_invoice(invoice_id).to_dict())


@invoice_router.post("/invoice/generate", response_model=Envelope)
async def generate_invoice(body: GenerateInvoiceRequest):
    result = _process(
        GenerateInvoice(
            customer_id=body.customer_id,
            tax_rate=body.tax_rate,
            discount=body.discount or 0.0,
        )
    )
    data = {
        "invoice": get_invoice(result["invoice_id"]).to_dict(),
        "lines": result["lines"],
    }
    return _respond("Invoice generated successfully", data, status_code=201)
