"""Pydantic request/response schemas for the Backoffice API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from backoffice.invoice.pricing import MAX_AMOUNT, MAX_QUANTITY, MAX_TAX_RATE

# --- Catalogue ---


class SaveCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Electronics", "description": "Phones, laptops and accessories"},
                {"id": "b7a7c0e8-3f5d-4c55-9a0f-1d2e3f4a5b6c", "name": "Electronics & Gadgets"},
            ]
        }
    }

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class UpdateCategoryRequest(BaseModel):
    id: str
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class SaveProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Wireless Mouse",
                    "description": "2.4 GHz, 3 buttons",
                    "price": 19.99,
                    "quantity": 120,
                    "category_id": "b7a7c0e8-3f5d-4c55-9a0f-1d2e3f4a5b6c",
                }
            ]
        }
    }

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0, le=float(MAX_AMOUNT), allow_inf_nan=False)
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY)
    category_id: str


# --- Customers ---


class SaveCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "address": "12 Market Street, Springfield",
                    "contact_number": "5551234567",
                }
            ]
        }
    }

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=254)
    address: str = Field(..., min_length=1, max_length=500)
    contact_number: str = Field(..., pattern=r"^[0-9]{10,15}$")


class DeleteRequest(BaseModel):
    id: str


# --- Cart ---


class AddToCartRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "0f8e1c2a-9d3b-4e5f-8a7b-6c5d4e3f2a1b",
                    "product_id": "5a4b3c2d-1e0f-4a9b-8c7d-6e5f4a3b2c1d",
                    "quantity": 2,
                }
            ]
        }
    }

    customer_id: str
    product_id: str
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)


class RemoveFromCartRequest(BaseModel):
    customer_id: str
    product_id: str


# --- Invoices ---


class GenerateInvoiceRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "0f8e1c2a-9d3b-4e5f-8a7b-6c5d4e3f2a1b",
                    "tax_rate": 8,
                    "discount": 10,
                }
            ]
        }
    }

    customer_id: str
    tax_rate: float = Field(..., ge=0, le=float(MAX_TAX_RATE), allow_inf_nan=False)
    discount: float | None = Field(None, ge=0, le=float(MAX_AMOUNT), allow_inf_nan=False)


# --- Responses ---


class Envelope(BaseModel):
    status: str
    message: list[str]
    data: Any = None
    errors: dict[str, list[str]] | None = None
