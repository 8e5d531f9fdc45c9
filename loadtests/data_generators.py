"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request schemas and the
domain's validation rules (well-formed unique email, 10-15 digit contact
number, non-negative price and stock).
"""

import random
import uuid

from faker import Faker

fake = Faker()


def valid_email() -> str:
    """Generate unique emails with one @, a dotted domain and no consecutive dots."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:6]}@{domain}"


def contact_number() -> str:
    """Generate a 10 to 15 digit contact number."""
    return "".join(str(random.randint(0, 9)) for _ in range(random.randint(10, 15)))


def customer_data() -> dict:
    return {
        "name": fake.name()[:255],
        "email": valid_email(),
        "address": fake.address().replace("\n", ", ")[:500],
        "contact_number": contact_number(),
    }


def category_data() -> dict:
    return {
        "name": f"{fake.word().title()} {uuid.uuid4().hex[:4]}"[:100],
        "description": fake.sentence(),
    }


def product_data(category_id: str) -> dict:
    return {
        "name": f"{fake.color_name()} {fake.word().title()}"[:255],
        "description": fake.sentence(),
        "price": round(random.uniform(0.5, 500.0), 2),
        "quantity": random.randint(50, 500),
        "category_id": category_id,
    }


def invoice_request(customer_id: str) -> dict:
    return {
        "customer_id": customer_id,
        "tax_rate": random.choice([0, 5, 8, 12.5, 18]),
        "discount": random.choice([0, 0, 5, 10]),
    }
