"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that match the exact field names expected
by the API's Pydantic request schemas. Warehouse payloads stay within the
limits of the default location catalogue unless asked otherwise.
"""

import random
import uuid

from faker import Faker

fake = Faker()

# Mirrors the default location catalogue: identifier -> (max warehouses, max capacity)
LOCATIONS = {
    "ZWOLLE-001": (1, 40),
    "ZWOLLE-002": (2, 50),
    "AMSTERDAM-001": (5, 100),
    "AMSTERDAM-002": (3, 75),
    "TILBURG-001": (1, 40),
    "HELMOND-001": (1, 45),
    "EINDHOVEN-001": (2, 70),
    "VETSBY-001": (1, 90),
}

# ---------- Warehouses ----------


def unique_business_unit_code() -> str:
    """Generate unique business unit codes like 'MWH.LT-a1b2c3'."""
    return f"MWH.LT-{uuid.uuid4().hex[:6]}"


def warehouse_data(location=None, capacity=None, stock=None, **overrides):
    location = location or random.choice(list(LOCATIONS))
    _, max_capacity = LOCATIONS.get(location, (1, 100))
    if capacity is None:
        capacity = random.randint(1, max(1, max_capacity // 5))
    if stock is None:
        stock = random.randint(0, capacity)
    data = {
        "business_unit_code": unique_business_unit_code(),
        "location": location,
        "capacity": capacity,
        "stock": stock,
    }
    data.update(overrides)
    return data


def replacement_data(business_unit_code, stock, location=None):
    """A replacement that carries the given stock to a (possibly new) location."""
    return warehouse_data(
        location=location,
        capacity=max(stock, 1) + random.randint(0, 10),
        stock=stock,
        business_unit_code=business_unit_code,
    )


# ---------- Stores ----------


def store_name() -> str:
    """Store names are unique and at most 40 characters."""
    return f"{fake.city()[:28]} {uuid.uuid4().hex[:6]}"


def store_data(**overrides):
    data = {
        "name": store_name(),
        "quantity_products_in_stock": random.randint(0, 500),
    }
    data.update(overrides)
    return data


# ---------- Products ----------


def product_data(**overrides):
    data = {
        "name": f"{fake.word().upper()[:30]}-{uuid.uuid4().hex[:6]}",
        "description": fake.sentence(nb_words=8),
        "price": round(random.uniform(1.0, 999.0), 2),
        "stock": random.randint(0, 200),
    }
    data.update(overrides)
    return data
