"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state.
State tracks identifiers returned by creation endpoints so follow-up
operations can reference them.
"""

from dataclasses import dataclass


@dataclass
class WarehouseState:
    """Tracks a single simulated warehouse lifecycle."""

    business_unit_code: str | None = None
    location: str | None = None
    stock: int = 0
    archived: bool = False


@dataclass
class StoreState:
    """Tracks a single simulated store lifecycle."""

    store_id: str | None = None
    name: str | None = None
