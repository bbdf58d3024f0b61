"""Warehouse aggregate — a facility placed at a location, identified by its business unit code.

Placement rules span several warehouses (per-location count and capacity),
so they live in the lifecycle engine rather than on the aggregate. The
aggregate only records state transitions and raises the matching events.
"""

from protean.fields import DateTime, Integer, String

from fulfilment.domain import fulfilment
from fulfilment.warehouse.events import WarehouseArchived, WarehouseCreated, WarehouseReplaced


@fulfilment.aggregate
class Warehouse:
    """A warehouse unit. Active while `archived_at` is empty."""

    business_unit_code = String(required=True, max_length=50, unique=True)
    location = String(required=True, max_length=50)
    capacity = Integer()
    stock = Integer()
    created_at = DateTime()
    archived_at = DateTime()

    @property
    def is_archived(self):
        return self.archived_at is not None

    def mark_created(self, at):
        """Start the first generation of this warehouse."""
        self.created_at = at
        self.archived_at = None
        self.raise_(
            WarehouseCreated(
                business_unit_code=self.business_unit_code,
                location=self.location,
                capacity=self.capacity,
                stock=self.stock,
                created_at=at,
            )
        )

    def replace_with(self, location, capacity, stock, at):
        """Take over the location, capacity and stock of a replacement facility.

        The business unit code is kept so that history recorded against it
        stays continuous across generations.
        """
        previous_location = self.location
        previous_capacity = self.capacity

        self.location = location
        self.capacity = capacity
        self.stock = stock
        self.created_at = at
        self.archived_at = None
        self.raise_(
            WarehouseReplaced(
                business_unit_code=self.business_unit_code,
                previous_location=previous_location,
                location=location,
                previous_capacity=previous_capacity,
                capacity=capacity,
                stock=stock,
                replaced_at=at,
            )
        )

    def archive(self, at):
        """Take the warehouse out of service. Archived warehouses are terminal."""
        self.archived_at = at
        self.raise_(
            WarehouseArchived(
                business_unit_code=self.business_unit_code,
                location=self.location,
                archived_at=at,
            )
        )
