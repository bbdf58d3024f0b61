"""Domain events for the Warehouse aggregate."""

from protean.fields import DateTime, Integer, String

from fulfilment.domain import fulfilment


@fulfilment.event(part_of="Warehouse")
class WarehouseCreated:
    """A warehouse was placed at a location."""

    __version__ = 1

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer()
    stock = Integer()
    created_at = DateTime(required=True)


@fulfilment.event(part_of="Warehouse")
class WarehouseReplaced:
    """A new generation of the warehouse took over its business unit code."""

    __version__ = 1

    business_unit_code = String(required=True, max_length=50)
    previous_location = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    previous_capacity = Integer()
    capacity = Integer()
    stock = Integer()
    replaced_at = DateTime(required=True)


@fulfilment.event(part_of="Warehouse")
class WarehouseArchived:
    """A warehouse was taken out of service."""

    __version__ = 1

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    archived_at = DateTime(required=True)
