"""Warehouse management — commands and handler."""

from protean import handle
from protean.fields import Integer, String

from fulfilment.domain import fulfilment
from fulfilment.location import get_location_directory
from fulfilment.warehouse.lifecycle import WarehouseLifecycle
from fulfilment.warehouse.repository import RepositoryWarehouseStore
from fulfilment.warehouse.warehouse import Warehouse


@fulfilment.command(part_of="Warehouse")
class CreateWarehouse:
    """Place a new warehouse at a location."""

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer()
    stock = Integer()


@fulfilment.command(part_of="Warehouse")
class ReplaceWarehouse:
    """Replace the active warehouse holding a business unit code."""

    business_unit_code = String(required=True, max_length=50)
    location = String(required=True, max_length=50)
    capacity = Integer()
    stock = Integer()


@fulfilment.command(part_of="Warehouse")
class ArchiveWarehouse:
    """Take a warehouse out of service."""

    business_unit_code = String(required=True, max_length=50)


def _lifecycle():
    return WarehouseLifecycle(RepositoryWarehouseStore(), get_location_directory())


def _candidate(command):
    return Warehouse(
        business_unit_code=command.business_unit_code,
        location=command.location,
        capacity=command.capacity,
        stock=command.stock,
    )


@fulfilment.command_handler(part_of=Warehouse)
class WarehouseManagementHandler:
    @handle(CreateWarehouse)
    def create_warehouse(self, command):
        warehouse = _lifecycle().create(_candidate(command))
        return warehouse.business_unit_code

    @handle(ReplaceWarehouse)
    def replace_warehouse(self, command):
        warehouse = _lifecycle().replace(_candidate(command))
        return warehouse.business_unit_code

    @handle(ArchiveWarehouse)
    def archive_warehouse(self, command):
        # Only the business unit code of the target is read.
        _lifecycle().archive(command)
        return command.business_unit_code
