"""Warehouse repository and the store adapter the lifecycle engine runs against."""

from protean.utils.globals import current_domain

from fulfilment.domain import fulfilment
from fulfilment.warehouse.port import WarehouseStore
from fulfilment.warehouse.warehouse import Warehouse


@fulfilment.repository(part_of=Warehouse)
class WarehouseRepository:
    """Queries over persisted warehouses, keyed by business unit code."""

    def find_by_business_unit_code(self, code: str) -> Warehouse | None:
        return self._dao.query.filter(business_unit_code=code).all().first

    def list_all(self) -> list[Warehouse]:
        # Placement checks need every warehouse, not the default page.
        return self._dao.query.limit(None).all().items

    def delete(self, warehouse: Warehouse) -> None:
        self._dao.delete(warehouse)


class RepositoryWarehouseStore(WarehouseStore):
    """WarehouseStore backed by the domain's Warehouse repository.

    Must be used inside an active domain context; command handlers provide
    one together with the unit of work that commits the mutation.
    """

    @property
    def _repo(self) -> WarehouseRepository:
        return current_domain.repository_for(Warehouse)

    def get_all(self) -> list[Warehouse]:
        return self._repo.list_all()

    def find_by_business_unit_code(self, code: str) -> Warehouse | None:
        return self._repo.find_by_business_unit_code(code)

    def create(self, warehouse: Warehouse) -> None:
        self._repo.add(warehouse)

    def update(self, warehouse: Warehouse) -> None:
        # `warehouse` was loaded from this store, so adding it upserts by id.
        self._repo.add(warehouse)

    def remove(self, warehouse: Warehouse) -> None:
        existing = self._repo.find_by_business_unit_code(warehouse.business_unit_code)
        if existing is not None:
            self._repo.delete(existing)
