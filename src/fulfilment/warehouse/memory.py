"""In-memory warehouse store.

Holds warehouses in a dict keyed by business unit code. Used to check
placement plans without touching the repository, and as the store behind
lifecycle unit tests.
"""

from fulfilment.warehouse.port import WarehouseStore
from fulfilment.warehouse.warehouse import Warehouse


class InMemoryWarehouseStore(WarehouseStore):
    def __init__(self, warehouses=None):
        self._warehouses: dict[str, Warehouse] = {}
        self.mutations: list[tuple[str, str]] = []
        for warehouse in warehouses or []:
            self._warehouses[warehouse.business_unit_code] = warehouse

    def get_all(self) -> list[Warehouse]:
        return list(self._warehouses.values())

    def find_by_business_unit_code(self, code: str) -> Warehouse | None:
        return self._warehouses.get(code)

    def create(self, warehouse: Warehouse) -> None:
        self._warehouses[warehouse.business_unit_code] = warehouse
        self.mutations.append(("create", warehouse.business_unit_code))

    def update(self, warehouse: Warehouse) -> None:
        if warehouse.business_unit_code in self._warehouses:
            self._warehouses[warehouse.business_unit_code] = warehouse
        self.mutations.append(("update", warehouse.business_unit_code))

    def remove(self, warehouse: Warehouse) -> None:
        self._warehouses.pop(warehouse.business_unit_code, None)
        self.mutations.append(("remove", warehouse.business_unit_code))
