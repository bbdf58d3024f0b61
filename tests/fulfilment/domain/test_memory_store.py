"""Tests for the in-memory warehouse store."""

from fulfilment.warehouse.memory import InMemoryWarehouseStore
from fulfilment.warehouse.warehouse import Warehouse


def _warehouse(code="MWH.001", location="ZWOLLE-001"):
    return Warehouse(business_unit_code=code, location=location, capacity=10, stock=0)


class TestInMemoryWarehouseStore:
    def test_seeded_warehouses_are_found(self):
        store = InMemoryWarehouseStore([_warehouse("MWH.001"), _warehouse("MWH.002")])
        assert store.find_by_business_unit_code("MWH.002").business_unit_code == "MWH.002"
        assert len(store.get_all()) == 2
        assert store.mutations == []

    def test_missing_code(self):
        assert InMemoryWarehouseStore().find_by_business_unit_code("MWH.404") is None

    def test_create_update_remove_are_recorded(self):
        store = InMemoryWarehouseStore()
        warehouse = _warehouse()

        store.create(warehouse)
        store.update(warehouse)
        store.remove(warehouse)

        assert store.mutations == [("create", "MWH.001"), ("update", "MWH.001"), ("remove", "MWH.001")]
        assert store.get_all() == []

    def test_update_of_unknown_code_does_not_insert(self):
        store = InMemoryWarehouseStore()
        store.update(_warehouse())
        assert store.get_all() == []
