"""Warehouse store port — persistence contract the lifecycle engine depends on.

Mutations return nothing; persistence failures surface as whatever the
backing store raises and are never converted into validation errors.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from fulfilment.warehouse.warehouse import Warehouse


class WarehouseStore(ABC):
    """Abstract interface for warehouse persistence."""

    @abstractmethod
    def get_all(self) -> Sequence[Warehouse]:
        """Return every warehouse, active and archived. Order is not significant."""
        ...

    @abstractmethod
    def find_by_business_unit_code(self, code: str) -> Warehouse | None:
        """Return the warehouse registered under `code`, or None."""
        ...

    @abstractmethod
    def create(self, warehouse: Warehouse) -> None: ...

    @abstractmethod
    def update(self, warehouse: Warehouse) -> None: ...

    @abstractmethod
    def remove(self, warehouse: Warehouse) -> None: ...
