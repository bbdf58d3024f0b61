"""Legacy store manager port — the external system that mirrors our stores.

Calls are made only after a store change has been committed; adapters must
not assume they can veto or roll back that change.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LegacyStoreRecord:
    """The store fields the legacy system keeps."""

    store_id: str
    name: str
    quantity_products_in_stock: int


class LegacyStoreManager(ABC):
    """Abstract interface for legacy store manager adapters."""

    @abstractmethod
    def create_store(self, store: LegacyStoreRecord) -> None:
        """Register a newly created store with the legacy system."""
        ...

    @abstractmethod
    def update_store(self, store: LegacyStoreRecord) -> None:
        """Push changed store details to the legacy system."""
        ...
