"""Store aggregate — a retail outlet mirrored to the legacy store manager."""

from protean.fields import Integer, String

from fulfilment.domain import fulfilment
from fulfilment.stores.events import StoreCreated, StoreUpdated

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@fulfilment.aggregate
class Store:
    """A store with a unique name and a count of products held in stock."""

    name = String(required=True, max_length=40, unique=True)
    quantity_products_in_stock = Integer(default=0, min_value=0)

    @classmethod
    def open(cls, name, quantity_products_in_stock=0):
        store = cls(name=name, quantity_products_in_stock=quantity_products_in_stock or 0)
        store.raise_(
            StoreCreated(
                store_id=str(store.id),
                name=store.name,
                quantity_products_in_stock=store.quantity_products_in_stock,
            )
        )
        return store

    def update_details(self, name=_UNSET, quantity_products_in_stock=_UNSET):
        """Apply the given fields. Fields left unset keep their current value."""
        if name is not _UNSET:
            self.name = name
        if quantity_products_in_stock is not _UNSET:
            self.quantity_products_in_stock = quantity_products_in_stock or 0
        self.raise_(
            StoreUpdated(
                store_id=str(self.id),
                name=self.name,
                quantity_products_in_stock=self.quantity_products_in_stock,
            )
        )
