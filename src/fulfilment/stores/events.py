"""Domain events for the Store aggregate."""

from protean.fields import Identifier, Integer, String

from fulfilment.domain import fulfilment


@fulfilment.event(part_of="Store")
class StoreCreated:
    """A store was opened."""

    __version__ = 1

    store_id = Identifier(required=True)
    name = String(required=True, max_length=40)
    quantity_products_in_stock = Integer()


@fulfilment.event(part_of="Store")
class StoreUpdated:
    """A store's details changed."""

    __version__ = 1

    store_id = Identifier(required=True)
    name = String(required=True, max_length=40)
    quantity_products_in_stock = Integer()
