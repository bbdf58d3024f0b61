"""Store management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from fulfilment.domain import fulfilment
from fulfilment.stores.store import Store


@fulfilment.command(part_of="Store")
class CreateStore:
    name = String(required=True, max_length=40)
    quantity_products_in_stock = Integer()


@fulfilment.command(part_of="Store")
class UpdateStore:
    """Replace all editable fields of a store."""

    store_id = Identifier(required=True)
    name = String(required=True, max_length=40)
    quantity_products_in_stock = Integer()


@fulfilment.command(part_of="Store")
class PatchStore:
    """Change only the fields that were provided."""

    store_id = Identifier(required=True)
    name = String(max_length=40)
    quantity_products_in_stock = Integer()


@fulfilment.command(part_of="Store")
class DeleteStore:
    store_id = Identifier(required=True)


@fulfilment.command_handler(part_of=Store)
class StoreManagementHandler:
    @handle(CreateStore)
    def create_store(self, command):
        store = Store.open(
            name=command.name,
            quantity_products_in_stock=command.quantity_products_in_stock,
        )
        current_domain.repository_for(Store).add(store)
        return str(store.id)

    @handle(UpdateStore)
    def update_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)
        store.update_details(
            name=command.name,
            quantity_products_in_stock=command.quantity_products_in_stock,
        )
        repo.add(store)

    @handle(PatchStore)
    def patch_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)
        changes = {}
        if command.name is not None:
            changes["name"] = command.name
        if command.quantity_products_in_stock is not None:
            changes["quantity_products_in_stock"] = command.quantity_products_in_stock
        store.update_details(**changes)
        repo.add(store)

    @handle(DeleteStore)
    def delete_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)
        repo._dao.delete(store)
