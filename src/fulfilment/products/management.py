"""Product management — commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from fulfilment.domain import fulfilment
from fulfilment.products.product import Product


@fulfilment.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=40)
    description = Text()
    price = Float()
    stock = Integer()


@fulfilment.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=40)
    description = Text()
    price = Float()
    stock = Integer()


@fulfilment.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@fulfilment.command_handler(part_of=Product)
class ProductManagementHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock or 0,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
        )
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
