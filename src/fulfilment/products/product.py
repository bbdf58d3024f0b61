"""An item that can be stocked in stores and warehouses."""

from protean.fields import Float, Integer, String, Text

from fulfilment.domain import fulfilment


@fulfilment.aggregate
class Product:
    name = String(required=True, max_length=40, unique=True)
    description = Text()
    price = Float(min_value=0.0)
    stock = Integer(default=0, min_value=0)

    def update_details(self, name, description=None, price=None, stock=None):
        self.name = name
        self.description = description
        self.price = price
        self.stock = stock or 0
