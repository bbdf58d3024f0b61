"""Fulfilment domain API package."""

from fulfilment.api.routes import product_router, store_router, warehouse_router

__all__ = ["warehouse_router", "store_router", "product_router"]
