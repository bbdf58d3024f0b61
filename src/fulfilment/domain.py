"""Fulfilment bounded context — Warehouses, Stores and Products.

Warehouses carry the placement rules (location capacity, lifecycle);
Stores are mirrored to the legacy store manager after commit;
Products are plain catalogue records.
"""

from protean.domain import Domain

from fulfilment.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
fulfilment = Domain(name="fulfilment")
