"""Mirror committed store changes to the legacy store manager.

Protean hands events to this handler only after the unit of work that
raised them has committed, so a rolled-back change is never synced.
"""

import structlog
from protean.utils.mixins import handle

from fulfilment.domain import fulfilment
from fulfilment.stores.events import StoreCreated, StoreUpdated
from fulfilment.stores.legacy import LegacyStoreRecord, get_legacy_store_manager
from fulfilment.stores.store import Store

logger = structlog.get_logger(__name__)


def _record(event) -> LegacyStoreRecord:
    return LegacyStoreRecord(
        store_id=str(event.store_id),
        name=event.name,
        quantity_products_in_stock=event.quantity_products_in_stock or 0,
    )


@fulfilment.event_handler(part_of=Store)
class StoreLegacySyncHandler:
    """Pushes store creations and updates to the legacy system."""

    @handle(StoreCreated)
    def on_store_created(self, event: StoreCreated) -> None:
        try:
            get_legacy_store_manager().create_store(_record(event))
        except Exception as exc:
            # The store change is committed; a failed sync is only logged.
            logger.error("legacy_store_sync_failed", action="create", store_id=str(event.store_id), error=str(exc))
            return
        logger.info("legacy_store_synced", action="create", store_id=str(event.store_id))

    @handle(StoreUpdated)
    def on_store_updated(self, event: StoreUpdated) -> None:
        try:
            get_legacy_store_manager().update_store(_record(event))
        except Exception as exc:
            logger.error("legacy_store_sync_failed", action="update", store_id=str(event.store_id), error=str(exc))
            return
        logger.info("legacy_store_synced", action="update", store_id=str(event.store_id))
