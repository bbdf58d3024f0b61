"""Warehouse lifecycle — create, replace and archive warehouses under placement rules.

Each operation runs its validations in a fixed order, stops at the first
failure with a WarehouseValidationError, and otherwise issues exactly one
store mutation. Reads and the write are separate store calls with no version
check in between, so two concurrent creates at the same location can both
pass the count and capacity checks.

State per business unit code:

    Active --replace--> Active (new generation)
    Active --archive--> Archived (terminal)
"""

from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from fulfilment.location.port import Location, LocationDirectory
from fulfilment.warehouse.errors import WarehouseValidationError
from fulfilment.warehouse.port import WarehouseStore
from fulfilment.warehouse.warehouse import Warehouse

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WarehouseLifecycle:
    """Applies warehouse placement rules on top of a store and a location directory."""

    def __init__(
        self,
        store: WarehouseStore,
        locations: LocationDirectory,
        clock: Callable[[], datetime] | None = None,
    ):
        self.store = store
        self.locations = locations
        self.clock = clock or _utcnow

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def create(self, candidate: Warehouse) -> Warehouse:
        code = candidate.business_unit_code

        if self.store.find_by_business_unit_code(code) is not None:
            self._reject("create", code, f"Warehouse with business unit code {code} already exists")

        location = self._resolve_location("create", candidate)

        active_here = self._active_at(candidate.location)
        if len(active_here) >= location.max_number_of_warehouses:
            self._reject(
                "create",
                code,
                f"Maximum number of warehouses ({location.max_number_of_warehouses}) "
                f"has been reached for location {candidate.location}",
            )

        self._require_positive_capacity("create", candidate)

        current_total = sum(w.capacity or 0 for w in active_here)
        if current_total + candidate.capacity > location.max_capacity:
            self._reject(
                "create",
                code,
                f"Total capacity at location {candidate.location} would exceed maximum capacity of "
                f"{location.max_capacity}. Current total: {current_total}, adding: {candidate.capacity}",
            )

        if candidate.stock is not None:
            if candidate.stock < 0:
                self._reject("create", code, "Warehouse stock cannot be negative")
            if candidate.stock > candidate.capacity:
                self._reject(
                    "create",
                    code,
                    f"Warehouse stock ({candidate.stock}) cannot exceed capacity ({candidate.capacity})",
                )

        candidate.mark_created(self.clock())
        self.store.create(candidate)

        logger.info(
            "warehouse_created",
            business_unit_code=code,
            location=candidate.location,
            capacity=candidate.capacity,
            stock=candidate.stock,
        )
        return candidate

    def replace(self, candidate: Warehouse) -> Warehouse:
        code = candidate.business_unit_code

        current = self.store.find_by_business_unit_code(code)
        if current is None:
            self._reject("replace", code, f"Warehouse with business unit code {code} does not exist")

        if current.is_archived:
            self._reject("replace", code, f"Cannot replace an archived warehouse. Business unit code: {code}")

        self._resolve_location("replace", candidate)
        self._require_positive_capacity("replace", candidate)

        # Absent stock counts as empty on both sides of a replacement.
        carried_stock = current.stock or 0
        new_stock = candidate.stock or 0

        if candidate.capacity < carried_stock:
            self._reject(
                "replace",
                code,
                f"New warehouse capacity ({candidate.capacity}) cannot accommodate "
                f"stock from old warehouse ({carried_stock})",
            )

        if new_stock != carried_stock:
            self._reject(
                "replace",
                code,
                f"New warehouse stock ({new_stock}) must match the old warehouse stock ({carried_stock})",
            )

        current.replace_with(
            location=candidate.location,
            capacity=candidate.capacity,
            stock=candidate.stock,
            at=self.clock(),
        )
        self.store.update(current)

        logger.info(
            "warehouse_replaced",
            business_unit_code=code,
            location=current.location,
            capacity=current.capacity,
        )
        return current

    def archive(self, target: Warehouse | None) -> None:
        if target is None:
            self._reject("archive", None, "Warehouse cannot be None")

        code = target.business_unit_code

        existing = self.store.find_by_business_unit_code(code)
        if existing is None:
            self._reject("archive", code, f"Warehouse with business unit code {code} does not exist")

        if existing.is_archived:
            self._reject("archive", code, f"Warehouse with business unit code {code} is already archived")

        existing.archive(self.clock())
        self.store.update(existing)

        logger.info("warehouse_archived", business_unit_code=code, location=existing.location)

    # ------------------------------------------------------------------
    # Rules shared by create and replace
    # ------------------------------------------------------------------
    def _resolve_location(self, operation: str, candidate: Warehouse) -> Location:
        location = self.locations.resolve(candidate.location)
        if location is None:
            self._reject(
                operation,
                candidate.business_unit_code,
                f"Location {candidate.location} is not a valid location",
            )
        return location

    def _require_positive_capacity(self, operation: str, candidate: Warehouse) -> None:
        if candidate.capacity is None or candidate.capacity <= 0:
            self._reject(operation, candidate.business_unit_code, "Warehouse capacity must be greater than zero")

    def _active_at(self, location_id: str) -> list[Warehouse]:
        return [w for w in self.store.get_all() if w.location == location_id and not w.is_archived]

    @staticmethod
    def _reject(operation: str, code: str | None, reason: str):
        logger.info("warehouse_rejected", operation=operation, business_unit_code=code, reason=reason)
        raise WarehouseValidationError(reason)
