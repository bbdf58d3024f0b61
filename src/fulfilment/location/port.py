"""Location directory port — resolves a location identifier to its capacity rules.

Locations are reference data owned outside this service. The warehouse
lifecycle only reads them; it never creates or changes a location.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Capacity rules of a physical location warehouses are placed into."""

    identification: str
    max_number_of_warehouses: int
    max_capacity: int


class LocationDirectory(ABC):
    """Abstract interface for location lookups."""

    @abstractmethod
    def resolve(self, identifier: str) -> Location | None:
        """Return the location registered under `identifier`, or None when unknown."""
        ...
