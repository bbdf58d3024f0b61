"""The fixed catalogue of known locations."""

from collections.abc import Iterable

from fulfilment.location.port import Location, LocationDirectory

DEFAULT_LOCATIONS = (
    Location("ZWOLLE-001", 1, 40),
    Location("ZWOLLE-002", 2, 50),
    Location("AMSTERDAM-001", 5, 100),
    Location("AMSTERDAM-002", 3, 75),
    Location("TILBURG-001", 1, 40),
    Location("HELMOND-001", 1, 45),
    Location("EINDHOVEN-001", 2, 70),
    Location("VETSBY-001", 1, 90),
)


class StaticLocationDirectory(LocationDirectory):
    """Read-only, in-process lookup over a fixed set of locations."""

    def __init__(self, locations: Iterable[Location] | None = None):
        source = DEFAULT_LOCATIONS if locations is None else locations
        self._locations = {location.identification: location for location in source}

    def resolve(self, identifier: str) -> Location | None:
        if identifier is None:
            return None
        return self._locations.get(identifier)

    def identifiers(self) -> list[str]:
        return sorted(self._locations)
